class PlanError(Exception):
    """Base class for failures while generating a wave."""


class InsufficientLifts(PlanError):
    """
    A category, muscle or region combination had too few candidates.
    Raised while the pools are built, before any week is generated.
    """

    def __init__(self, required_for, needed=1, available=0):
        self.required_for = str(getattr(required_for, "value", required_for))
        self.needed = needed
        self.available = available
        super().__init__(
            f"not enough lifts available for {self.required_for} "
            f"(need {needed}, have {available})"
        )


class CatalogLookupFailed(PlanError):

    def __init__(self, name):
        self.name = name
        super().__init__(f"no lift named {name!r} in the catalog")


class InvalidOverride(PlanError):
    """An override hook returned a plan that does not fit the wave."""


class LiftNotFound(LookupError):
    """Raised by catalogs when a lift name is unknown."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)
