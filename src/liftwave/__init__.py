from .errors import CatalogLookupFailed, InsufficientLifts, InvalidOverride, LiftNotFound, PlanError
from .training_program import ConjugateBuilder, HypertrophyBuilder, PlanBuilder, get_builder

__version__ = "0.1.0"
