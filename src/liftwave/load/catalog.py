from typing import Iterable, List, Protocol

from ..config import Category, Exercise, Muscle, Region
from ..errors import LiftNotFound


class LiftCatalog(Protocol):
    """Read-only view of the exercises a wave is built from."""

    def lifts_by_category(self, category: Category) -> List[Exercise]: ...

    def lifts_by_region_and_category(self, region: Region, category: Category) -> List[Exercise]: ...

    def accessories_by_muscle(self, muscle: Muscle) -> List[Exercise]: ...

    def lift_by_name(self, name: str) -> Exercise: ...


class InMemoryCatalog:
    """
    Catalog over a fixed list of exercises. Queries return lifts in the order
    they were loaded.
    """

    def __init__(self, exercises: Iterable[Exercise]):
        self._lifts = {}
        for exercise in exercises:
            if exercise.name in self._lifts:
                raise ValueError(f"Duplicate exercise name {exercise.name!r} in catalog.")
            self._lifts[exercise.name] = exercise

    def __len__(self):
        return len(self._lifts)

    def __iter__(self):
        return iter(self._lifts.values())

    def lifts_by_category(self, category):
        return [lift for lift in self._lifts.values() if lift.category == category]

    def lifts_by_region_and_category(self, region, category):
        return [
            lift for lift in self._lifts.values()
            if lift.region == region and lift.category == category
        ]

    def accessories_by_muscle(self, muscle):
        return [
            lift for lift in self._lifts.values()
            if lift.category == Category.ACCESSORY and lift.targets(muscle)
        ]

    def lift_by_name(self, name):
        try:
            return self._lifts[name]
        except KeyError:
            raise LiftNotFound(name) from None
