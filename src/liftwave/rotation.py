"""
Max effort rotation.

Lower-body weeks alternate squat (even weeks) and deadlift (odd weeks)
variations, upper-body weeks alternate bench and overhead press. Variations
are drawn without replacement, so a wave never repeats a max effort lift
within a region. Deload weeks reuse the two lifts trained just before them.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .config import DELOAD_EVERY, Category, Exercise, Region
from .errors import InsufficientLifts, InvalidOverride
from .utils import is_deload_week, weeks_of_parity

logger = logging.getLogger(__name__)

# (even week category, odd week category) per region.
ROTATION = {
    Region.LOWER: (Category.SQUAT, Category.DEADLIFT),
    Region.UPPER: (Category.BENCH_PRESS, Category.OVERHEAD_PRESS),
}


@dataclass(frozen=True)
class MaxEffortPlan:
    lower: Tuple[Exercise, ...]
    upper: Tuple[Exercise, ...]

    def __len__(self):
        return len(self.lower)

    def for_region(self, region: Region) -> Tuple[Exercise, ...]:
        if region == Region.LOWER:
            return self.lower
        elif region == Region.UPPER:
            return self.upper
        raise ValueError(f"No max effort rotation for {region.value} region.")


@dataclass(frozen=True)
class DeloadPair:
    # Even week lift (squat / bench) first, odd week lift second.
    first: Exercise
    second: Exercise

    def __iter__(self):
        return iter((self.first, self.second))


PlanOverride = Callable[[MaxEffortPlan], MaxEffortPlan]


def _draw_weeks(catalog, category, needed, rng):
    candidates = catalog.lifts_by_category(category)
    if len(candidates) < needed:
        raise InsufficientLifts(category, needed=needed, available=len(candidates))
    order = rng.permutation(len(candidates))[:needed]
    return [candidates[int(i)] for i in order]


def propose_plan(num_weeks: int, catalog, rng: np.random.Generator) -> MaxEffortPlan:
    """
    Shuffle each primary category once and deal the variations out to the
    weeks of matching parity.
    """
    regions = {}
    for region, categories in ROTATION.items():
        dealt = [
            _draw_weeks(catalog, category, weeks_of_parity(num_weeks, parity), rng)
            for parity, category in enumerate(categories)
        ]
        regions[region] = tuple(dealt[week % 2][week // 2] for week in range(num_weeks))
    return MaxEffortPlan(lower=regions[Region.LOWER], upper=regions[Region.UPPER])


def derive_deload_pairs(lifts, every = DELOAD_EVERY) -> Dict[int, DeloadPair]:
    pairs = {}
    for week in range(len(lifts)):
        if not is_deload_week(week, every):
            continue
        older, newer = lifts[week - 2], lifts[week - 1]
        if (week - 2) % 2 == 0:
            pairs[week] = DeloadPair(older, newer)
        else:
            pairs[week] = DeloadPair(newer, older)
    return pairs


def _check_override(proposed: MaxEffortPlan, final: MaxEffortPlan):
    if not isinstance(final, MaxEffortPlan):
        raise InvalidOverride(f"Override returned {type(final).__name__}, expected MaxEffortPlan.")
    for region, categories in ROTATION.items():
        lifts = final.for_region(region)
        if len(lifts) != len(proposed):
            raise InvalidOverride(
                f"Override changed the {region.value} plan to {len(lifts)} weeks, "
                f"the wave has {len(proposed)}."
            )
        for week, lift in enumerate(lifts):
            if lift.category != categories[week % 2]:
                raise InvalidOverride(
                    f"Week {week + 1} {region.value} lift {lift.name!r} is not a "
                    f"{categories[week % 2].value} variation."
                )


class PrimaryLiftRotation:

    def __init__(self, plan: MaxEffortPlan, deload_every = DELOAD_EVERY):
        self.plan = plan
        self.deload_every = deload_every
        self._deload = {
            region: derive_deload_pairs(plan.for_region(region), deload_every)
            for region in ROTATION
        }

    @classmethod
    def from_catalog(
        cls,
        num_weeks: int,
        catalog,
        rng: np.random.Generator,
        override: Optional[PlanOverride] = None,
        deload_every = DELOAD_EVERY,
    ):
        proposed = propose_plan(num_weeks, catalog, rng)
        plan = proposed
        if override is not None:
            plan = override(proposed)
            _check_override(proposed, plan)
        for week in range(num_weeks):
            logger.debug(
                "Week %d max effort: %s / %s", week + 1, plan.lower[week].name, plan.upper[week].name
            )
        return cls(plan, deload_every)

    def __len__(self):
        return len(self.plan)

    def lift(self, region: Region, week: int) -> Exercise:
        return self.plan.for_region(region)[week]

    def next_lift(self, region: Region, week: int) -> Exercise:
        """The lift scheduled the following week, wrapping at the end of the wave."""
        lifts = self.plan.for_region(region)
        return lifts[(week + 1) % len(lifts)]

    def deload_pair(self, region: Region, week: int) -> DeloadPair:
        try:
            return self._deload[region][week]
        except KeyError:
            raise ValueError(f"Week {week + 1} is not a {region.value} deload week.") from None

    def deload_pairs(self, region: Region) -> Dict[int, DeloadPair]:
        return dict(self._deload[region])
