import logging
from typing import Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

import numpy as np

from .config import ACCESSORY_REP_RANGE, FOREARM_PERCENT, FOREARM_REPS, WARMUP_ROUNDS
from .config import Category, Exercise, Muscle, Region
from .errors import InsufficientLifts
from .workout import Circuit, Reps, RepsRange, Single, WorkoutStep

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRAINED_REGIONS = (Region.LOWER, Region.UPPER)


class FairPool(Generic[T]):
    """
    Draws candidates in random order without immediate repeats.

    Every candidate is drawn once per pass over the set. When a pass is
    exhausted the order is reshuffled; if the new order would start with the
    candidate that was just drawn, that candidate is moved to the far end of
    the new order. Only a single-candidate pool ever repeats back to back.
    """

    def __init__(self, candidates: Iterable[T], rng: np.random.Generator):
        self._candidates: List[T] = list(candidates)
        self._rng = rng
        self._order: List[int] = []
        self._last: Optional[int] = None
        self._reshuffle()

    def __len__(self):
        return len(self._candidates)

    def is_empty(self) -> bool:
        return not self._candidates

    def draw(self) -> Optional[T]:
        if not self._candidates:
            return None
        if not self._order:
            self._reshuffle()
        idx = self._order.pop()
        self._last = idx
        return self._candidates[idx]

    def _reshuffle(self):
        order = [int(i) for i in self._rng.permutation(len(self._candidates))]
        # Draws pop from the end, so order[-1] is the next candidate out.
        if self._last is not None and len(order) > 1 and order[-1] == self._last:
            order[0], order[-1] = order[-1], order[0]
        self._order = order


def required_pool(candidates: Sequence[T], rng, required_for, minimum=1) -> FairPool[T]:
    if len(candidates) < minimum:
        raise InsufficientLifts(required_for, needed=minimum, available=len(candidates))
    return FairPool(candidates, rng)


def draw_from(pool: FairPool[T], required_for) -> T:
    item = pool.draw()
    if item is None:
        raise InsufficientLifts(required_for)
    return item


class MuscleAccessoryPools:
    """One fair pool of accessory exercises per tracked muscle."""

    def __init__(self, catalog, rng: np.random.Generator, required: Sequence[Muscle]):
        self._pools: Dict[Muscle, FairPool[Exercise]] = {}
        for muscle in required:
            lifts = catalog.accessories_by_muscle(muscle)
            self._pools[muscle] = required_pool(lifts, rng, muscle)
            logger.debug("%d accessory lifts for %s", len(lifts), muscle.value)

        forearms = catalog.accessories_by_muscle(Muscle.FOREARM)
        if forearms:
            self._forearms = FairPool(forearms, rng)
        else:
            logger.warning("No forearm accessories in catalog, skipping forearm finishers.")
            self._forearms = None

    @property
    def muscles(self):
        return tuple(self._pools)

    def single(self, muscle: Muscle) -> Single:
        pool = self._pools.get(muscle)
        if pool is None:
            raise InsufficientLifts(muscle)
        return Single(draw_from(pool, muscle), target=RepsRange(*ACCESSORY_REP_RANGE))

    def forearm(self) -> Optional[Single]:
        if self._forearms is None:
            return None
        return Single(
            self._forearms.draw(),
            target=Reps(FOREARM_REPS),
            load_percent=FOREARM_PERCENT,
        )

    def circuit(self, muscles: Sequence[Muscle], rounds: int, deload=False, label="Accessory Circuit") -> WorkoutStep:
        lifts = [self.single(muscle) for muscle in muscles]
        if deload:
            lifts = [lift.as_deload() for lift in lifts]
        return WorkoutStep(label, Circuit(tuple(lifts), rounds=rounds))


class WarmupPools:
    """
    Pools behind the warm-up circuit: mobility, two region accessories and a
    core exercise, always in that order.
    """

    def __init__(self, catalog, rng: np.random.Generator):
        self._core = required_pool(catalog.accessories_by_muscle(Muscle.CORE), rng, "core warm-up")
        self._mobility: Dict[Region, FairPool[Exercise]] = {}
        self._accessories: Dict[Region, FairPool[Exercise]] = {}
        for region in TRAINED_REGIONS:
            self._mobility[region] = required_pool(
                catalog.lifts_by_region_and_category(region, Category.MOBILITY),
                rng,
                f"{region.value} mobility",
            )
            accessories = [
                lift for lift in catalog.lifts_by_region_and_category(region, Category.ACCESSORY)
                if not (lift.targets(Muscle.FOREARM) or lift.targets(Muscle.CORE))
            ]
            self._accessories[region] = required_pool(
                accessories, rng, f"{region.value} warm-up accessories", minimum=2
            )

    def warmup(self, region: Region) -> WorkoutStep:
        if region not in self._mobility:
            raise InsufficientLifts(f"{region.value} warm-up")
        mobility = draw_from(self._mobility[region], f"{region.value} mobility")
        accessories = self._accessories[region]
        first = draw_from(accessories, f"{region.value} warm-up accessories")
        second = draw_from(accessories, f"{region.value} warm-up accessories")
        core = draw_from(self._core, "core warm-up")
        steps = tuple(Single(lift) for lift in (mobility, first, second, core))
        return WorkoutStep("Warmup Circuit", Circuit(steps, rounds=WARMUP_ROUNDS, is_warmup=True))


class ConditioningPools:

    def __init__(self, catalog, rng: np.random.Generator):
        self._pools = {
            region: required_pool(
                catalog.lifts_by_region_and_category(region, Category.CONDITIONING),
                rng,
                f"{region.value} conditioning",
            )
            for region in TRAINED_REGIONS
        }

    def draw(self, region: Region) -> Exercise:
        pool = self._pools.get(region)
        if pool is None:
            raise InsufficientLifts(f"{region.value} conditioning")
        return draw_from(pool, f"{region.value} conditioning")
