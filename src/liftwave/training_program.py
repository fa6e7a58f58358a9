import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type

import numpy as np

from .config import Category, Config, ConjugateProgram, HypertrophyProgram, Muscle, Region
from .dynamic_effort import SelectionOverride, dynamic_effort_scheme, select_dynamic_lifts
from .pools import (
    ConditioningPools,
    FairPool,
    MuscleAccessoryPools,
    WarmupPools,
    draw_from,
    required_pool,
)
from .rotation import PlanOverride, PrimaryLiftRotation
from .utils import is_deload_week
from .workout import (
    DayPlan,
    Reps,
    RepsRange,
    ResistanceModality,
    Single,
    TimeSeconds,
    Wave,
    WeekPlan,
    Weekday,
    WorkoutStep,
    repeated,
)

logger = logging.getLogger(__name__)

TRAINING_DAYS = (Weekday.MONDAY, Weekday.TUESDAY, Weekday.THURSDAY, Weekday.FRIDAY)

REGION_CATEGORIES = {
    Region.LOWER: (Category.SQUAT, Category.DEADLIFT),
    Region.UPPER: (Category.BENCH_PRESS, Category.OVERHEAD_PRESS),
}


class PlanBuilder(ABC):
    """
    A periodisation strategy. Builders hold configuration only; every call to
    build() starts from fresh pools, so repeated calls with the same seed and
    catalog give the same wave.
    """

    name: str = ""
    program_cls: Type[Config] = Config
    training_days: Tuple[Weekday, ...] = TRAINING_DAYS

    def __init__(self, seed=None):
        self.seed = seed

    def _rng(self, rng: Optional[np.random.Generator]) -> np.random.Generator:
        if rng is not None:
            return rng
        return np.random.default_rng(self.seed)

    @abstractmethod
    def build(self, weeks: int, catalog, rng: Optional[np.random.Generator] = None) -> Wave:
        """
        Generate a wave of the requested length. Raises a PlanError before any
        week is built if the catalog cannot support the strategy.
        """


def _check_weeks(weeks):
    if weeks < 0:
        raise ValueError(f"Number of weeks must be non-negative, got {weeks}.")


CONJUGATE_MUSCLES = (
    Muscle.HAMSTRING,
    Muscle.QUAD,
    Muscle.CALF,
    Muscle.LAT,
    Muscle.TRICEP,
    Muscle.REAR_DELT,
    Muscle.SHOULDER,
    Muscle.FRONT_DELT,
    Muscle.TRAP,
    Muscle.CORE,
    Muscle.BICEP,
)

MAX_EFFORT_CIRCUITS = {
    Region.LOWER: (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CALF),
    Region.UPPER: (Muscle.LAT, Muscle.TRICEP),
}
UPPER_THIRD_MUSCLES = (Muscle.REAR_DELT, Muscle.SHOULDER, Muscle.FRONT_DELT, Muscle.TRAP)
DYNAMIC_EFFORT_CIRCUITS = {
    Region.LOWER: (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CALF),
    Region.UPPER: (Muscle.LAT, Muscle.TRICEP, Muscle.BICEP),
}
DELOAD_CIRCUITS = {
    Region.LOWER: (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CORE),
    Region.UPPER: (Muscle.LAT, Muscle.TRICEP, Muscle.CORE),
}


class ConjugateBuilder(PlanBuilder):
    """
    Four days a week: lower and upper max effort on Monday and Tuesday, lower
    and upper dynamic effort on Thursday and Friday. Every
    `program.deload_every`-th week is a deload.
    """

    name = "conjugate"
    program_cls = ConjugateProgram

    def __init__(
        self,
        program: Optional[ConjugateProgram] = None,
        seed=None,
        max_effort_override: Optional[PlanOverride] = None,
        dynamic_override: Optional[SelectionOverride] = None,
    ):
        super().__init__(seed)
        self.program = program or ConjugateProgram()
        self.max_effort_override = max_effort_override
        self.dynamic_override = dynamic_override

    def build(self, weeks, catalog, rng=None):
        _check_weeks(weeks)
        rng = self._rng(rng)
        logger.info("Building %d-week %s wave", weeks, self.name)

        rotation = PrimaryLiftRotation.from_catalog(
            weeks,
            catalog,
            rng,
            override=self.max_effort_override,
            deload_every=self.program.deload_every,
        )
        dynamic = select_dynamic_lifts(
            catalog,
            rng,
            fallback_names=self.program.dynamic_fallback_names,
            override=self.dynamic_override,
        )
        session = ConjugateSession(
            self.program,
            rotation,
            dynamic,
            conditioning=ConditioningPools(catalog, rng),
            warmups=WarmupPools(catalog, rng),
            accessories=MuscleAccessoryPools(catalog, rng, CONJUGATE_MUSCLES),
            rng=rng,
        )

        wave = [session.sample_week(week) for week in range(weeks)]
        logger.info("Built %d-week %s wave", len(wave), self.name)
        return wave


class ConjugateSession:
    """Per-build state of a conjugate wave: the pools and the plan-scoped picks."""

    def __init__(self, program, rotation, dynamic, conditioning, warmups, accessories, rng):
        self.program = program
        self.rotation = rotation
        self.dynamic = dynamic
        self.conditioning_pools = conditioning
        self.warmups = warmups
        self.accessories = accessories
        self.rng = rng

    def is_deload(self, week):
        return is_deload_week(week, self.program.deload_every)

    def sample_week(self, week) -> WeekPlan:
        if self.is_deload(week):
            logger.debug("Week %d is a deload week", week + 1)
        return {
            Weekday.MONDAY: self.max_effort_day(Region.LOWER, week),
            Weekday.TUESDAY: self.max_effort_day(Region.UPPER, week),
            Weekday.THURSDAY: self.dynamic_effort_day(Region.LOWER, week),
            Weekday.FRIDAY: self.dynamic_effort_day(Region.UPPER, week),
        }

    def max_effort_day(self, region, week) -> DayPlan:
        program = self.program
        day = DayPlan()
        day.add(self.warmups.warmup(region))

        if self.is_deload(week):
            for lift in self.rotation.deload_pair(region, week):
                day.extend(repeated(
                    "Deload Technique",
                    Single(
                        lift,
                        target=Reps(program.technique_reps),
                        load_percent=program.technique_percent,
                        rpe=program.technique_rpe,
                        is_deload=True,
                    ),
                    program.technique_sets,
                ))
            self._close_deload_day(day, region)
            return day

        lift = self.rotation.lift(region, week)
        day.add(WorkoutStep("Max Effort Single", Single(lift, target=Reps(1))))
        day.extend(repeated(
            "Backoff Sets",
            Single(lift, target=Reps(program.backoff_reps), load_percent=program.backoff_percent, rpe=program.backoff_rpe),
            program.backoff_sets,
        ))
        day.extend(repeated(
            "Supplemental Sets",
            Single(
                self.rotation.next_lift(region, week),
                target=Reps(program.supplemental_reps),
                load_percent=program.supplemental_percent,
            ),
            program.supplemental_sets,
        ))

        muscles = MAX_EFFORT_CIRCUITS[region]
        if region == Region.UPPER:
            muscles = muscles + (UPPER_THIRD_MUSCLES[int(self.rng.integers(len(UPPER_THIRD_MUSCLES)))],)
        self._close_day(day, region, muscles)
        return day

    def dynamic_effort_day(self, region, week) -> DayPlan:
        program = self.program
        day = DayPlan()
        day.add(self.warmups.warmup(region))

        if self.is_deload(week):
            for category in REGION_CATEGORIES[region]:
                sets, reps = program.dynamic_deload_sets[category]
                day.extend(repeated(
                    "Deload Speed Work",
                    Single(
                        self.dynamic.for_category(category).exercise,
                        target=Reps(reps),
                        load_percent=program.dynamic_deload_percent,
                        modality=ResistanceModality.STRAIGHT,
                        is_deload=True,
                    ),
                    sets,
                ))
            self._close_deload_day(day, region)
            return day

        for category in REGION_CATEGORIES[region]:
            dynamic_lift = self.dynamic.for_category(category)
            percent, modality = dynamic_effort_scheme(
                week, dynamic_lift.modality, program.dynamic_effort_cycle
            )
            sets, reps = program.dynamic_sets[category]
            day.extend(repeated(
                "Dynamic Effort",
                Single(dynamic_lift.exercise, target=Reps(reps), load_percent=percent, modality=modality),
                sets,
            ))
        self._close_day(day, region, DYNAMIC_EFFORT_CIRCUITS[region])
        return day

    def _close_day(self, day, region, muscles):
        day.add(self.accessories.circuit(muscles, rounds=self.program.accessory_rounds))
        day.add(WorkoutStep(
            "Conditioning",
            Single(
                self.conditioning_pools.draw(region),
                target=TimeSeconds(self.program.conditioning_seconds),
            ),
        ))
        forearm = self.accessories.forearm()
        if forearm is not None:
            day.add(WorkoutStep("Forearm Finisher", forearm))

    def _close_deload_day(self, day, region):
        day.add(self.accessories.circuit(
            DELOAD_CIRCUITS[region],
            rounds=self.program.deload_rounds,
            deload=True,
            label="Deload Circuit",
        ))
        day.add(WorkoutStep(
            "Light Conditioning",
            Single(
                self.conditioning_pools.draw(region),
                target=TimeSeconds(self.program.light_conditioning_seconds),
                is_deload=True,
            ),
        ))


HYPERTROPHY_MUSCLES = (
    Muscle.LAT,
    Muscle.TRICEP,
    Muscle.REAR_DELT,
    Muscle.SHOULDER,
    Muscle.BICEP,
    Muscle.QUAD,
    Muscle.CALF,
    Muscle.CORE,
    Muscle.HAMSTRING,
    Muscle.TRAP,
)

# day, region, main category, supplemental category, accessory muscles
HYPERTROPHY_DAYS = (
    (Weekday.MONDAY, Region.UPPER, Category.BENCH_PRESS, Category.OVERHEAD_PRESS,
     (Muscle.LAT, Muscle.TRICEP, Muscle.REAR_DELT)),
    (Weekday.TUESDAY, Region.LOWER, Category.SQUAT, Category.DEADLIFT,
     (Muscle.QUAD, Muscle.CALF, Muscle.CORE)),
    (Weekday.THURSDAY, Region.UPPER, Category.OVERHEAD_PRESS, Category.BENCH_PRESS,
     (Muscle.SHOULDER, Muscle.TRICEP, Muscle.BICEP)),
    (Weekday.FRIDAY, Region.LOWER, Category.DEADLIFT, Category.SQUAT,
     (Muscle.HAMSTRING, Muscle.TRAP, Muscle.CORE)),
)


class HypertrophyBuilder(PlanBuilder):
    """
    Four days a week, each a main and a supplemental lift for sets in a rep
    range, closed by a three-muscle accessory circuit. Each primary category
    is trained twice a week, once as the main lift and once as supplemental.

    Primary lifts are drawn from one fair pool over the whole category rather
    than from a pool sized to the number of weeks. A lift only comes back once
    every other lift of its category has been used, and any non-empty category
    supports a wave of any length.
    """

    name = "hypertrophy"
    program_cls = HypertrophyProgram

    def __init__(self, program: Optional[HypertrophyProgram] = None, seed=None):
        super().__init__(seed)
        self.program = program or HypertrophyProgram()

    def build(self, weeks, catalog, rng=None):
        _check_weeks(weeks)
        rng = self._rng(rng)
        logger.info("Building %d-week %s wave", weeks, self.name)

        primaries: Dict[Category, FairPool] = {
            category: required_pool(catalog.lifts_by_category(category), rng, category)
            for categories in REGION_CATEGORIES.values()
            for category in categories
        }
        warmups = WarmupPools(catalog, rng)
        accessories = MuscleAccessoryPools(catalog, rng, HYPERTROPHY_MUSCLES)

        wave = []
        for week in range(weeks):
            wave.append({
                weekday: self.sample_day(
                    region,
                    draw_from(primaries[main], main),
                    draw_from(primaries[supplemental], supplemental),
                    muscles,
                    warmups,
                    accessories,
                )
                for weekday, region, main, supplemental, muscles in HYPERTROPHY_DAYS
            })
        logger.info("Built %d-week %s wave", len(wave), self.name)
        return wave

    def sample_day(self, region, main, supplemental, muscles, warmups, accessories) -> DayPlan:
        program = self.program
        if region == Region.UPPER:
            main_reps, supplemental_reps = program.upper_main_reps, program.upper_supplemental_reps
        else:
            main_reps, supplemental_reps = program.lower_main_reps, program.lower_supplemental_reps

        day = DayPlan()
        day.add(warmups.warmup(region))
        day.extend(repeated(
            "Main Hypertrophy",
            Single(main, target=RepsRange(*main_reps), rpe=program.rpe),
            program.main_sets,
        ))
        day.extend(repeated(
            "Supplemental Hypertrophy",
            Single(supplemental, target=RepsRange(*supplemental_reps), rpe=program.rpe),
            program.supplemental_sets,
        ))
        day.add(accessories.circuit(muscles, rounds=program.accessory_rounds))
        return day


BUILDERS = {
    ConjugateBuilder.name: ConjugateBuilder,
    HypertrophyBuilder.name: HypertrophyBuilder,
}


def get_builder(strategy, **kwargs) -> PlanBuilder:
    try:
        builder_cls = BUILDERS[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {strategy!r}, choose one of {', '.join(sorted(BUILDERS))}."
        ) from None
    return builder_cls(**kwargs)
