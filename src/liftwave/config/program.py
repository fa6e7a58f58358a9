from typing import Dict, List, Tuple

from pydantic import ValidationInfo, field_validator

from .config import Config
from .constants import DELOAD_EVERY
from .exercises import PRIMARY_CATEGORIES, Category


class ConjugateProgram(Config):
    # Every Nth week (1-indexed) is a deload week.
    deload_every: int = DELOAD_EVERY
    # Dynamic effort wave as (percent of max, resisted) keyed by week % len(cycle).
    # Resisted weeks use the plan's chains/bands choice, the rest straight weight.
    dynamic_effort_cycle: List[Tuple[int, bool]] = [
        (60, False),
        (65, False),
        (70, False),
        (50, True),
        (55, True),
        (60, True),
    ]
    # (sets, reps) of dynamic effort work per primary category.
    dynamic_sets: Dict[Category, Tuple[int, int]] = {
        Category.SQUAT: (6, 3),
        Category.DEADLIFT: (6, 2),
        Category.BENCH_PRESS: (9, 3),
        Category.OVERHEAD_PRESS: (6, 2),
    }
    # (sets, reps) of straight-weight speed work on deload weeks.
    dynamic_deload_sets: Dict[Category, Tuple[int, int]] = {
        Category.SQUAT: (3, 3),
        Category.DEADLIFT: (3, 2),
        Category.BENCH_PRESS: (5, 3),
        Category.OVERHEAD_PRESS: (3, 2),
    }
    dynamic_deload_percent: int = 50
    # Backoff work after the max effort single.
    backoff_sets: int = 2
    backoff_reps: int = 5
    backoff_percent: int = 70
    backoff_rpe: float = 7.0
    # Supplemental work on next week's max effort lift.
    supplemental_sets: int = 3
    supplemental_reps: int = 5
    supplemental_percent: int = 80
    # Technique work on the deload lift pair.
    technique_sets: int = 3
    technique_reps: int = 3
    technique_percent: int = 70
    technique_rpe: float = 6.0
    # Conditioning duration in seconds.
    conditioning_seconds: int = 600
    light_conditioning_seconds: int = 300
    accessory_rounds: int = 3
    deload_rounds: int = 2
    # Looked up by name when the catalog has no lift of the category.
    dynamic_fallback_names: Dict[Category, str] = {
        Category.SQUAT: "Squat",
        Category.DEADLIFT: "Deadlift",
        Category.BENCH_PRESS: "Bench Press",
        Category.OVERHEAD_PRESS: "Overhead Press",
    }

    @field_validator("deload_every")
    @classmethod
    def _room_for_deload_pair(cls, value):
        if value < 3:
            # A deload reuses the two weeks before it.
            raise ValueError("deload_every must be at least 3")
        return value

    @field_validator("dynamic_effort_cycle")
    @classmethod
    def _non_empty_cycle(cls, value):
        if not value:
            raise ValueError("dynamic_effort_cycle needs at least one week")
        return value

    @field_validator("dynamic_sets", "dynamic_deload_sets", "dynamic_fallback_names")
    @classmethod
    def _fill_primary_categories(cls, value, info: ValidationInfo):
        # Partial overrides keep the defaults for the categories they leave out.
        extra = [category.value for category in value if category not in PRIMARY_CATEGORIES]
        if extra:
            raise ValueError(f"{info.field_name} only takes primary lifts, got {', '.join(extra)}")
        return {**cls.model_fields[info.field_name].default, **value}


class HypertrophyProgram(Config):
    main_sets: int = 4
    supplemental_sets: int = 3
    # Rep ranges as (min, max).
    upper_main_reps: Tuple[int, int] = (8, 12)
    upper_supplemental_reps: Tuple[int, int] = (10, 15)
    lower_main_reps: Tuple[int, int] = (6, 10)
    lower_supplemental_reps: Tuple[int, int] = (8, 12)
    rpe: float = 8.0
    accessory_rounds: int = 3
