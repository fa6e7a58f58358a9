import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from .config import PRIMARY_CATEGORIES, Category, ConjugateProgram, Exercise
from .errors import CatalogLookupFailed, LiftNotFound
from .workout import RESISTED_MODALITIES, ResistanceModality

logger = logging.getLogger(__name__)

DEFAULT_CYCLE = tuple(ConjugateProgram().dynamic_effort_cycle)


@dataclass(frozen=True)
class DynamicLift:
    exercise: Exercise
    # Chains or bands, used on the resisted weeks of the cycle.
    modality: ResistanceModality


@dataclass(frozen=True)
class DynamicEffortSelection:
    squat: DynamicLift
    deadlift: DynamicLift
    bench: DynamicLift
    overhead: DynamicLift

    def for_category(self, category: Category) -> DynamicLift:
        if category == Category.SQUAT:
            return self.squat
        elif category == Category.DEADLIFT:
            return self.deadlift
        elif category == Category.BENCH_PRESS:
            return self.bench
        elif category == Category.OVERHEAD_PRESS:
            return self.overhead
        raise ValueError(f"{category.value} has no dynamic effort lift.")


SelectionOverride = Callable[[DynamicEffortSelection], DynamicEffortSelection]


def representative_lift(catalog, category: Category, fallback_name: str) -> Exercise:
    """
    First catalog lift of the category. The fallback name is only looked up
    when the category has no lifts at all.
    """
    lifts = catalog.lifts_by_category(category)
    if lifts:
        return lifts[0]
    logger.debug("No %s lifts, falling back to %r", category.value, fallback_name)
    try:
        return catalog.lift_by_name(fallback_name)
    except LiftNotFound as e:
        raise CatalogLookupFailed(fallback_name) from e


def select_dynamic_lifts(
    catalog,
    rng: np.random.Generator,
    fallback_names: Optional[Mapping[Category, str]] = None,
    override: Optional[SelectionOverride] = None,
) -> DynamicEffortSelection:
    if fallback_names is None:
        fallback_names = ConjugateProgram().dynamic_fallback_names
    chosen: Dict[Category, DynamicLift] = {}
    for category in PRIMARY_CATEGORIES:
        lift = representative_lift(catalog, category, fallback_names[category])
        modality = RESISTED_MODALITIES[int(rng.integers(len(RESISTED_MODALITIES)))]
        chosen[category] = DynamicLift(lift, modality)
        logger.debug("Dynamic %s: %s with %s", category.value, lift.name, modality.value)

    selection = DynamicEffortSelection(
        squat=chosen[Category.SQUAT],
        deadlift=chosen[Category.DEADLIFT],
        bench=chosen[Category.BENCH_PRESS],
        overhead=chosen[Category.OVERHEAD_PRESS],
    )
    if override is not None:
        selection = override(selection)
    return selection


def dynamic_effort_scheme(
    week_index: int,
    resisted: ResistanceModality,
    cycle: Sequence[Tuple[int, bool]] = DEFAULT_CYCLE,
) -> Tuple[int, ResistanceModality]:
    """
    (percent, modality) for a dynamic effort week. The cycle wraps, so every
    non-negative week has a scheme.
    """
    if week_index < 0:
        raise ValueError(f"Week index must be non-negative, got {week_index}.")
    percent, is_resisted = cycle[week_index % len(cycle)]
    return percent, resisted if is_resisted else ResistanceModality.STRAIGHT


def dynamic_effort_percent(week_index: int, cycle: Sequence[Tuple[int, bool]] = DEFAULT_CYCLE) -> int:
    return dynamic_effort_scheme(week_index, ResistanceModality.CHAINS, cycle)[0]
