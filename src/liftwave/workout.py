"""
Structures describing a generated wave.

A wave is a list of weeks, a week maps training days to day plans, and a day
plan is an ordered list of labelled steps. Steps are either a single lift or a
circuit of single lifts.
"""
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .config import Exercise


class Weekday(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self):
        return self.name.capitalize()


class ResistanceModality(Enum):
    STRAIGHT = "straight"
    CHAINS = "chains"
    BANDS = "bands"


RESISTED_MODALITIES = (ResistanceModality.CHAINS, ResistanceModality.BANDS)


@dataclass(frozen=True)
class Reps:
    reps: int


@dataclass(frozen=True)
class RepsLeftRight:
    left: int
    right: int


@dataclass(frozen=True)
class RepsRange:
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Rep range {self.min}-{self.max} is inverted.")


@dataclass(frozen=True)
class TimeSeconds:
    seconds: int


@dataclass(frozen=True)
class DistanceFeet:
    feet: int


PerformanceTarget = Union[Reps, RepsLeftRight, RepsRange, TimeSeconds, DistanceFeet]


def describe_target(target: PerformanceTarget) -> str:
    """Short human readable form of a set target, e.g. "8-12 reps"."""
    if isinstance(target, Reps):
        return f"{target.reps} reps"
    elif isinstance(target, RepsLeftRight):
        return f"{target.left}/{target.right} reps (L/R)"
    elif isinstance(target, RepsRange):
        return f"{target.min}-{target.max} reps"
    elif isinstance(target, TimeSeconds):
        return f"{target.seconds}s"
    elif isinstance(target, DistanceFeet):
        return f"{target.feet}ft"
    raise TypeError(f"Unknown performance target {target!r}")


@dataclass(frozen=True)
class Single:
    exercise: Exercise
    target: Optional[PerformanceTarget] = None
    load_percent: Optional[int] = None
    rpe: Optional[float] = None
    modality: Optional[ResistanceModality] = None
    is_deload: bool = False

    def as_deload(self):
        return replace(self, is_deload=True)


@dataclass(frozen=True)
class Circuit:
    steps: Tuple[Single, ...]
    rounds: int
    is_warmup: bool = False


@dataclass(frozen=True)
class WorkoutStep:
    # Presentation only, never branch on it.
    label: str
    kind: Union[Single, Circuit]

    def singles(self) -> Tuple[Single, ...]:
        if isinstance(self.kind, Single):
            return (self.kind,)
        elif isinstance(self.kind, Circuit):
            return self.kind.steps
        raise TypeError(f"Unknown workout step {self.kind!r}")


def repeated(label: str, single: Single, sets: int) -> List[WorkoutStep]:
    return [WorkoutStep(label, single) for _ in range(sets)]


@dataclass
class DayPlan:
    steps: List[WorkoutStep] = field(default_factory=list)

    def add(self, step: WorkoutStep):
        self.steps.append(step)

    def extend(self, steps):
        self.steps.extend(steps)

    def labelled(self, label: str) -> List[WorkoutStep]:
        return [step for step in self.steps if step.label == label]

    def singles(self) -> List[Single]:
        return [single for step in self.steps for single in step.singles()]


WeekPlan = Dict[Weekday, DayPlan]
Wave = List[WeekPlan]


def iter_wave(wave: Wave) -> Iterator[Tuple[int, Weekday, DayPlan]]:
    """
    Walk a wave the way presentation layers consume it: weeks in order
    (1-indexed), days Monday to Sunday, skipping days without a plan.
    """
    for week_number, week in enumerate(wave, start=1):
        for day in Weekday:
            if day in week:
                yield week_number, day, week[day]
