from enum import Enum
from typing import Optional, Tuple

from pydantic import ConfigDict, field_validator

from .config import Config


class Region(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full body"


class Category(str, Enum):
    SQUAT = "squat"
    DEADLIFT = "deadlift"
    BENCH_PRESS = "bench press"
    OVERHEAD_PRESS = "overhead press"
    CONDITIONING = "conditioning"
    ACCESSORY = "accessory"
    MOBILITY = "mobility"


PRIMARY_CATEGORIES = (
    Category.SQUAT,
    Category.DEADLIFT,
    Category.BENCH_PRESS,
    Category.OVERHEAD_PRESS,
)


class Muscle(str, Enum):
    BICEP = "bicep"
    TRICEP = "tricep"
    NECK = "neck"
    LAT = "lat"
    QUAD = "quad"
    HAMSTRING = "hamstring"
    CALF = "calf"
    LOWER_BACK = "lower back"
    CHEST = "chest"
    FOREARM = "forearm"
    REAR_DELT = "rear delt"
    FRONT_DELT = "front delt"
    SHOULDER = "shoulder"
    CORE = "core"
    GLUTE = "glute"
    TRAP = "trap"

    @classmethod
    def _missing_(cls, value):
        # Accept "REAR_DELT", "rear-delt" and friends from catalog files.
        if isinstance(value, str):
            normalised = value.strip().lower().replace("_", " ").replace("-", " ")
            for member in cls:
                if member.value == normalised:
                    return member
        return None


class Exercise(Config):
    model_config = ConfigDict(frozen=True)

    # Unique exercise name, e.g. "Safety Bar Squat".
    name: str
    # Upper- or lower-body movement.
    region: Region
    # Primary category. Blank for exercises that are only tracked, never programmed.
    category: Optional[Category] = None
    # Muscles primarily targeted by the exercise.
    muscles: Tuple[Muscle, ...] = ()
    # Free-form notes.
    notes: str = ""

    @field_validator("muscles", mode="before")
    @classmethod
    def _dedupe_muscles(cls, value):
        if value is None:
            return ()
        seen = []
        for muscle in value:
            muscle = Muscle(muscle)
            if muscle not in seen:
                seen.append(muscle)
        return tuple(seen)

    def targets(self, muscle: Muscle) -> bool:
        return muscle in self.muscles

    def __str__(self):
        return self.name
