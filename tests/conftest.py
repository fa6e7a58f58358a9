import numpy as np
import pytest

from liftwave.config import Category, Exercise, Muscle, Region
from liftwave.load import InMemoryCatalog

LOWER, UPPER = Region.LOWER, Region.UPPER

SEED_LIFTS = [
    ("Back Squat", LOWER, Category.SQUAT, ()),
    ("Front Squat", LOWER, Category.SQUAT, ()),
    ("Box Squat", LOWER, Category.SQUAT, ()),
    ("Safety Bar Squat", LOWER, Category.SQUAT, ()),
    ("Conventional Deadlift", LOWER, Category.DEADLIFT, ()),
    ("Sumo Deadlift", LOWER, Category.DEADLIFT, ()),
    ("Block Pull", LOWER, Category.DEADLIFT, ()),
    ("Deficit Deadlift", LOWER, Category.DEADLIFT, ()),
    ("Bench Press", UPPER, Category.BENCH_PRESS, ()),
    ("Floor Press", UPPER, Category.BENCH_PRESS, ()),
    ("Close Grip Bench", UPPER, Category.BENCH_PRESS, ()),
    ("Board Press", UPPER, Category.BENCH_PRESS, ()),
    ("Overhead Press", UPPER, Category.OVERHEAD_PRESS, ()),
    ("Push Press", UPPER, Category.OVERHEAD_PRESS, ()),
    ("Z Press", UPPER, Category.OVERHEAD_PRESS, ()),
    ("Behind The Neck Press", UPPER, Category.OVERHEAD_PRESS, ()),
    ("Sled Push", LOWER, Category.CONDITIONING, ()),
    ("Bike", UPPER, Category.CONDITIONING, ()),
    ("Leg Swings", LOWER, Category.MOBILITY, ()),
    ("Shoulder CARs", UPPER, Category.MOBILITY, ()),
    ("Lower Accessory 1", LOWER, Category.ACCESSORY, (Muscle.GLUTE,)),
    ("Lower Accessory 2", LOWER, Category.ACCESSORY, (Muscle.GLUTE,)),
    ("Upper Accessory 1", UPPER, Category.ACCESSORY, (Muscle.CHEST,)),
    ("Upper Accessory 2", UPPER, Category.ACCESSORY, (Muscle.CHEST,)),
    ("Hamstring Curl", LOWER, Category.ACCESSORY, (Muscle.HAMSTRING,)),
    ("Leg Extension", LOWER, Category.ACCESSORY, (Muscle.QUAD,)),
    ("Calf Raise", LOWER, Category.ACCESSORY, (Muscle.CALF,)),
    ("Lat Pulldown", UPPER, Category.ACCESSORY, (Muscle.LAT,)),
    ("Tricep Pushdown", UPPER, Category.ACCESSORY, (Muscle.TRICEP,)),
    ("Rear Delt Fly", UPPER, Category.ACCESSORY, (Muscle.REAR_DELT,)),
    ("Lateral Raise", UPPER, Category.ACCESSORY, (Muscle.SHOULDER,)),
    ("Front Raise", UPPER, Category.ACCESSORY, (Muscle.FRONT_DELT,)),
    ("DB Shrug", UPPER, Category.ACCESSORY, (Muscle.TRAP,)),
    ("Plank", LOWER, Category.ACCESSORY, (Muscle.CORE,)),
    ("Deadbug", LOWER, Category.ACCESSORY, (Muscle.CORE,)),
    ("Curl", UPPER, Category.ACCESSORY, (Muscle.BICEP,)),
    ("Wrist Curl", UPPER, Category.ACCESSORY, (Muscle.FOREARM,)),
]


def make_exercise(name, region=LOWER, category=None, muscles=()):
    return Exercise(name=name, region=region, category=category, muscles=muscles)


def make_catalog(exclude=(), extra=()):
    """Seed catalog without the named lifts, plus any extra exercises."""
    lifts = [make_exercise(*row) for row in SEED_LIFTS if row[0] not in exclude]
    return InMemoryCatalog(lifts + list(extra))


@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
