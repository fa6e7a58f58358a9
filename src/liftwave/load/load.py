from typing import Type

from .. import config
from ..utils import get_yaml
from .catalog import InMemoryCatalog


def parse_exercises(config_path):
    """
    Reads a YAML mapping of exercise name to its fields:

        Safety Bar Squat:
          region: lower
          category: squat
          muscles: [quad, glute]
    """
    cfg = config.Exercise
    config_dict = get_yaml(config_path) or {}
    exercises = []
    for name, exercise_dict in config_dict.items():
        exercise_dict = dict(exercise_dict or {})
        exercise_dict["name"] = name
        exercises.append(cfg(**exercise_dict))
    return tuple(exercises)


def parse_catalog(config_path):
    return InMemoryCatalog(parse_exercises(config_path))


def parse_program_config(config_path, cfg: Type[config.Config] = config.ConjugateProgram):
    config_dict = get_yaml(config_path) or {}
    return cfg(**config_dict)
