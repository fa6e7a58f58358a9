import yaml

from .config import DELOAD_EVERY


def get_yaml(filepath):
    with open(filepath, "r") as f:
        yamlfile = yaml.safe_load(f)
    return yamlfile


def is_deload_week(week_index, every = DELOAD_EVERY):
    """
    0-indexed week. With the default cadence weeks 6, 13, 20, ... are deloads.
    """
    if week_index < 0:
        raise ValueError(f"Week index must be non-negative, got {week_index}.")
    return (week_index + 1) % every == 0


def weeks_of_parity(num_weeks, parity):
    """
    Number of 0-indexed weeks below num_weeks with week % 2 == parity,
    i.e. ceil(n/2) for even weeks and floor(n/2) for odd ones.
    """
    return (num_weeks + 1 - parity) // 2
