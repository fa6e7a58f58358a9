import os
from pathlib import Path

DELOAD_EVERY: int = 7 # every Nth week is a deload week

ACCESSORY_REP_RANGE = (8, 12) # default target for accessory work
FOREARM_REPS: int = 5 # forearm work is kept low-rep and heavy
FOREARM_PERCENT: int = 80
WARMUP_ROUNDS: int = 3

PROJECT_ROOT = Path(os.path.abspath(__file__)).parents[3]
CONFIG_ROOT = PROJECT_ROOT / "config"
