from .constants import *
from .config import Config
from .exercises import Category, Exercise, Muscle, PRIMARY_CATEGORIES, Region
from .program import ConjugateProgram, HypertrophyProgram
