from .catalog import InMemoryCatalog, LiftCatalog
from .load import parse_catalog, parse_exercises, parse_program_config
