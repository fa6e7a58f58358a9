import logging

import click

from . import config
from .errors import PlanError
from .load import parse_catalog, parse_program_config
from .training_program import BUILDERS, get_builder
from .workout import iter_wave

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--catalog_path", "--catalog", "-c",
    default = config.CONFIG_ROOT / "catalog.yaml",
    type = click.Path(exists=True),
    help = "YAML file mapping exercise names to region, category and muscles."
)
@click.option(
    "--program_path", "--program", "-p",
    default = None,
    type = click.Path(exists=True),
    help = "Optional YAML overrides for the strategy's program settings."
)
@click.option("--weeks", "-w", default = 7, type = click.IntRange(min=0), show_default = True)
@click.option("--strategy", "-s", default = "conjugate", type = click.Choice(sorted(BUILDERS)), show_default = True)
@click.option("--seed", default = None, type = int, help = "Seed for a reproducible wave.")
@click.option("--verbose", "-v", is_flag = True)
def main(catalog_path, program_path, weeks, strategy, seed, verbose):
    logging.basicConfig(
        level = logging.DEBUG if verbose else logging.INFO,
        format = "%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    catalog = parse_catalog(catalog_path)
    kwargs = {"seed": seed}
    if program_path is not None:
        kwargs["program"] = parse_program_config(program_path, BUILDERS[strategy].program_cls)

    try:
        wave = get_builder(strategy, **kwargs).build(weeks, catalog)
    except PlanError as e:
        raise click.ClickException(str(e)) from e

    for week_number, day, plan in iter_wave(wave):
        logger.info("Week %d %s: %d steps", week_number, day.label, len(plan.steps))


if __name__ == "__main__":
    main()
