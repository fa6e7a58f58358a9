from click.testing import CliRunner

from liftwave.main import main

from conftest import SEED_LIFTS


def write_catalog(path, exclude=()):
    lines = []
    for name, region, category, muscles in SEED_LIFTS:
        if name in exclude:
            continue
        lines.append(f"{name}:")
        lines.append(f"  region: {region.value}")
        if category is not None:
            lines.append(f"  category: {category.value}")
        lines.append(f"  muscles: [{', '.join(m.value for m in muscles)}]")
    path.write_text("\n".join(lines) + "\n")
    return path


def test_builds_conjugate_wave(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml")

    result = CliRunner().invoke(main, ["--catalog", str(catalog), "--weeks", "7", "--seed", "3"])

    assert result.exit_code == 0, result.output


def test_builds_hypertrophy_wave_with_program(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml")
    program = tmp_path / "program.yaml"
    program.write_text("main_sets: 5\n")

    result = CliRunner().invoke(
        main,
        ["-c", str(catalog), "-p", str(program), "-s", "hypertrophy", "-w", "2", "--seed", "1"],
    )

    assert result.exit_code == 0, result.output


def test_missing_lifts_reported(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml", exclude=["Hamstring Curl"])

    result = CliRunner().invoke(main, ["--catalog", str(catalog), "--seed", "3"])

    assert result.exit_code != 0
    assert "not enough lifts available for hamstring" in result.output


def test_rejects_unknown_strategy(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml")

    result = CliRunner().invoke(main, ["--catalog", str(catalog), "--strategy", "westside"])

    assert result.exit_code != 0


def test_partial_program_settings(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml")
    program = tmp_path / "program.yaml"
    program.write_text("dynamic_sets:\n  squat: [8, 2]\ndynamic_fallback_names:\n  squat: Squat\n")

    result = CliRunner().invoke(main, ["-c", str(catalog), "-p", str(program), "-w", "7", "--seed", "3"])

    assert result.exit_code == 0, result.output
    assert result.exception is None


def test_program_settings_follow_strategy(tmp_path):
    catalog = write_catalog(tmp_path / "catalog.yaml")
    program = tmp_path / "program.yaml"
    program.write_text("deload_every: 4\n")

    result = CliRunner().invoke(
        main, ["-c", str(catalog), "-p", str(program), "-s", "hypertrophy", "--seed", "1"]
    )

    # Conjugate settings are unknown to the hypertrophy program.
    assert result.exit_code != 0
    assert "deload_every" in str(result.exception)
