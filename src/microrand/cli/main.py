"""CLI entry point for microrand."""

from __future__ import annotations

from pathlib import Path

import click

from microrand.analytics.uniformity import uniformity_report
from microrand.config.defaults import DEFAULT_PRESET
from microrand.config.presets import load_params_file, load_presets
from microrand.core.generator import RandomGenerator
from microrand.core.rng import make_rng
from microrand.utils.exceptions import ConfigError, InvalidRangeError


def _build_rng(seed: int, preset: str | None, params_path: Path | None) -> RandomGenerator:
    if preset is not None and params_path is not None:
        raise click.UsageError("--preset and --params are mutually exclusive")
    try:
        params = load_params_file(params_path) if params_path is not None else None
        return make_rng(seed, preset=preset, params=params)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


preset_option = click.option(
    "--preset", default=None, help=f"Named parameter preset (default: {DEFAULT_PRESET})."
)


@click.group()
@click.version_option(package_name="microrand")
def cli() -> None:
    """Deterministic LCG random numbers."""


@cli.command()
@click.option("--seed", required=True, type=int, help="Signed 64-bit seed.")
@click.option("--count", default=1, show_default=True, type=click.IntRange(min=0))
@click.option(
    "--kind",
    type=click.Choice(["f64", "f32", "int"]),
    default="f64",
    show_default=True,
    help="Float in [0, 1) or integer in [--min, --max].",
)
@click.option("--min", "min_value", default=0, show_default=True, type=int)
@click.option("--max", "max_value", default=100, show_default=True, type=int)
@preset_option
@click.option(
    "--params",
    "params_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML/JSON file with multiplier, increment and modulus.",
)
def draw(
    seed: int,
    count: int,
    kind: str,
    min_value: int,
    max_value: int,
    preset: str | None,
    params_path: Path | None,
) -> None:
    """Print COUNT values drawn from a freshly seeded generator."""
    rng = _build_rng(seed, preset, params_path)
    for _ in range(count):
        if kind == "f64":
            click.echo(repr(rng.next_f64()))
        elif kind == "f32":
            click.echo(repr(float(rng.next_f32())))
        else:
            try:
                click.echo(str(rng.next_int_i64(min_value, max_value)))
            except InvalidRangeError as e:
                raise click.UsageError(str(e)) from e


@cli.command()
def presets() -> None:
    """List the packaged parameter presets."""
    for name, params in sorted(load_presets().items()):
        modulus = "2^64 (wraparound)" if params.modulus is None else str(params.modulus)
        marker = " (default)" if name == DEFAULT_PRESET else ""
        click.echo(
            f"{name}{marker}: a={params.multiplier} c={params.increment} m={modulus}"
        )


@cli.command()
@click.option("--seed", required=True, type=int, help="Signed 64-bit seed.")
@click.option("--draws", default=100_000, show_default=True, type=click.IntRange(min=1))
@click.option("--buckets", default=100, show_default=True, type=click.IntRange(min=2))
@preset_option
def check(seed: int, draws: int, buckets: int, preset: str | None) -> None:
    """Bucket float draws and report a chi-square uniformity statistic."""
    rng = _build_rng(seed, preset, None)
    report = uniformity_report(rng, draws, buckets)
    click.echo(f"Draws: {report.n_draws:,} into {report.n_buckets} buckets")
    click.echo(f"Expected per bucket: {report.expected:,.1f}")
    click.echo(
        f"Chi-square: {report.chi_square:.2f} (df={report.degrees_of_freedom})"
    )
    click.echo(f"Max relative deviation: {report.max_relative_deviation:.1%}")
    click.echo("Result: " + ("PASS" if report.passes() else "FAIL"))


if __name__ == "__main__":
    cli()
