"""Deterministic RNG factory."""

from __future__ import annotations

from microrand.config.presets import get_preset
from microrand.config.schema import LCGParams
from microrand.core.generator import RandomGenerator
from microrand.utils.exceptions import ConfigError


def make_rng(
    seed: int,
    preset: str | None = None,
    params: LCGParams | None = None,
) -> RandomGenerator:
    """Create a deterministic generator from a seed.

    Uses the default MMIX constants unless a preset name or explicit
    parameters are given; the two are mutually exclusive.
    """
    if preset is not None and params is not None:
        raise ConfigError("pass either preset or params, not both")
    if preset is not None:
        params = get_preset(preset)
    return RandomGenerator(seed, params)
