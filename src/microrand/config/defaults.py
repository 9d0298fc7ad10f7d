"""Default generator constants for microrand."""

from __future__ import annotations

from microrand.config.schema import LCGParams

# Knuth's MMIX pair. a % 4 == 1 and c is odd, so the period over the
# implicit 2**64 modulus is full and the recurrence has no fixed point.
MMIX_MULTIPLIER: int = 6364136223846793005
MMIX_INCREMENT: int = 1442695040888963407

# Park-Miller "minimal standard" (minstd_rand0). Seed 0 is a fixed point.
PARK_MILLER_MULTIPLIER: int = 16807
PARK_MILLER_INCREMENT: int = 0
PARK_MILLER_MODULUS: int = 2**31 - 1

DEFAULT_PRESET: str = "mmix"


def default_params() -> LCGParams:
    """Parameters used by ``RandomGenerator(seed)``."""
    return LCGParams(
        multiplier=MMIX_MULTIPLIER,
        increment=MMIX_INCREMENT,
        modulus=None,
        name="mmix",
    )


def park_miller_params() -> LCGParams:
    """Parameters of the classic 16807 / 2**31 - 1 generator."""
    return LCGParams(
        multiplier=PARK_MILLER_MULTIPLIER,
        increment=PARK_MILLER_INCREMENT,
        modulus=PARK_MILLER_MODULUS,
        name="park_miller",
    )
