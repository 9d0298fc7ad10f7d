"""Linear congruential random generator."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from microrand.config.defaults import default_params
from microrand.config.presets import get_preset
from microrand.config.schema import I32_MAX, I32_MIN, I64_MAX, I64_MIN, LCGParams
from microrand.utils.exceptions import ConfigError, InvalidRangeError

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63

# Largest double strictly below 1.0
_BELOW_ONE = 1.0 - 2.0**-53
_BELOW_ONE_F32 = np.nextafter(np.float32(1.0), np.float32(0.0))


def wrap_i64(value: int) -> int:
    """Reduce an integer into the signed 64-bit range, two's-complement style."""
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def _check_bounds(
    min_value: int, max_value: int, lo: int, hi: int, width: str
) -> tuple[int, int]:
    # numpy integers would overflow in the width computation
    min_value, max_value = int(min_value), int(max_value)
    if min_value > max_value:
        raise InvalidRangeError(f"min ({min_value}) must not exceed max ({max_value})")
    if min_value < lo or max_value > hi:
        raise InvalidRangeError(
            f"bounds [{min_value}, {max_value}] do not fit a signed {width} integer"
        )
    return min_value, max_value


class RandomGenerator:
    """Deterministic LCG producing floats in [0, 1) and bounded integers.

    The internal state is a signed 64-bit integer. Every accessor advances it
    exactly once with ``state' = (a * state + c) mod m`` and maps the new
    state to its result, so a given seed and parameter set always yields the
    same sequence.

    Default constants are Knuth's MMIX pair over the implicit 2**64 ring
    (see :func:`microrand.config.defaults.default_params`). With an explicit
    modulus and zero increment, a seed of 0 is a fixed point and the
    generator keeps returning ``0.0`` / ``min``.

    Not safe for concurrent advancement; give each thread its own instance.
    """

    def __init__(self, seed: int, params: LCGParams | None = None) -> None:
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise ConfigError(f"seed must be an integer, got {type(seed).__name__}")
        seed = int(seed)
        if not I64_MIN <= seed <= I64_MAX:
            raise ConfigError(f"seed {seed} does not fit a signed 64-bit integer")
        self._params = params if params is not None else default_params()
        self._state = seed

    @classmethod
    def custom(
        cls,
        seed: int,
        multiplier: int,
        increment: int,
        modulus: int | None = None,
    ) -> RandomGenerator:
        """Create a generator with explicit LCG constants."""
        return cls(
            seed,
            LCGParams(multiplier=multiplier, increment=increment, modulus=modulus),
        )

    @classmethod
    def from_preset(cls, seed: int, name: str) -> RandomGenerator:
        """Create a generator from a packaged preset such as ``"park_miller"``."""
        return cls(seed, get_preset(name))

    @property
    def params(self) -> LCGParams:
        """Constants driving this generator."""
        return self._params

    def __repr__(self) -> str:
        label = self._params.name or "custom"
        return f"{type(self).__name__}(params={label!r})"

    def _advance(self) -> int:
        p = self._params
        raw = wrap_i64(p.multiplier * self._state + p.increment)
        if not p.wraps:
            # Truncated remainder: the result keeps the sign of raw.
            rem = abs(raw) % p.modulus
            raw = -rem if raw < 0 else rem
        self._state = raw
        return raw

    def _to_unit(self, raw: int) -> float:
        if self._params.wraps:
            return ((raw & _MASK64) >> 11) * 2.0**-53
        return min(abs(raw) / self._params.modulus, _BELOW_ONE)

    def next_f64(self) -> float:
        """Advance once and return a float in [0.0, 1.0)."""
        return self._to_unit(self._advance())

    def next_f32(self) -> np.float32:
        """Advance once and return a single-precision float in [0.0, 1.0)."""
        value = np.float32(self.next_f64())
        if value >= np.float32(1.0):
            return _BELOW_ONE_F32
        return value

    def next_int_i64(self, min_value: int, max_value: int) -> int:
        """Advance once and return an integer in [min_value, max_value].

        Uses ``abs(state) % (max - min + 1) + min``; values near the bottom of
        the range are very slightly favoured when the width does not divide
        the generator's range.

        The reduction reads the low bits of the state. Over the implicit 2**64
        modulus the lowest bit of an LCG alternates and the low ``k`` bits
        repeat every ``2**k`` draws, so ``next_int_i64(0, 1)`` yields
        ``1, 0, 1, 0, ...`` and power-of-two widths cycle quickly. Use
        :meth:`next_f64` when the high bits matter.

        Raises:
            InvalidRangeError: If ``min_value > max_value`` or a bound falls
                outside the signed 64-bit range. The state is left untouched.
        """
        min_value, max_value = _check_bounds(min_value, max_value, I64_MIN, I64_MAX, "64-bit")
        return self._reduce(self._advance(), min_value, max_value)

    def next_int_i32(self, min_value: int, max_value: int) -> int:
        """Like :meth:`next_int_i64`, with bounds limited to signed 32-bit."""
        min_value, max_value = _check_bounds(min_value, max_value, I32_MIN, I32_MAX, "32-bit")
        return self._reduce(self._advance(), min_value, max_value)

    @staticmethod
    def _reduce(raw: int, min_value: int, max_value: int) -> int:
        return abs(raw) % (max_value - min_value + 1) + min_value

    def fill_f64(self, size: int) -> NDArray[np.float64]:
        """Draw ``size`` consecutive :meth:`next_f64` values into an array."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return np.fromiter((self.next_f64() for _ in range(size)), dtype=np.float64, count=size)

    def fill_int_i64(self, size: int, min_value: int, max_value: int) -> NDArray[np.int64]:
        """Draw ``size`` consecutive :meth:`next_int_i64` values into an array."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        min_value, max_value = _check_bounds(min_value, max_value, I64_MIN, I64_MAX, "64-bit")
        values = (self._reduce(self._advance(), min_value, max_value) for _ in range(size))
        return np.fromiter(values, dtype=np.int64, count=size)
