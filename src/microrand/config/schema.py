"""Pydantic v2 configuration models for microrand."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Signed integer widths supported by the generator
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1
I32_MIN: int = -(2**31)
I32_MAX: int = 2**31 - 1


class LCGParams(BaseModel):
    """Constants of the recurrence ``state' = (a * state + c) mod m``.

    The multiply-add always wraps in the signed 64-bit ring. When ``modulus``
    is ``None`` that wraparound is the whole reduction (``m = 2**64``);
    otherwise the wrapped value is further reduced by ``modulus`` using a
    truncated remainder, so the state keeps the sign of the wrapped value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    multiplier: int = Field(ge=I64_MIN, le=I64_MAX, description="Multiplier a")
    increment: int = Field(ge=I64_MIN, le=I64_MAX, description="Increment c")
    modulus: int | None = Field(
        default=None,
        ge=1,
        le=I64_MAX,
        description="Explicit modulus m; None for the implicit 2**64 ring",
    )
    name: str = Field(default="", description="Label, e.g. the preset name")

    @property
    def wraps(self) -> bool:
        """True when the modulus is the implicit 2**64 ring."""
        return self.modulus is None
