"""Power readings given in watts, as "<number> W" or "N/A"."""

from __future__ import annotations

import math
import struct

__all__ = ["Watts", "parse_watts"]


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _shortest_digits(value: float) -> int:
    for precision in range(1, 10):
        if _float32(float(f"{value:.{precision - 1}e}")) == value:
            return precision
    return 9


class Watts(float):
    """A single-precision power reading; NaN stands for "N/A"."""

    def __new__(cls, value: float = 0.0) -> "Watts":
        return super().__new__(cls, _float32(float(value)))

    def __str__(self) -> str:
        value = float(self)
        if math.isnan(value):
            return "N/A"
        if math.isinf(value):
            return ("+Inf" if value > 0 else "-Inf") + " W"
        if value == 0:
            return ("-0" if math.copysign(1, value) < 0 else "0") + " W"
        digits = _shortest_digits(value)
        exponent = int(f"{value:.{digits - 1}e}".split("e")[1])
        if exponent < -4 or exponent >= 6:
            text = f"{value:.{digits - 1}e}"
        else:
            text = f"{value:.{max(digits - 1 - exponent, 0)}f}"
        return f"{text} W"

    def __repr__(self) -> str:
        return f"Watts({str(self)!r})"


def parse_watts(text: str) -> Watts:
    """Parse "N/A" or "<number> W"; anything else raises ValueError."""
    value = text.strip()
    if value == "N/A":
        return Watts(math.nan)
    if value.endswith(" W"):
        return Watts(float(value[:-2].strip()))
    raise ValueError("parsing watt: unknown field " + text)