"""Integer-to-text conversions used by the console."""

from __future__ import annotations

_INT_BITS = 32


def itoa(value: int) -> str:
    """Format ``value`` as a signed 32-bit decimal integer."""
    half = 1 << (_INT_BITS - 1)
    wrapped = (value + half) % (1 << _INT_BITS) - half
    return str(wrapped)


def utoa_hex(value: int, min_width: int = 0) -> str:
    """Format ``value`` as unsigned 32-bit lowercase hex, zero-padded to ``min_width``."""
    return format(value & 0xFFFFFFFF, "x").rjust(min_width, "0")