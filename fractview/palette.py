"""Colour parsing and the gradient palette used to shade escape counts."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_LENGTH = 6

END_COLOR = 0x000000
COLOR_SHIFT = 512


def _signed(value: int) -> int:
    """Read a 32-bit pattern as a signed integer."""
    value &= _MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def parse_hex_color(text: str) -> int:
    """Parse an RRGGBB colour made of exactly six hexadecimal digits.

    Raises ValueError for any other text.
    """
    if len(text) != _HEX_LENGTH or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"not an RRGGBB colour: {text!r}")
    return int(text, 16)


def build_palette(color: int, max_iterations: int) -> tuple[int, ...]:
    """Build a gradient from ``color`` toward black, one entry per escape count.

    The colour is read as a signed 32-bit value, stepped down evenly over
    ``max_iterations + 1`` slots; the final slot, used by points that never
    escape, is black. Entries are returned as unsigned 32-bit pixel values.
    """
    if max_iterations < 0:
        raise ValueError("max_iterations must not be negative")
    start = _signed(color)
    step = _truncating_div(start - END_COLOR, max_iterations + 1)
    gradient = tuple((start - i * step) & _MASK for i in range(max_iterations))
    return gradient + (0,)


def shift_color(color: int) -> int:
    """Return the colour moved down by the fixed shift, wrapping at 32 bits."""
    return (_signed(color) - COLOR_SHIFT) & _MASK