"""Command-line argument parsing for the viewer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .palette import parse_hex_color
from .settings import FractalType, settings_for

_DIGITS = "0123456789"

_TYPE_LETTERS = {
    "m": FractalType.MANDELBROT,
    "j": FractalType.JULIA,
    "b": FractalType.BURNING_SHIP,
}


class UsageError(Exception):
    """The command line does not describe a fractal the viewer can show."""


@dataclass(frozen=True)
class Options:
    """What the command line asks the viewer to draw."""

    fractal: FractalType
    c_real: float
    c_imaginary: float
    color: int


def parse_decimal(text: str) -> float:
    """Parse a decimal such as ``-0.285``.

    The first character is a sign slot: a ``-`` there negates the number and
    any other character there is skipped. Digits, an optional point and more
    digits follow; anything else raises ValueError.
    """
    if not text:
        raise ValueError("empty number")
    sign = -1.0 if text[0] == "-" else 1.0
    rest = text[1:]
    whole, point, fraction = rest.partition(".")
    if (whole and not all(ch in _DIGITS for ch in whole)) or (
        fraction and not all(ch in _DIGITS for ch in fraction)
    ):
        raise ValueError(f"not a decimal number: {text!r}")
    number = 0.0
    for ch in whole:
        number = number * 10.0 + _DIGITS.index(ch)
    scale = 0.1
    for ch in fraction:
        number = number + _DIGITS.index(ch) * scale
        scale *= 0.1
    return number * sign


def parse_fractal_type(text: str, bonus: bool) -> FractalType:
    """Read a one-letter fractal name (M, J, or B in the extended viewer)."""
    fractal = _TYPE_LETTERS.get(text.lower()) if len(text) == 1 else None
    if fractal is None or not settings_for(bonus).supports(fractal):
        raise UsageError(f"unknown fractal type: {text!r}")
    return fractal


def _parse_constant(text: str, limit: float) -> float:
    if "." not in text:
        raise UsageError(f"starting value must contain a decimal point: {text!r}")
    try:
        value = parse_decimal(text)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc
    if not -limit <= value <= limit:
        raise UsageError(f"starting value out of range: {text!r}")
    return value


def _parse_color(text: str) -> int:
    try:
        return parse_hex_color(text)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc


def parse_args(args: Sequence[str], bonus: bool) -> Options:
    """Turn the arguments after the program name into viewer options.

    Accepted forms are ``<type> [color]`` and, for Julia,
    ``J [c_real c_imaginary [color]]``. Raises UsageError otherwise.
    """
    settings = settings_for(bonus)
    if not args:
        raise UsageError("no fractal type given")
    fractal = parse_fractal_type(args[0], bonus)
    is_julia = fractal is FractalType.JULIA
    if len(args) > (4 if is_julia else 2):
        raise UsageError("too many arguments")

    c_real = settings.default_c_real
    c_imaginary = settings.default_c_imaginary
    color = settings.default_color
    if is_julia and len(args) > 1:
        if len(args) < 3:
            raise UsageError("Julia needs both a real and an imaginary value")
        c_real = _parse_constant(args[1], settings.c_limit)
        c_imaginary = _parse_constant(args[2], settings.c_limit)
        if len(args) == 4:
            color = _parse_color(args[3])
    elif not is_julia and len(args) == 2:
        color = _parse_color(args[1])

    return Options(fractal=fractal, c_real=c_real, c_imaginary=c_imaginary, color=color)