"""Escape-time iteration for the supported fractal sets."""

from __future__ import annotations

from .settings import FractalType

_ESCAPE_RADIUS_SQUARED = 4.0


def mandelbrot(pr: float, pi: float, max_iterations: int) -> int:
    """Count iterations of z = z^2 + c, from z = 0, before |z|^2 exceeds 4."""
    zr = 0.0
    zi = 0.0
    for n in range(max_iterations):
        if zi * zi + zr * zr > _ESCAPE_RADIUS_SQUARED:
            return n
        zr, zi = zr * zr - zi * zi + pr, 2 * zr * zi + pi
    return max_iterations


def julia(
    zr: float, zi: float, c_real: float, c_imaginary: float, max_iterations: int
) -> int:
    """Count iterations of z = z^2 + c, from the given z, before |z|^2 exceeds 4."""
    for n in range(max_iterations):
        if zi * zi + zr * zr > _ESCAPE_RADIUS_SQUARED:
            return n
        zr, zi = zr * zr - zi * zi + c_real, 2 * zr * zi + c_imaginary
    return max_iterations


def burning_ship(cr: float, ci: float, max_iterations: int) -> int:
    """Count Burning Ship iterations, folding z into the first quadrant each step."""
    zr = 0.0
    zi = 0.0
    for n in range(max_iterations):
        if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
            return n
        zr = abs(zr)
        zi = abs(zi)
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
    return max_iterations


def escape_count(
    fractal: FractalType | int,
    pr: float,
    pi: float,
    c_real: float,
    c_imaginary: float,
    max_iterations: int,
) -> int:
    """Iterate the point (pr, pi) of the chosen fractal.

    For Julia the point is the starting z and (c_real, c_imaginary) the
    constant; the other sets ignore the constant.
    """
    kind = FractalType(fractal)
    if kind is FractalType.MANDELBROT:
        return mandelbrot(pr, pi, max_iterations)
    if kind is FractalType.JULIA:
        return julia(pr, pi, c_real, c_imaginary, max_iterations)
    return burning_ship(pr, pi, max_iterations)