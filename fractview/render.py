"""Turning the visible plane into rows of pixel colours."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .args import Options
from .fractals import escape_count
from .plane import Plane
from .settings import Settings


def _pixel(
    plane: Plane,
    options: Options,
    palette: Sequence[int],
    settings: Settings,
    x: int,
    y: int,
) -> int:
    pr, pi = plane.pixel_to_complex(x, y, settings.width, settings.height)
    count = escape_count(
        options.fractal,
        pr,
        pi,
        options.c_real,
        options.c_imaginary,
        settings.max_iterations,
    )
    return palette[count]


def render_rows(
    plane: Plane,
    options: Options,
    palette: Sequence[int],
    settings: Settings,
    start_y: int,
    end_y: int,
) -> list[list[int]]:
    """Colour the rows from ``start_y`` up to, not including, ``end_y``."""
    if not 0 <= start_y <= end_y <= settings.height:
        raise ValueError(
            f"row range {start_y}..{end_y} outside 0..{settings.height}"
        )
    return [
        [_pixel(plane, options, palette, settings, x, y) for x in range(settings.width)]
        for y in range(start_y, end_y)
    ]


def _stripes(height: int, count: int) -> list[tuple[int, int]]:
    """Split the rows into ``count`` bands; the last band takes the remainder."""
    count = max(1, count)
    band = height // count
    bounds = [(i * band, (i + 1) * band) for i in range(count - 1)]
    bounds.append(((count - 1) * band, height))
    return bounds


def render(
    plane: Plane, options: Options, palette: Sequence[int], settings: Settings
) -> list[list[int]]:
    """Colour every pixel of the window, top row first."""
    stripes = _stripes(settings.height, settings.threads)
    if len(stripes) == 1:
        return render_rows(plane, options, palette, settings, 0, settings.height)
    with ThreadPoolExecutor(max_workers=len(stripes)) as pool:
        parts = pool.map(
            lambda bounds: render_rows(
                plane, options, palette, settings, bounds[0], bounds[1]
            ),
            stripes,
        )
        return [row for part in parts for row in part]