from dataclasses import replace

import pytest

from fractview.args import Options
from fractview.palette import build_palette
from fractview.plane import Plane
from fractview.render import render, render_rows
from fractview.settings import FractalType, settings_for


@pytest.fixture
def settings():
    return replace(settings_for(True), width=10, height=7, max_iterations=20, threads=3)


@pytest.fixture
def options():
    return Options(
        fractal=FractalType.MANDELBROT, c_real=-0.7, c_imaginary=0.3, color=0xFF421337
    )


@pytest.fixture
def palette(settings):
    return build_palette(0xFF421337, settings.max_iterations)


def test_render_rows_shape(settings, options, palette):
    plane = Plane(min_r=-2.0, max_r=1.0, min_i=1.5, max_i=-1.5)
    rows = render_rows(plane, options, palette, settings, 2, 5)
    assert len(rows) == 3
    assert all(len(row) == settings.width for row in rows)


def test_render_matches_rows(settings, options, palette):
    plane = Plane(min_r=-2.0, max_r=1.0, min_i=1.5, max_i=-1.5)
    whole = render(plane, options, palette, settings)
    assert len(whole) == settings.height
    assert whole == render_rows(plane, options, palette, settings, 0, settings.height)


def test_render_single_thread_same_as_threaded(settings, options, palette):
    plane = Plane(min_r=-2.0, max_r=1.0, min_i=1.5, max_i=-1.5)
    single = replace(settings, threads=1)
    assert render(plane, options, palette, single) == render(
        plane, options, palette, settings
    )


def test_point_inside_set_gets_last_colour(settings, options, palette):
    plane = Plane(min_r=0.0, max_r=1.0, min_i=-1.0, max_i=0.0)
    rows = render_rows(plane, options, palette, settings, 0, 1)
    assert rows[0][0] == palette[-1]


def test_far_point_gets_first_colour(settings, options, palette):
    plane = Plane(min_r=10.0, max_r=11.0, min_i=9.0, max_i=10.0)
    rows = render_rows(plane, options, palette, settings, 0, 1)
    assert rows[0] == [palette[0]] * settings.width


def test_all_pixels_come_from_palette(settings, palette):
    julia = Options(
        fractal=FractalType.JULIA, c_real=-0.7, c_imaginary=0.3, color=0xFF421337
    )
    plane = Plane(min_r=-2.0, max_r=2.0, min_i=-2.0, max_i=2.0)
    rows = render(plane, julia, palette, settings)
    assert {p for row in rows for p in row} <= set(palette)


@pytest.mark.parametrize("start, end", [(-1, 2), (3, 2), (0, 8)])
def test_bad_row_range(settings, options, palette, start, end):
    plane = Plane(min_r=-2.0, max_r=1.0, min_i=1.5, max_i=-1.5)
    with pytest.raises(ValueError):
        render_rows(plane, options, palette, settings, start, end)