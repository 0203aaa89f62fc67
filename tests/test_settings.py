import dataclasses

import pytest

from fractview.settings import FractalType, Key, Settings, settings_for


def test_basic_settings_match_source_constants():
    settings = settings_for(False)
    assert (settings.width, settings.height) == (600, 600)
    assert settings.max_iterations == 150
    assert settings.color_cycling is False


def test_extended_settings_match_source_constants():
    settings = settings_for(True)
    assert (settings.width, settings.height) == (900, 900)
    assert settings.max_iterations == 300
    assert settings.threads == 12
    assert settings.color_cycling is True


def test_shared_defaults():
    for bonus in (False, True):
        settings = settings_for(bonus)
        assert settings.default_c_real == -0.7
        assert settings.default_c_imaginary == 0.3
        assert settings.default_color == 0xFF421337
        assert settings.color_shift == 512
        assert settings.c_limit == 2


def test_burning_ship_only_in_extended_viewer():
    assert not settings_for(False).supports(FractalType.BURNING_SHIP)
    assert settings_for(True).supports(FractalType.BURNING_SHIP)
    for bonus in (False, True):
        assert settings_for(bonus).supports(FractalType.MANDELBROT)
        assert settings_for(bonus).supports(FractalType.JULIA)


def test_settings_are_immutable():
    settings = settings_for(False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.width = 10  # type: ignore[misc]
    assert settings.width == 600


def test_fractal_type_lookup_by_number():
    assert FractalType(0) is FractalType.MANDELBROT
    assert FractalType(1) is FractalType.BURNING_SHIP
    assert FractalType(2) is FractalType.JULIA
    with pytest.raises(ValueError):
        FractalType(3)


@pytest.mark.parametrize(
    "code, key",
    [
        (65307, Key.ESC),
        (119, Key.W),
        (97, Key.A),
        (115, Key.S),
        (100, Key.D),
        (65362, Key.UP),
        (65364, Key.DOWN),
        (65361, Key.LEFT),
        (65363, Key.RIGHT),
        (4, Key.WHEEL_UP),
        (5, Key.WHEEL_DOWN),
        (32, Key.SPACE),
        (17, Key.CLOSE_BUTTON),
    ],
)
def test_key_lookup_by_code(code, key):
    assert Key(code) is key


def test_custom_settings_keep_defaults():
    settings = Settings(
        width=10,
        height=20,
        max_iterations=5,
        threads=2,
        fractals=(FractalType.JULIA,),
        color_cycling=False,
    )
    assert settings.end_color == 0
    assert settings.supports(FractalType.JULIA)
    assert not settings.supports(FractalType.MANDELBROT)