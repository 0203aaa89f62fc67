"""Fixed parameters of the viewer: window size, iteration limit, key codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class FractalType(IntEnum):
    """The fractal sets the viewer can draw."""

    MANDELBROT = 0
    BURNING_SHIP = 1
    JULIA = 2


class Key(IntEnum):
    """X11 key symbols and mouse button numbers the viewer reacts to."""

    CLOSE_BUTTON = 17
    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    WHEEL_UP = 4
    WHEEL_DOWN = 5
    SPACE = 32


@dataclass(frozen=True)
class Settings:
    """Constants that shape one flavour of the viewer."""

    width: int
    height: int
    max_iterations: int
    threads: int
    fractals: tuple[FractalType, ...]
    color_cycling: bool
    default_c_real: float = -0.7
    default_c_imaginary: float = 0.3
    c_limit: float = 2.0
    default_color: int = 0xFF421337
    end_color: int = 0x000000
    color_shift: int = 512

    def supports(self, fractal: FractalType) -> bool:
        """Tell whether this flavour can draw the given fractal."""
        return fractal in self.fractals


_BASIC = Settings(
    width=600,
    height=600,
    max_iterations=150,
    threads=1,
    fractals=(FractalType.MANDELBROT, FractalType.JULIA),
    color_cycling=False,
)

_EXTENDED = Settings(
    width=900,
    height=900,
    max_iterations=300,
    threads=12,
    fractals=(FractalType.MANDELBROT, FractalType.JULIA, FractalType.BURNING_SHIP),
    color_cycling=True,
)


def settings_for(bonus: bool) -> Settings:
    """Return the settings of the basic viewer or of the extended one."""
    return _EXTENDED if bonus else _BASIC