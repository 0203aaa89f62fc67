"""The interactive viewer window and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from .args import Options, UsageError, parse_args
from .messages import (
    banner,
    color_options,
    controls,
    error_message,
    fractal_options,
    help_text,
)
from .palette import build_palette, shift_color
from .plane import Direction, default_plane
from .render import render
from .settings import Key, Settings, settings_for

_MOVE_SPEED = 0.025
_ZOOM_IN = 0.9
_ZOOM_OUT = 1.1

_MOVES = {
    Key.UP: Direction.UP,
    Key.W: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.S: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.A: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.D: Direction.RIGHT,
}


class Viewer:
    """State of one viewing session: the visible plane, colours and run flag."""

    def __init__(self, options: Options, settings: Settings) -> None:
        self.options = options
        self.settings = settings
        self.plane = default_plane(options.fractal, settings.width, settings.height)
        self.color = options.color
        self.palette = build_palette(self.color, settings.max_iterations)
        self.running = True

    def handle_key(self, key: int) -> None:
        """React to a key: quit, pan the view or cycle colours."""
        if key == Key.ESC:
            self.running = False
            return
        direction = _MOVES.get(key)
        if direction is not None:
            self.plane = self.plane.move(_MOVE_SPEED, direction)
        elif key == Key.SPACE and self.settings.color_cycling:
            self.color = shift_color(self.color)
            self.palette = build_palette(self.color, self.settings.max_iterations)

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Zoom around the cursor on a wheel step; ignore other buttons."""
        if button == Key.WHEEL_UP:
            factor = _ZOOM_IN
        elif button == Key.WHEEL_DOWN:
            factor = _ZOOM_OUT
        else:
            return
        self.plane = self.plane.zoom(
            factor, x, y, self.settings.width, self.settings.height
        )

    def frame(self) -> list[list[int]]:
        """Render the current view as rows of 32-bit colours."""
        return render(self.plane, self.options, self.palette, self.settings)


def _draw(pygame, screen, viewer: Viewer) -> None:
    rows = viewer.frame()
    data = b"".join(
        (pixel & 0xFFFFFF).to_bytes(3, "big") for row in rows for pixel in row
    )
    size = (viewer.settings.width, viewer.settings.height)
    screen.blit(pygame.image.frombuffer(data, size, "RGB"), (0, 0))
    pygame.display.flip()


def run(options: Options, settings: Settings) -> int:
    """Open the window and run the event loop until it is closed."""
    import pygame

    viewer = Viewer(options, settings)
    key_codes = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    try:
        pygame.init()
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption("Fract'ol")
    except pygame.error:
        print(error_message("Window: ", "Error creating a window."), file=sys.stderr)
        pygame.quit()
        return 1
    try:
        _draw(pygame, screen, viewer)
        print(controls(settings.color_cycling), end="")
        while viewer.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                viewer.handle_key(key_codes.get(event.key, event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                viewer.handle_mouse(event.button, *event.pos)
            else:
                continue
            if viewer.running:
                _draw(pygame, screen, viewer)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and start the viewer; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    args = [arg for arg in args if arg != "--bonus"]
    program = "fractview --bonus" if bonus else "fractview"
    if not args:
        print(banner() + fractal_options(program, bonus) + color_options(program), end="")
        return 1
    try:
        options = parse_args(args, bonus)
    except UsageError:
        print(help_text(program, bonus), end="")
        return 1
    return run(options, settings_for(bonus))