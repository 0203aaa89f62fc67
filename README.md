# fractview

An interactive fractal viewer. It draws the Mandelbrot set and Julia sets
in a pygame window. An extended mode adds the Burning Ship fractal, a larger
window, more iterations and colour cycling. You can pan with the keyboard
and zoom with the scroll wheel.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Usage

```
fractview [--bonus] <type> [julia-real julia-imaginary] [color]
```

Fractal types. Each is a single letter, upper or lower case:

- `M`: Mandelbrot
- `J`: Julia
- `B`: Burning Ship (only with `--bonus`)

Examples:

```
fractview M
fractview M 133742
fractview J
fractview J 0.285 0.01
fractview J 0.285 0.01 424242
fractview --bonus B FF3399
```

For Julia you may give the two parts of the starting constant. Give both or
neither. Each must contain a decimal point and lie between -2.0 and 2.0. If
you leave them out, the defaults are -0.7 and 0.3.

A colour is exactly six hexadecimal digits in the form `RRGGBB`, for example
`FF0000` for red or `9933FF` for purple. For Julia, the colour goes after the
two starting values, so you need both values before you can give a colour.
The viewer builds a gradient palette from this colour toward black. Points
that never escape are drawn black.

If you run `fractview` with no arguments, or with arguments it cannot use, it
prints the usage text and exits with status 1.

### Modes

| Mode              | Window  | Iterations | Fractals       | Colour cycling |
|-------------------|---------|------------|----------------|----------------|
| default           | 600x600 | 150        | M, J           | no             |
| `--bonus`         | 900x900 | 300        | M, J, B        | yes            |

In `--bonus` mode the image is computed in 12 horizontal bands on a thread
pool.

## Controls

| Input               | Action                                |
|---------------------|---------------------------------------|
| WASD / arrow keys   | move the view                         |
| Space bar           | shift the palette (`--bonus` only)    |
| Scroll wheel        | zoom in and out around the cursor     |
| ESC / close window  | quit                                  |

## Using it as a library

The pieces of the viewer can be used without opening a window:

- `fractview.fractals`: `mandelbrot`, `julia`, `burning_ship` and
  `escape_count` return escape-time iteration counts.
- `fractview.palette`: `parse_hex_color`, `build_palette` and `shift_color`.
- `fractview.plane`: the immutable `Plane` with `zoom`, `move` and
  `pixel_to_complex`, plus `default_plane` and `Direction`.
- `fractview.args`: `parse_args` returns an `Options` or raises `UsageError`.
- `fractview.render`: `render` and `render_rows` return rows of 32-bit colours.
- `fractview.settings`: `settings_for(bonus)` returns the `Settings` of a mode.
- `fractview.app`: `Viewer` holds the session state; `run` opens the window.

```python
from fractview.args import parse_args
from fractview.palette import build_palette
from fractview.plane import default_plane
from fractview.render import render
from fractview.settings import settings_for

settings = settings_for(False)
options = parse_args(["J", "0.285", "0.01"], False)
plane = default_plane(options.fractal, settings.width, settings.height)
palette = build_palette(options.color, settings.max_iterations)
rows = render(plane, options, palette, settings)
```

## Limitations

The viewer only shows images on screen. It does not save images to files
and has no way to type in coordinates or a zoom level once it is running.

## Testing

```
pytest
```