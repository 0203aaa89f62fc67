"""Texts shown to the user: banner, usage help, controls and errors."""

from __future__ import annotations

_CYAN = "\033[36m"
_RESET = "\033[0m"
_RULE = "+====================================================+"


def _block(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def banner() -> str:
    """Return the title block printed above the help."""
    return _block(
        [
            "\n" + _RULE,
            "|                     FRACT'OL                       |",
            _RULE + "\n",
        ]
    )


def fractal_options(program: str, bonus: bool) -> str:
    """Describe which fractals can be chosen and how."""
    lines = [
        "+===============  Available Fractals  ===============+",
        "Which fractal would you like to view?",
        "\tM - Mandelbrot",
        "\tJ - Julia",
    ]
    if bonus:
        lines.append("\tB - Burning Ship")
    lines += [
        f"{_CYAN}Usage example:\t{program} <type>",
        f"\t\t{program} M{_RESET}",
        "\nFor Julia, you may specify starting values for the",
        "initial fractal shape. Values must be between",
        "-2.0 and 2.0 and must contain a decimal point.",
        f"{_CYAN}Usage example:\t{program} J",
        f"\t\t{program} J 0.285 0.01{_RESET}",
    ]
    return _block(lines)


def color_options(program: str) -> str:
    """Describe how to pick the display colour."""
    return _block(
        [
            "\n+================   Color Display   =================+",
            "Pick a display color by providing a hexadecimal code.",
            "The hex color code must be formatted as RRGGBB:",
            "\033[38;2;255;255;255m\tWhite:\tFFFFFF"
            "\t\033[38;2;128;128;128mBlack:\t000000\033[0m",
            "\033[38;2;255;0;0m\tRed:\tFF0000\t\033[38;2;0;255;0mGreen:\t00FF00\033[0m",
            "\033[38;2;0;0;255m\tBlue:\t0000FF"
            "\t\033[38;2;255;255;0mYellow:\tFFFF00\033[0m",
            "Other interesting colors:",
            "\033[38;2;153;51;255m\tPurple:\t9933FF"
            "\t\033[38;2;204;102;0mOrange:\tCC6600\033[0m",
            "\033[38;2;255;51;153m\tPink:\tFF3399"
            "\t\033[38;2;0;255;128mTurquoise: 00FF80\033[0m",
            f"{_CYAN}Usage example:\t{program} <type> <color>",
            f"\t\t{program} M 133742{_RESET}",
            "\nFor Julia, you can only specify colors after",
            "the starting values.",
            f"{_CYAN}Usage example:\t{program} J 0.285 0.01 424242{_RESET}",
            _RULE + "\n",
        ]
    )


def controls(bonus: bool) -> str:
    """List the keyboard and mouse controls of the window."""
    lines = [
        "\n+====================  Controls  ====================+",
        "WASD or arrow keys\t\tmove view.",
    ]
    if bonus:
        lines.append("Space bar\t\t\tchange colors.")
    lines += [
        "Scroll wheel\t\t\tzoom in and out.",
        "ESC or close window\t\tquit fract'ol.",
        _RULE + "\n",
    ]
    return _block(lines)


def help_text(program: str, bonus: bool) -> str:
    """Return the full usage help: banner, fractal and colour options."""
    return banner() + fractal_options(program, bonus) + color_options(program)


def error_message(context: str, text: str) -> str:
    """Format an error line such as ``Fractol: Image: Error ...``."""
    return f"Fractol: {context}{text}"