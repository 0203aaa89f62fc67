import pytest

from fractview.palette import build_palette, parse_hex_color, shift_color


@pytest.mark.parametrize(
    ("text", "expected"),
    [("FF0000", 0xFF0000), ("133742", 0x133742), ("00ff80", 0x00FF80), ("000000", 0)],
)
def test_parse_hex_color_values(text, expected):
    assert parse_hex_color(text) == expected


@pytest.mark.parametrize("value", [0, 1, 0x424242, 0x9933FF, 0xFFFFFF])
def test_parse_hex_color_round_trip(value):
    assert parse_hex_color(f"{value:06X}") == value
    assert parse_hex_color(f"{value:06x}") == value


@pytest.mark.parametrize(
    "text", ["", "12345", "1234567", "12345G", "0x1234", " 12345", "12_345", "١٢٣٤٥٦"]
)
def test_parse_hex_color_rejects(text):
    with pytest.raises(ValueError):
        parse_hex_color(text)


def test_palette_length_and_ends():
    palette = build_palette(0xFF0000, 150)
    assert len(palette) == 151
    assert palette[0] == 0xFF0000
    assert palette[-1] == 0


def test_palette_decreases_for_positive_color():
    palette = build_palette(0xFF3399, 300)
    gradient = palette[:-1]
    assert all(a > b for a, b in zip(gradient, gradient[1:]))


def test_palette_of_black_is_black():
    assert build_palette(0, 150) == (0,) * 151


def test_palette_starts_at_default_color():
    palette = build_palette(0xFF421337, 300)
    assert palette[0] == 0xFF421337
    assert len(palette) == 301
    assert all(0 <= entry <= 0xFFFFFFFF for entry in palette)


def test_palette_rejects_negative_iterations():
    with pytest.raises(ValueError):
        build_palette(0xFF0000, -1)


def test_shift_color_subtracts_shift():
    assert shift_color(0x000200) == 0
    assert shift_color(0x424242) == 0x424242 - 512


def test_shift_color_wraps_to_32_bits():
    assert shift_color(0) == 0xFFFFFE00
    assert 0 <= shift_color(0x00000001) <= 0xFFFFFFFF


def test_shifted_color_gives_new_palette():
    original = build_palette(0xFF0000, 150)
    shifted = build_palette(shift_color(0xFF0000), 150)
    assert shifted[0] == original[0] - 512