"""色とスタイル変換（`qrsvg.core.color`）のテスト。"""

from __future__ import annotations

import pytest

from qrsvg.core.color import BLACK, WHITE, Color, coerce_color, color_to_fill_style, rgb_style


def test_fill_style_for_opaque_16bit_red() -> None:
    assert color_to_fill_style(Color.rgba16(65535, 0, 0, 65535)) == "fill:rgb(255,0,0)"


def test_fill_style_for_half_alpha_16bit_red() -> None:
    style = color_to_fill_style(Color.rgba16(65535, 0, 0, 32896))
    assert style == "fill-opacity:0.50; fill:rgb(255,0,0)"


def test_fill_style_for_8bit_channels_matches_16bit() -> None:
    assert color_to_fill_style(Color.rgba8(18, 52, 86)) == "fill:rgb(18,52,86)"
    assert color_to_fill_style(Color.rgba8(0, 0, 0, 0)) == "fill-opacity:0.00; fill:rgb(0,0,0)"


def test_default_palette() -> None:
    assert color_to_fill_style(BLACK) == "fill:rgb(0,0,0)"
    assert color_to_fill_style(WHITE) == "fill:rgb(255,255,255)"


def test_rgb_style() -> None:
    assert rgb_style(1, 2, 3) == "fill:rgb(1,2,3)"


def test_depth_conversions() -> None:
    c8 = Color.rgba8(255, 128, 0, 255)
    assert c8.to_rgba16() == (65535, 32896, 0, 65535)
    assert Color.rgba16(65535, 32896, 255, 256).to_rgba8() == (255, 128, 0, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"r": 256, "g": 0, "b": 0, "a": 0, "depth": 8},
        {"r": -1, "g": 0, "b": 0, "a": 0, "depth": 16},
        {"r": 0, "g": 0, "b": 0, "a": 0, "depth": 12},
    ],
)
def test_color_rejects_invalid_values(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        Color(**kwargs)


def test_from_hex_variants() -> None:
    assert Color.from_hex("#FF0000") == Color.rgba8(255, 0, 0, 255)
    assert Color.from_hex("0f0") == Color.rgba8(0, 255, 0, 255)
    assert Color.from_hex("#11223380") == Color.rgba8(0x11, 0x22, 0x33, 0x80)
    with pytest.raises(ValueError):
        Color.from_hex("#12345")
    with pytest.raises(ValueError):
        Color.from_hex("#GGGGGG")


def test_coerce_color() -> None:
    assert coerce_color(BLACK) is BLACK
    assert coerce_color("#000000") == Color.rgba8(0, 0, 0)
    assert coerce_color((1, 2, 3)) == Color.rgba8(1, 2, 3, 255)
    assert coerce_color([1, 2, 3, 4]) == Color.rgba8(1, 2, 3, 4)
    with pytest.raises(ValueError):
        coerce_color(3)
    with pytest.raises(ValueError):
        coerce_color((1, 2))
