"""
どこで: `src/qrsvg/core/color.py`。
何を: ビット深度タグ付き RGBA 色と、SVG の fill スタイル文字列への変換を提供する。
なぜ: 8bit/16bit の暗黙な切り捨てに頼らず、出力スタイルを決定的にするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

_SUPPORTED_DEPTHS = (8, 16)


@dataclass(frozen=True, slots=True)
class Color:
    """チャンネル幅を明示した RGBA 色。

    Parameters
    ----------
    r, g, b, a : int
        各チャンネル値。範囲は `0 .. 2**depth - 1`。
    depth : int
        チャンネルのビット深度（8 または 16）。

    Raises
    ------
    ValueError
        depth が未対応、またはチャンネル値が範囲外の場合。
    """

    r: int
    g: int
    b: int
    a: int
    depth: int = 16

    def __post_init__(self) -> None:
        if self.depth not in _SUPPORTED_DEPTHS:
            raise ValueError(f"depth は 8 または 16 である必要がある: got={self.depth!r}")
        limit = (1 << self.depth) - 1
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise ValueError(f"{name} は int である必要がある: got={v!r}")
            if v < 0 or v > limit:
                raise ValueError(f"{name} は 0..{limit} の範囲である必要がある: got={v}")

    @classmethod
    def rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """8bit チャンネルの色を返す。"""

        return cls(int(r), int(g), int(b), int(a), depth=8)

    @classmethod
    def rgba16(cls, r: int, g: int, b: int, a: int = 65535) -> Color:
        """16bit チャンネルの色を返す。"""

        return cls(int(r), int(g), int(b), int(a), depth=16)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """`#RGB` / `#RRGGBB` / `#RRGGBBAA` 形式の文字列を 8bit 色として返す。

        Raises
        ------
        ValueError
            形式が不正な場合。
        """

        s = str(text).strip()
        body = s[1:] if s.startswith("#") else s
        if len(body) == 3:
            body = "".join(ch * 2 for ch in body)
        if len(body) not in (6, 8):
            raise ValueError(f"hex color の形式が不正: {text!r}")
        try:
            channels = [int(body[i : i + 2], 16) for i in range(0, len(body), 2)]
        except ValueError as exc:
            raise ValueError(f"hex color の形式が不正: {text!r}") from exc
        if len(channels) == 3:
            channels.append(255)
        return cls.rgba8(*channels)

    def to_rgba16(self) -> tuple[int, int, int, int]:
        """16bit チャンネルの `(r, g, b, a)` を返す（8bit は `v * 257` で拡張）。"""

        if self.depth == 16:
            return self.r, self.g, self.b, self.a
        return self.r * 257, self.g * 257, self.b * 257, self.a * 257

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """8bit チャンネルの `(r, g, b, a)` を返す（16bit は `>> 8` で縮小）。"""

        if self.depth == 8:
            return self.r, self.g, self.b, self.a
        return self.r >> 8, self.g >> 8, self.b >> 8, self.a >> 8


BLACK = Color.rgba16(0, 0, 0, 65535)
WHITE = Color.rgba16(65535, 65535, 65535, 65535)


def coerce_color(value: object) -> Color:
    """値を Color に正規化して返す。

    Parameters
    ----------
    value : object
        Color、hex 文字列、または 8bit の `(r, g, b)` / `(r, g, b, a)` シーケンス。

    Raises
    ------
    ValueError
        解釈できない値の場合。
    """

    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    try:
        seq = list(cast(Any, value))
    except TypeError as exc:
        raise ValueError(f"color として解釈できない: {value!r}") from exc
    if len(seq) not in (3, 4):
        raise ValueError(f"color は長さ 3 または 4 のシーケンスである必要がある: {value!r}")
    return Color.rgba8(*(int(v) for v in seq))


def rgb_style(r: int, g: int, b: int) -> str:
    """不透明な fill スタイル `fill:rgb(r,g,b)` を返す。"""

    return f"fill:rgb({int(r)},{int(g)},{int(b)})"


def color_to_fill_style(color: Color) -> str:
    """Color を SVG の fill スタイル断片に変換して返す。

    16bit に揃えた各チャンネルを `>> 8` で 0..255 に落とし、alpha が 255 なら
    `fill:rgb(r,g,b)`、それ以外は `fill-opacity:<a/255>; fill:rgb(r,g,b)` を返す。
    """

    r16, g16, b16, a16 = color.to_rgba16()
    r, g, b, a = r16 >> 8, g16 >> 8, b16 >> 8, a16 >> 8
    if a == 255:
        return rgb_style(r, g, b)
    return f"fill-opacity:{a / 255.0:.2f}; {rgb_style(r, g, b)}"


__all__ = ["BLACK", "WHITE", "Color", "coerce_color", "color_to_fill_style", "rgb_style"]
