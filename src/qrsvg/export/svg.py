"""
どこで: `src/qrsvg/export/svg.py`。
何を: 矩形コマンドを受け取る SVG 文書（DrawingSink）と、行列 1 つを SVG ファイルへ書き出す関数を提供する。
なぜ: 外部 writer に依存せず、決定的な SVG テキストを headless に得るため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import quoteattr

from qrsvg.core.color import Color, coerce_color
from qrsvg.core.matrix import ModuleMatrix
from qrsvg.core.renderer import new_render_config, render, start_document
from qrsvg.core.runtime_config import output_root_dir, runtime_config

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


class SvgDocument:
    """矩形要素をメモリ上に溜め、SVG テキストとして書き出す描画先。"""

    def __init__(self) -> None:
        self.width: int | None = None
        self.height: int | None = None
        self._elements: list[str] = []

    def start_document(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)

    def rect(self, x: int, y: int, width: int, height: int, style: str) -> None:
        self._elements.append(
            f'  <rect x="{int(x)}" y="{int(y)}" width="{int(width)}" '
            f'height="{int(height)}" style={quoteattr(str(style))} />'
        )

    def __len__(self) -> int:
        return len(self._elements)

    def to_string(self) -> str:
        """SVG 文書全体を文字列で返す。"""

        lines: list[str] = ['<?xml version="1.0" encoding="UTF-8"?>']
        if self.width is None or self.height is None:
            lines.append(f'<svg xmlns="{_SVG_NS}">')
        else:
            lines.append(
                f'<svg xmlns="{_SVG_NS}" width="{self.width}" height="{self.height}">'
            )
        lines.extend(self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, path: str | Path) -> Path:
        """SVG を UTF-8 で保存し、保存先パスを返す。"""

        _path = Path(path)
        _path.parent.mkdir(parents=True, exist_ok=True)
        with _path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(self.to_string())
        return _path


def export_svg(
    matrix: ModuleMatrix,
    path: str | Path,
    *,
    block_size: int | None = None,
    foreground: Color | str | None = None,
    background: Color | str | None = None,
) -> Path:
    """行列 1 つだけを含む SVG ファイルを書き出す。

    Parameters
    ----------
    matrix : ModuleMatrix
        描画対象の行列。
    path : str or Path
        出力先パス。相対パスは `output_root_dir()` 基準で解決する。
    block_size : int or None, optional
        1 モジュールのピクセル幅。None なら config の `render.block_size`。
    foreground, background : Color or str or None, optional
        dark / light の塗り色。None なら config の値。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    NotABinaryCodeError
        行列が QR Code でない場合。ファイルは書き出さない。
    """

    cfg = runtime_config()
    size = cfg.block_size if block_size is None else int(block_size)
    fg = cfg.foreground if foreground is None else coerce_color(foreground)
    bg = cfg.background if background is None else coerce_color(background)

    _path = Path(path)
    if not _path.is_absolute():
        _path = output_root_dir() / _path

    doc = SvgDocument()
    config = start_document(new_render_config(matrix, size), doc)
    render(config, matrix, doc, fg, bg)
    saved = doc.save(_path)
    _logger.debug("SVG を保存しました: %s (rects=%d)", saved, len(doc))
    return saved


__all__ = ["SvgDocument", "export_svg"]
