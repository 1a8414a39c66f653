# どこで: `src/qrsvg/__init__.py`。
# 何を: ルート `qrsvg` パッケージの公開 API を定義する。
# なぜ: import 起点を `qrsvg` に統一するため。

from __future__ import annotations

from qrsvg.core.color import BLACK, WHITE, Color, color_to_fill_style
from qrsvg.core.errors import NotABinaryCodeError
from qrsvg.core.matrix import ArrayModuleMatrix, ModuleMatrix, ModuleValue, matrix_from_segno
from qrsvg.core.renderer import (
    RenderConfig,
    compute_canvas_size,
    new_render_config,
    render,
    render_default,
    set_origin,
    start_document,
)
from qrsvg.export.svg import SvgDocument, export_svg

__all__ = [
    "ArrayModuleMatrix",
    "BLACK",
    "Color",
    "ModuleMatrix",
    "ModuleValue",
    "NotABinaryCodeError",
    "RenderConfig",
    "SvgDocument",
    "WHITE",
    "color_to_fill_style",
    "compute_canvas_size",
    "export_svg",
    "matrix_from_segno",
    "new_render_config",
    "render",
    "render_default",
    "set_origin",
    "start_document",
]
