"""
どこで: `src/qrsvg/core/renderer.py`。
何を: モジュール行列を走査し、1 モジュールにつき 1 つの矩形描画コマンドを sink へ送る。
なぜ: QR エンコーダと SVG 書き出しの間を、ピクセル単位で再現可能な配置規則でつなぐため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from qrsvg.core.color import BLACK, WHITE, Color, color_to_fill_style
from qrsvg.core.errors import NotABinaryCodeError
from qrsvg.core.matrix import QR_CODE_KIND, ModuleMatrix, ModuleValue

_logger = logging.getLogger(__name__)

QUIET_ZONE_MODULES = 4


class DrawingSink(Protocol):
    """矩形プリミティブを受け取る描画先。"""

    def rect(self, x: int, y: int, width: int, height: int, style: str) -> None: ...


class DocumentSink(DrawingSink, Protocol):
    """単一コード用の文書を開始できる描画先。"""

    def start_document(self, width: int, height: int) -> None: ...


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """1 回の描画パスの配置設定。

    Parameters
    ----------
    module_side_count : int
        行列の一辺のモジュール数。
    block_size : int
        1 モジュールの描画ピクセル幅。
    origin_x, origin_y : int
        クワイエットゾーンを含めた描画グリッド左上のピクセル位置。
    """

    module_side_count: int
    block_size: int
    origin_x: int = 0
    origin_y: int = 0


def new_render_config(
    matrix: ModuleMatrix,
    block_size: int,
    *,
    strict: bool = False,
) -> RenderConfig:
    """行列とブロックサイズから RenderConfig を作って返す。

    Parameters
    ----------
    matrix : ModuleMatrix
        描画対象の行列。`side_length()` のみ参照する。
    block_size : int
        1 モジュールのピクセル幅。
    strict : bool, optional
        True なら block_size と side_length が正であることを検証する。
        既定では検証しない。

    Raises
    ------
    ValueError
        strict=True で値が正でない場合。
    """

    side = int(matrix.side_length())
    size = int(block_size)
    if strict:
        if size <= 0:
            raise ValueError(f"block_size は正の値である必要がある: got={size}")
        if side <= 0:
            raise ValueError(f"side_length は正の値である必要がある: got={side}")
    return RenderConfig(module_side_count=side, block_size=size)


def set_origin(config: RenderConfig, x: int, y: int) -> RenderConfig:
    """左上を `(x, y)` とし、4 モジュール分のクワイエットゾーンを足した新しい設定を返す。"""

    margin = config.block_size * QUIET_ZONE_MODULES
    return replace(config, origin_x=int(x) + margin, origin_y=int(y) + margin)


def compute_canvas_size(config: RenderConfig) -> tuple[int, int]:
    """クワイエットゾーン込みの正方キャンバス寸法 `(width, height)` を返す。"""

    side = config.module_side_count * config.block_size
    side += config.block_size * 2 * QUIET_ZONE_MODULES
    return side, side


def start_document(config: RenderConfig, sink: DocumentSink) -> RenderConfig:
    """コード 1 つだけを含む文書を sink 上で開始し、原点を `(0, 0)` 基準に戻した設定を返す。

    Notes
    -----
    独自の原点が必要なら、戻り値に対して改めて `set_origin` を呼ぶ。
    """

    width, height = compute_canvas_size(config)
    sink.start_document(width, height)
    return set_origin(config, 0, 0)


def render(
    config: RenderConfig,
    matrix: ModuleMatrix,
    sink: DrawingSink,
    foreground: Color = BLACK,
    background: Color = WHITE,
) -> int:
    """行列を走査し、モジュールごとに矩形を sink へ送る。

    外側ループが x（y 方向へ進む）、内側ループが y（x 方向へ進む）。
    モジュール `(x, y)` は `(origin_x + y*b, origin_y + x*b)` に置かれる。
    dark は foreground、light は background で塗り、other はスキップする。

    Parameters
    ----------
    config : RenderConfig
        配置設定。
    matrix : ModuleMatrix
        描画対象の行列。
    sink : DrawingSink
        矩形の送り先。
    foreground, background : Color, optional
        dark / light モジュールの塗り色。

    Returns
    -------
    int
        送った矩形の数。

    Raises
    ------
    NotABinaryCodeError
        `matrix.kind()` が `"QR Code"` でない場合。sink は一度も呼ばれない。
    """

    kind = matrix.kind()
    if kind != QR_CODE_KIND:
        raise NotABinaryCodeError(kind)

    b = config.block_size
    n = config.module_side_count
    fg_style = f"{color_to_fill_style(foreground)};stroke:none"
    bg_style = f"{color_to_fill_style(background)};stroke:none"

    emitted = 0
    skipped = 0
    curr_y = config.origin_y
    for x in range(n):
        curr_x = config.origin_x
        for y in range(n):
            value = matrix.value_at(x, y)
            if value is ModuleValue.DARK:
                sink.rect(curr_x, curr_y, b, b, fg_style)
                emitted += 1
            elif value is ModuleValue.LIGHT:
                sink.rect(curr_x, curr_y, b, b, bg_style)
                emitted += 1
            else:
                skipped += 1
            curr_x += b
        curr_y += b

    if skipped:
        _logger.warning("dark/light 以外のモジュールをスキップしました: count=%d", skipped)
    _logger.debug(
        "render: side=%d block_size=%d emitted=%d skipped=%d", n, b, emitted, skipped
    )
    return emitted


def render_default(config: RenderConfig, matrix: ModuleMatrix, sink: DrawingSink) -> int:
    """黒/白で `render` する。"""

    return render(config, matrix, sink, BLACK, WHITE)


__all__ = [
    "DocumentSink",
    "DrawingSink",
    "QUIET_ZONE_MODULES",
    "RenderConfig",
    "compute_canvas_size",
    "new_render_config",
    "render",
    "render_default",
    "set_origin",
    "start_document",
]
