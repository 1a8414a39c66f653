# どこで: `src/qrsvg/core/matrix.py`。
# 何を: モジュール行列ソースの Protocol と、numpy 配列 / segno QRCode からのアダプタを定義する。
# なぜ: 描画側を QR エンコーダの実装から切り離し、任意の 2 値行列を受け取れるようにするため。

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol

import numpy as np

QR_CODE_KIND = "QR Code"
MICRO_QR_CODE_KIND = "Micro QR Code"


class ModuleValue(Enum):
    """1 モジュールの値。"""

    DARK = "dark"
    LIGHT = "light"
    OTHER = "other"


class ModuleMatrix(Protocol):
    """正方 2 値モジュール行列のソース。"""

    def side_length(self) -> int: ...

    def value_at(self, x: int, y: int) -> ModuleValue: ...

    def kind(self) -> str: ...


def _classify(value: Any) -> ModuleValue:
    if value is True or value == 1:
        return ModuleValue.DARK
    if value is False or value == 0:
        return ModuleValue.LIGHT
    return ModuleValue.OTHER


class ArrayModuleMatrix:
    """2 次元配列を包む ModuleMatrix 実装。

    Parameters
    ----------
    modules : np.ndarray or Sequence[Sequence[int | bool]]
        shape (n, n) の行列。1/True が dark、0/False が light、それ以外は other。
    kind : str, optional
        シンボル種別。既定は `"QR Code"`。

    Notes
    -----
    `value_at(x, y)` は `modules[x, y]` を読む。配列はコピーして writeable=False で保持する。
    """

    def __init__(
        self,
        modules: np.ndarray | Sequence[Sequence[Any]],
        *,
        kind: str = QR_CODE_KIND,
    ) -> None:
        arr = np.array(modules, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"modules は 2 次元である必要がある: ndim={arr.ndim}")
        if arr.shape[0] != arr.shape[1]:
            raise ValueError(f"modules は正方である必要がある: shape={arr.shape}")
        arr.setflags(write=False)
        self._modules = arr
        self._kind = str(kind)

    @property
    def modules(self) -> np.ndarray:
        return self._modules

    def side_length(self) -> int:
        return int(self._modules.shape[0])

    def value_at(self, x: int, y: int) -> ModuleValue:
        return _classify(self._modules[x, y].item())

    def kind(self) -> str:
        return self._kind

    def __repr__(self) -> str:
        return f"ArrayModuleMatrix(side={self.side_length()}, kind={self._kind!r})"


def matrix_from_segno(qr: Any) -> ArrayModuleMatrix:
    """segno の QRCode オブジェクトから ArrayModuleMatrix を作って返す。

    `qr.matrix`（行ごとの bytearray タプル、クワイエットゾーンなし）を読む。
    `qr.is_micro` が真なら kind は `"Micro QR Code"` になる。
    """

    rows = [[int(v) for v in row] for row in qr.matrix]
    kind = MICRO_QR_CODE_KIND if bool(getattr(qr, "is_micro", False)) else QR_CODE_KIND
    return ArrayModuleMatrix(np.asarray(rows, dtype=np.uint8), kind=kind)


__all__ = [
    "ArrayModuleMatrix",
    "MICRO_QR_CODE_KIND",
    "ModuleMatrix",
    "ModuleValue",
    "QR_CODE_KIND",
    "matrix_from_segno",
]
