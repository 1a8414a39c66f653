# どこで: `src/qrsvg/core/errors.py`。
# 何を: 描画時に送出する例外を定義する。

from __future__ import annotations


class NotABinaryCodeError(Exception):
    """行列の種別が単層 2 値の QR Code でない場合に送出する。"""

    def __init__(self, kind: str) -> None:
        self.kind = str(kind)
        super().__init__(f"can not write to SVG: Not a QR code (kind={self.kind!r})")


__all__ = ["NotABinaryCodeError"]
