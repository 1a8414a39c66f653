"""SVG 書き出し（`qrsvg.export.svg`）のテスト。"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np
import pytest

from qrsvg.core.errors import NotABinaryCodeError
from qrsvg.core.matrix import ArrayModuleMatrix, matrix_from_segno
from qrsvg.core.runtime_config import set_config_path
from qrsvg.export.svg import SvgDocument, export_svg

_SVG_NS = "http://www.w3.org/2000/svg"
_NS = {"svg": _SVG_NS}


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def _parse_svg(text: str) -> ET.Element:
    root = ET.fromstring(text)
    assert root.tag == f"{{{_SVG_NS}}}svg"
    return root


def test_svg_document_serializes_rects() -> None:
    doc = SvgDocument()
    doc.start_document(30, 30)
    doc.rect(1, 2, 3, 3, "fill:rgb(0,0,0);stroke:none")

    root = _parse_svg(doc.to_string())
    assert root.attrib["width"] == "30"
    assert root.attrib["height"] == "30"
    rects = root.findall("svg:rect", _NS)
    assert len(rects) == 1
    assert rects[0].attrib == {
        "x": "1",
        "y": "2",
        "width": "3",
        "height": "3",
        "style": "fill:rgb(0,0,0);stroke:none",
    }


def test_svg_document_without_start_omits_size() -> None:
    doc = SvgDocument()
    doc.rect(0, 0, 1, 1, 'a"b<c')
    root = _parse_svg(doc.to_string())
    assert "width" not in root.attrib
    assert root.find("svg:rect", _NS).attrib["style"] == 'a"b<c'


def test_export_svg_writes_standalone_document(tmp_path: Path) -> None:
    matrix = ArrayModuleMatrix([[1, 0], [0, 1]])
    out_path = tmp_path / "nested" / "qr.svg"

    returned = export_svg(matrix, out_path, block_size=3, foreground="#FF0000")
    assert returned == out_path

    root = _parse_svg(out_path.read_text(encoding="utf-8"))
    assert root.attrib["width"] == str(2 * 3 + 8 * 3)
    rects = root.findall("svg:rect", _NS)
    assert [(r.attrib["x"], r.attrib["y"]) for r in rects] == [
        ("12", "12"),
        ("15", "12"),
        ("12", "15"),
        ("15", "15"),
    ]
    assert rects[0].attrib["style"] == "fill:rgb(255,0,0);stroke:none"
    assert rects[1].attrib["style"] == "fill:rgb(255,255,255);stroke:none"


def test_export_svg_resolves_relative_path_under_output_dir(tmp_path: Path) -> None:
    matrix = ArrayModuleMatrix(np.ones((1, 1), dtype=bool))
    saved = export_svg(matrix, "one.svg")
    assert saved == Path("data") / "output" / "one.svg"
    root = _parse_svg((tmp_path / saved).read_text(encoding="utf-8"))
    assert root.attrib["width"] == "90"


def test_export_svg_is_deterministic(tmp_path: Path) -> None:
    matrix = ArrayModuleMatrix(np.eye(5, dtype=bool))
    a = export_svg(matrix, tmp_path / "a.svg", block_size=2)
    b = export_svg(matrix, tmp_path / "b.svg", block_size=2)
    assert a.read_bytes() == b.read_bytes()


def test_export_svg_rejects_non_qr_kind(tmp_path: Path) -> None:
    matrix = ArrayModuleMatrix([[1]], kind="Data Matrix")
    out_path = tmp_path / "bad.svg"
    with pytest.raises(NotABinaryCodeError):
        export_svg(matrix, out_path)
    assert not out_path.exists()


def test_export_svg_renders_real_segno_symbol(tmp_path: Path) -> None:
    segno = pytest.importorskip("segno")
    qr = segno.make_qr("https://example.com")
    n = len(qr.matrix)

    out_path = export_svg(matrix_from_segno(qr), tmp_path / "segno.svg", block_size=2)
    root = _parse_svg(out_path.read_text(encoding="utf-8"))
    assert root.attrib["width"] == str(n * 2 + 16)
    assert len(root.findall("svg:rect", _NS)) == n * n
