"""Plain (scannable) QR code SVG, no labels and no quiet zone."""

from __future__ import annotations

from typing import Any

from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.engine.provider import MatrixProvider, get_provider
from qrgrid.svg.serializer import serialize_svg


def symbol_elements(matrix: ModuleMatrix, size: float, fill: str, background: str) -> list[dict[str, Any]]:
    n = matrix.size
    elements: list[dict[str, Any]] = [
        {"tag": "rect", "x": 0, "y": 0, "width": size, "height": size, "fill": background},
    ]
    if n == 0:
        return elements

    module = size / n
    # One path for all dark modules keeps the document small
    d = " ".join(
        f"M{c * module:g} {r * module:g}h{module:g}v{module:g}h{-module:g}z"
        for r, c, active in matrix
        if active
    )
    if d:
        elements.append({"tag": "path", "d": d, "fill": fill, "shape-rendering": "crispEdges"})
    return elements


def generate_qr_svg(
    content: str,
    level: str = "L",
    size: float = 256,
    fill: str = "#000000",
    background: str = "#ffffff",
    provider: MatrixProvider | None = None,
) -> str:
    matrix = (provider or get_provider()).encode(content, level)
    return serialize_svg(symbol_elements(matrix, size, fill, background), size, size)
