"""Grid template renderer — labelled cell grid for colouring a QR code by hand.

Geometry (all in px):
    label_margin_x = max(40, ceil(font * 2.5))
    label_margin_y = max(24, ceil(font * 1.8))
    width  = label_margin_x + size * cell + padding
    height = label_margin_y + size * cell + padding
Cell (r, c) has its top-left corner at
    (label_margin_x + c * cell, label_margin_y + r * cell).
"""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Any

from qrgrid.engine.errors import InvalidLength
from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.models.options import GridRenderOptions
from qrgrid.svg.serializer import serialize_svg

# Minimum label gutters: room for three-letter column names and row numbers
# up to 177 (version 40) at the default font size.
_MIN_LABEL_MARGIN_X = 40
_MIN_LABEL_MARGIN_Y = 24
_LABEL_MARGIN_X_PER_PT = 2.5
_LABEL_MARGIN_Y_PER_PT = 1.8

# Gap between the right edge of a row label and the grid.
_ROW_LABEL_GAP = 6

_PATTERN_OPACITY = 0.35


@dataclass(frozen=True)
class GridLayout:
    size: int
    cell_size: float
    label_margin_x: int
    label_margin_y: int
    padding: float

    @property
    def width(self) -> float:
        return self.label_margin_x + self.size * self.cell_size + self.padding

    @property
    def height(self) -> float:
        return self.label_margin_y + self.size * self.cell_size + self.padding

    def cell_origin(self, row: int, col: int) -> tuple[float, float]:
        return (
            self.label_margin_x + col * self.cell_size,
            self.label_margin_y + row * self.cell_size,
        )

    def column_label_x(self, col: int) -> float:
        return self.label_margin_x + col * self.cell_size + self.cell_size / 2

    def row_label_y(self, row: int) -> float:
        return self.label_margin_y + row * self.cell_size + self.cell_size / 2


def compute_layout(size: int, options: GridRenderOptions) -> GridLayout:
    font = options.label_font_size
    return GridLayout(
        size=size,
        cell_size=options.cell_size,
        label_margin_x=max(_MIN_LABEL_MARGIN_X, math.ceil(font * _LABEL_MARGIN_X_PER_PT)),
        label_margin_y=max(_MIN_LABEL_MARGIN_Y, math.ceil(font * _LABEL_MARGIN_Y_PER_PT)),
        padding=options.padding,
    )


def grid_elements(
    matrix: ModuleMatrix,
    labels: Sequence[str],
    prefill: Collection[int],
    options: GridRenderOptions,
    layout: GridLayout,
) -> list[dict[str, Any]]:
    """Element dicts for labels, cell outlines and overlays, in paint order."""
    n = matrix.size
    cell = layout.cell_size

    column_labels = [
        {"tag": "text", "x": layout.column_label_x(c), "y": 0, "text": labels[c]}
        for c in range(n)
    ]
    row_labels = [
        {"tag": "text", "x": layout.label_margin_x - _ROW_LABEL_GAP, "y": layout.row_label_y(r), "text": str(r + 1)}
        for r in range(n)
    ]

    cells: list[dict[str, Any]] = []
    prefilled: list[dict[str, Any]] = []
    pattern: list[dict[str, Any]] = []
    for r, c, active in matrix:
        x, y = layout.cell_origin(r, c)
        cells.append({"tag": "rect", "class": "cell", "x": x, "y": y, "width": cell, "height": cell})
        if not active:
            continue
        if matrix.flat_index(r, c) in prefill:
            prefilled.append({
                "tag": "rect", "class": "overlay-prefill", "x": x, "y": y, "width": cell, "height": cell,
            })
        elif options.show_pattern:
            pattern.append({
                "tag": "rect", "class": "overlay-pattern", "x": x, "y": y, "width": cell, "height": cell,
            })

    font_attrs = {
        "fill": options.label_color,
        "font-family": "sans-serif",
        "font-size": options.label_font_size,
    }
    elements: list[dict[str, Any]] = [
        {
            "tag": "g", "class": "column-labels", **font_attrs,
            "text-anchor": "middle", "dominant-baseline": "hanging",
            "children": column_labels,
        },
        {
            "tag": "g", "class": "row-labels", **font_attrs,
            "text-anchor": "end", "dominant-baseline": "middle",
            "children": row_labels,
        },
        {
            "tag": "g", "class": "cells", "fill": "none",
            "stroke": options.stroke_color, "stroke-width": options.stroke_width,
            "children": cells,
        },
    ]
    if pattern:
        elements.append({
            "tag": "g", "class": "pattern", "fill": options.pattern_color,
            "fill-opacity": _PATTERN_OPACITY, "children": pattern,
        })
    if prefilled:
        elements.append({
            "tag": "g", "class": "prefill", "fill": options.prefill_color,
            "fill-opacity": 1, "children": prefilled,
        })
    return [e for e in elements if e["children"]]


def render_grid_svg(
    matrix: ModuleMatrix,
    labels: Sequence[str],
    prefill: Collection[int] = frozenset(),
    options: GridRenderOptions | None = None,
) -> str:
    """Full SVG document for the grid template."""
    options = options or GridRenderOptions()
    if len(labels) < matrix.size:
        raise InvalidLength(f"Need {matrix.size} column labels, got {len(labels)}")

    layout = compute_layout(matrix.size, options)
    elements = grid_elements(matrix, labels, prefill, options, layout)
    return serialize_svg(elements, layout.width, layout.height, title="QR grid template")
