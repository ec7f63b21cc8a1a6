"""SVG → PNG rasterization via cairosvg."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(r'<svg\b[^>]*?\bwidth="([\d.]+)"[^>]*?\bheight="([\d.]+)"', re.DOTALL)


def svg_dimensions(svg: str) -> tuple[float, float]:
    """Width/height attributes of the root <svg> element."""
    m = _SIZE_RE.search(svg)
    if not m:
        raise ValueError("SVG has no width/height attributes")
    return float(m.group(1)), float(m.group(2))


def svg_to_png(svg: str, scale: float = 1.0) -> bytes:
    """Render SVG to PNG bytes at `scale` × its natural size. Background stays transparent."""
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    import cairosvg

    width, height = svg_dimensions(svg)
    out_w = max(1, round(width * scale))
    out_h = max(1, round(height * scale))
    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=out_w,
            output_height=out_h,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
