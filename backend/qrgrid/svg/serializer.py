"""Write SVG documents from element definitions."""

from __future__ import annotations

import re
from typing import Any
from xml.sax.saxutils import escape, quoteattr

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_PROLOG_RE = re.compile(r"^\s*<\?xml[\s\S]*?\?>\s*", re.IGNORECASE)


def fmt_num(value: float) -> str:
    """Whole numbers without a decimal part, others in shortest round-trip form."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _attr_str(elem: dict[str, Any]) -> str:
    parts = []
    for k, v in elem.items():
        if k in ("tag", "text", "children") or v is None:
            continue
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = fmt_num(v)
        parts.append(f"{k}={quoteattr(str(v))}")
    return " ".join(parts)


def _element_lines(elem: dict[str, Any], indent: str) -> list[str]:
    tag = elem.get("tag", "path")
    attrs = _attr_str(elem)
    opening = f"{indent}<{tag} {attrs}" if attrs else f"{indent}<{tag}"

    if "text" in elem:
        return [f"{opening}>{escape(str(elem['text']))}</{tag}>"]

    children = elem.get("children")
    if children:
        lines = [f"{opening}>"]
        for child in children:
            lines.extend(_element_lines(child, indent + "  "))
        lines.append(f"{indent}</{tag}>")
        return lines

    return [f"{opening} />"]


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
    sized: bool = True,
) -> str:
    """Generate a standalone SVG document (with XML declaration).

    Element dicts carry a "tag", attributes, and optionally "text" (escaped
    character content) or "children" (nested element dicts).
    """
    w, h = fmt_num(canvas_w), fmt_num(canvas_h)
    size_attrs = f' width="{w}" height="{h}"' if sized else ""
    lines = [
        XML_DECLARATION,
        f'<svg xmlns="http://www.w3.org/2000/svg"{size_attrs} viewBox="0 0 {w} {h}"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        lines.extend(_element_lines(elem, "  "))

    lines.append("</svg>")
    return "\n".join(lines)


def strip_xml_prolog(svg: str) -> str:
    """Drop a leading <?xml ...?> declaration for inline embedding."""
    return _PROLOG_RE.sub("", svg, count=1)
