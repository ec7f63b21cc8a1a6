"""
QR grid generator — writes a colour-by-numbers template and its answer key.

Usage:
  python generate_grid.py "Hello"                          # SVG to stdout
  python generate_grid.py "Hello" -o grid.svg              # save SVG
  python generate_grid.py "Hello" -e M -p 30 -o grid.svg   # level M, 30% prefilled
  python generate_grid.py "Hello" --png grid.png --scale 2 # also a PNG at 2x
  python generate_grid.py "Hello" -k key.txt               # save the answer key
  python generate_grid.py "Hello" -p 30 --check mine.txt   # grade coloured cells
"""

from __future__ import annotations

import argparse
import logging
import sys

from qrgrid.engine.answer_key import format_answer_key
from qrgrid.engine.errors import QrGridError
from qrgrid.engine.pipeline import build_puzzle
from qrgrid.models.options import GridRenderOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="QR grid template + answer key")
    parser.add_argument("content", help="Text or URL to encode")
    parser.add_argument("-e", "--ecl", default="L", choices=["L", "M", "Q", "H"], help="Error correction level")
    parser.add_argument("-p", "--prefill", type=float, default=0, help="Percent of dark cells to prefill (0-100)")
    parser.add_argument("-s", "--cell-size", type=float, default=20, help="Cell size in px")
    parser.add_argument("--font-size", type=float, default=12, help="Label font size")
    parser.add_argument("--stroke", default="#cbd5e1", help="Grid stroke colour")
    parser.add_argument("--show-pattern", action="store_true", help="Tint the cells still to colour")
    parser.add_argument("-o", "--output", help="Write the SVG here instead of stdout")
    parser.add_argument("--png", help="Also write a PNG here")
    parser.add_argument("--scale", type=float, default=1.0, help="PNG scale factor")
    parser.add_argument("-k", "--answer-key", help="Write the answer key (space separated) here")
    parser.add_argument("--check", metavar="FILE", help="Grade the cell references in FILE; exit 2 unless complete")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        options = GridRenderOptions(
            error_correction_level=args.ecl,
            cell_size=args.cell_size,
            label_font_size=args.font_size,
            stroke_color=args.stroke,
            prefill_percent=args.prefill,
            show_pattern=args.show_pattern,
        )
        puzzle = build_puzzle(args.content, options)
    except (QrGridError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(puzzle.svg)
        print(f"Grid SVG ({puzzle.matrix.size}x{puzzle.matrix.size}) → {args.output}", file=sys.stderr)
    else:
        print(puzzle.svg)

    if args.png:
        from qrgrid.utils.rasterizer import svg_to_png

        with open(args.png, "wb") as f:
            f.write(svg_to_png(puzzle.svg, scale=args.scale))
        print(f"Grid PNG → {args.png}", file=sys.stderr)

    if args.answer_key:
        with open(args.answer_key, "w", encoding="utf-8") as f:
            f.write(puzzle.answer_key_text + "\n")
        print(
            f"Answer key: {len(puzzle.answer_key)} cells ({len(puzzle.prefill)} prefilled) → {args.answer_key}",
            file=sys.stderr,
        )

    if args.check:
        try:
            with open(args.check, encoding="utf-8") as f:
                result = puzzle.check(f.read().replace(",", " ").split())
        except QrGridError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(
            f"Check: {len(result.correct)}/{len(puzzle.answer_key)} correct, "
            f"{len(result.missing)} missing, {len(result.extra)} wrong",
            file=sys.stderr,
        )
        if result.extra:
            print("Wrong: " + format_answer_key(result.extra), file=sys.stderr)
        if not result.complete:
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
