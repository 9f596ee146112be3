"""
Entry point for the Tesseract table extraction demos.

Two programs share one CLI:
- structure: OCR text, then each table's bounding box, rows and columns
- cells: OCR text, then each table's size and the text of every cell

Packages:
- tabocr.geometry: Rectangle algebra
- tabocr.tables: Table detection and word-to-cell assignment
- tabocr.ocr: pytesseract engine wrapper
- tabocr.pipeline: High-level orchestration (`iter_table_cells`)
- tabocr.render: Table overlay drawing
"""

from __future__ import annotations

import sys

import cv2
import pytesseract

from tabocr.config import configure_dependencies
from tabocr.geometry import Rect
from tabocr.ocr import EngineInitError, OcrEngineMode
from tabocr.pipeline import (
    format_cell_line,
    format_table_header,
    format_table_structure,
    iter_table_cells,
    iter_tables,
    load_image,
    run_recognition,
)
from tabocr.render import draw_tables

__all__ = [
    "Rect",
    "iter_table_cells",
    "iter_tables",
    "run_recognition",
]


def _cli(argv: list[str] | None = None) -> int:
    """CLI for table structure and cell text extraction.

    structure | cells: Program to run
    --file-path / -f: Path to input image
    --data-path / -d: tessdata folder containing the LSTM files
    --language / -l: Tesseract language(s) (default: eng)
    --ocr-mode: 'raw' for clean images, 'auto' to preprocess scans (default: raw)
    --strategy: 'fresh' word iterator per cell or 'cached' page words (default: fresh)
    --pause: Wait for Enter after recognition
    --overlay: Save an image with detected tables drawn on it
    """
    import argparse

    deps = configure_dependencies()

    parser = argparse.ArgumentParser(description="Detect tables with Tesseract and print their geometry and cell text.")
    parser.add_argument("program", nargs="?", default="cells", choices=["structure", "cells"], help="What to print (default: cells)")
    parser.add_argument("--file-path", "-f", type=str, required=True, help="Path to an image")
    parser.add_argument("--data-path", "-d", type=str, default=deps.data_path, help=f"Path to the tessdata folder containing the LSTM files (default: {deps.data_path})")
    parser.add_argument("--language", "-l", type=str, default=deps.language, help=f"Language you want to use (default: {deps.language})")
    parser.add_argument("--ocr-mode", type=str, default="raw", choices=["raw", "auto"], help="OCR preprocessing mode: 'raw' for clean images, 'auto' for scanned docs (default: raw)")
    parser.add_argument("--strategy", type=str, default="fresh", choices=["fresh", "cached"], help="Word lookup per cell: fresh iterator or cached page words (default: fresh)")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before printing the OCR output")
    parser.add_argument("--overlay", type=str, help="Path to save an image with detected tables drawn")

    args = parser.parse_args(argv)

    try:
        engine = run_recognition(
            image_path=args.file_path,
            data_path=args.data_path or None,
            language=args.language,
            mode=OcrEngineMode.LSTM_ONLY,
            ocr_mode=args.ocr_mode,
        )
    except EngineInitError as e:
        print("Could not initialize tesseract.", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1
    except (FileNotFoundError, RuntimeError) as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        out_text = engine.recognized_text()
    except pytesseract.TesseractError as e:
        print(f"Warning: page recognition failed: {e}")
        out_text = ""
    print("Tesseract recognition finished")
    print()
    if args.pause:
        input("Press Enter to continue")
    print(f"OCR output:\n{out_text}")

    if args.overlay:
        overlay = draw_tables(load_image(args.file_path), engine.tables)
        if cv2.imwrite(args.overlay, overlay):
            print(f"Saved table overlay to: {args.overlay}")
        else:
            print(f"Warning: failed to write overlay image '{args.overlay}'")

    print(f"Tables detected: {engine.table_count()}")
    if args.program == "structure":
        for table in iter_tables(engine):
            print()
            for line in format_table_structure(table):
                print(line)
        return 0

    cells_by_table: dict[int, list] = {}
    for result in iter_table_cells(engine, strategy=args.strategy):
        cells_by_table.setdefault(result.table_index, []).append(result)
    for i, table in enumerate(iter_tables(engine)):
        print()
        print(format_table_header(table))
        for result in cells_by_table.get(i, []):
            print(format_cell_line(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(_cli())
