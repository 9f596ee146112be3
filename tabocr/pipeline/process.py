"""High-level pipeline: load image → recognise → enumerate tables and cells.

This module orchestrates the full flow and provides entry points suitable
for scripts and notebooks, plus the text formatting used by the CLI.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, List, Optional

import cv2
import numpy as np

from tabocr.geometry import Rect
from tabocr.ocr import OcrEngineMode, PageSegMode, TesseractEngine
from tabocr.tables import CellResult, CellText, Table, TextStatus, extract_text, materialize_words

STRATEGIES = ("fresh", "cached")


def load_image(image_path: str) -> np.ndarray:
    """Read an image from disk in BGR format.

    Doxygen:
    - @param image_path: Path to the image file.
    - @return: BGR image array.
    - @throws FileNotFoundError: If the file does not exist.
    - @throws RuntimeError: If OpenCV cannot decode the file.
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Image file not found: {image_path}")
    img_bgr = cv2.imread(image_path)
    if img_bgr is None:
        raise RuntimeError(f"Failed to load image: {image_path}")
    return img_bgr


def run_recognition(
    image_path: str,
    data_path: Optional[str],
    language: str,
    mode: OcrEngineMode = OcrEngineMode.LSTM_ONLY,
    psm: PageSegMode = PageSegMode.AUTO,
    ocr_mode: str = 'raw',
) -> TesseractEngine:
    """Initialise tesseract and load the image into it.

    Doxygen:
    - @param image_path: Path to input image file.
    - @param data_path: tessdata directory.
    - @param language: Tesseract language(s).
    - @param mode: OCR engine mode.
    - @param psm: Page segmentation mode.
    - @param ocr_mode: 'raw' or 'auto' preprocessing.
    - @return: Engine with the image set and its tables detected.
    - @throws EngineInitError: If tesseract cannot be initialised.
    """
    engine = TesseractEngine.initialize(data_path, language, mode=mode, psm=psm, ocr_mode=ocr_mode)
    engine.set_image(load_image(image_path))
    return engine


def iter_tables(engine: Any) -> Iterator[Table]:
    for i in range(engine.table_count()):
        yield Table(
            bounding_box=engine.table_bounding_box(i),
            rows=list(engine.table_rows(i)),
            columns=list(engine.table_columns(i)),
        )


def iter_table_cells(engine: Any, strategy: str = "fresh") -> Iterator[CellResult]:
    """Yield the text of every cell of every table in row-major order.

    With ``strategy="fresh"`` each cell asks the engine for a new word
    iterator; ``"cached"`` reads the page words once and reuses them.

    Doxygen:
    - @param engine: Engine exposing the table accessors and ``word_iterator()``.
    - @param strategy: 'fresh' or 'cached'.
    - @return: Generator of CellResult.
    - @throws ValueError: If the strategy is unknown.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy!r} (expected one of {', '.join(STRATEGIES)})")
    words = None
    cache_failed = False
    if strategy == "cached":
        words = materialize_words(engine)
        cache_failed = words is None
    for t, table in enumerate(iter_tables(engine)):
        for r, row in enumerate(table.rows):
            for c, column in enumerate(table.columns):
                region = row.intersection(column)
                if cache_failed and region is not None:
                    text = CellText("", TextStatus.ENGINE_FAILURE)
                else:
                    text = extract_text(region, engine, words=words)
                yield CellResult(t, r, c, text)


def format_rect(rect: Rect) -> str:
    return str(rect)


def format_table_structure(table: Table) -> List[str]:
    lines = [f"table BoundingBox: {format_rect(table.bounding_box)};"]
    lines.extend(f"row: {format_rect(row)};" for row in table.rows)
    lines.append("")
    lines.extend(f"col: {format_rect(col)};" for col in table.columns)
    return lines


def format_table_header(table: Table) -> str:
    n_rows, n_cols = table.shape
    return f"table BoundingBox: {n_rows} x {n_cols} pos: {format_rect(table.bounding_box)};"


def format_cell_line(result: CellResult) -> str:
    return (
        f"Table {result.table_index}, row {result.row_index}, "
        f"col {result.column_index}, text \"{result.text}\""
    )
