"""Debug overlay of detected tables, rows and columns."""

from __future__ import annotations

from typing import List, Tuple

import cv2
import numpy as np

from tabocr.geometry import Rect
from tabocr.tables import Table

TABLE_COLOR = (0, 0, 255)
ROW_COLOR = (0, 160, 0)
COLUMN_COLOR = (255, 0, 0)


def _draw_rect(img: np.ndarray, rect: Rect, color: Tuple[int, int, int], thickness: int) -> None:
    cv2.rectangle(img, (rect.left, rect.top), (rect.right, rect.bottom), color, thickness)


def draw_tables(img: np.ndarray, tables: List[Table], thickness: int = 2) -> np.ndarray:
    """Draw table boxes with their row and column bands on a copy of the image.

    Doxygen:
    - @param img: Input BGR (or grayscale) image array.
    - @param tables: Tables to draw.
    - @param thickness: Line thickness of the table outline; bands use 1 px.
    - @return: New BGR image with the overlay.
    """
    out = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR) if img.ndim == 2 else img.copy()
    for table in tables:
        for row in table.rows:
            _draw_rect(out, row, ROW_COLOR, 1)
        for col in table.columns:
            _draw_rect(out, col, COLUMN_COLOR, 1)
        _draw_rect(out, table.bounding_box, TABLE_COLOR, thickness)
    return out
