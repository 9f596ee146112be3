"""Ruled table detection with OpenCV.

Tables are located from their ruling lines: horizontal and vertical strokes
are isolated with morphological opening, their union gives the table
regions, and the ruling positions inside each region give the row and
column bands.
"""

from __future__ import annotations

from typing import List, Tuple

import cv2
import numpy as np

from tabocr.geometry import Rect
from .model import Table


def ruling_masks(img_bgr: np.ndarray, scale: int = 40) -> Tuple[np.ndarray, np.ndarray]:
    """Binary masks of horizontal and vertical ruling lines.

    Doxygen:
    - @param img_bgr: Input image in BGR (or single channel) format.
    - @param scale: Kernel length as a fraction of the image size (size // scale).
    - @return: (horizontal_mask, vertical_mask), uint8 arrays of 0/255.
    """
    gray = img_bgr if img_bgr.ndim == 2 else cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)
    _, thresh = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY_INV + cv2.THRESH_OTSU)
    h, w = thresh.shape[:2]
    horizontal_kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (max(10, w // scale), 1))
    vertical_kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (1, max(10, h // scale)))
    horizontal = cv2.morphologyEx(thresh, cv2.MORPH_OPEN, horizontal_kernel, iterations=1)
    vertical = cv2.morphologyEx(thresh, cv2.MORPH_OPEN, vertical_kernel, iterations=1)
    return horizontal, vertical


def ruling_positions(mask: np.ndarray, axis: int, fill_ratio: float = 0.5) -> List[int]:
    """Centres of ruling lines found along one axis of a mask.

    ``axis=1`` scans pixel rows (horizontal rulings), ``axis=0`` scans
    pixel columns (vertical rulings). A line of pixels counts as ruling when
    at least ``fill_ratio`` of it is set; adjacent ruling lines collapse to
    the centre of their run.
    """
    if mask.size == 0:
        return []
    length = mask.shape[axis]
    profile = (mask > 0).sum(axis=axis)
    hits = np.flatnonzero(profile >= fill_ratio * length)
    positions: List[int] = []
    if hits.size == 0:
        return positions
    start = prev = int(hits[0])
    for idx in hits[1:]:
        idx = int(idx)
        if idx != prev + 1:
            positions.append((start + prev) // 2)
            start = idx
        prev = idx
    positions.append((start + prev) // 2)
    return positions


def _band_edges(positions: List[int], extent: int, min_gap: int) -> List[int]:
    # region edges act as implicit rulings
    edges: List[int] = []
    for pos in sorted([0, *positions, extent]):
        if edges and pos - edges[-1] < min_gap:
            if pos == extent:
                edges[-1] = extent
            continue
        edges.append(pos)
    if len(edges) < 2:
        return [0, extent]
    return edges


def split_table(
    box: Rect,
    horizontal: np.ndarray,
    vertical: np.ndarray,
    fill_ratio: float = 0.5,
    min_gap: int = 8,
) -> Table:
    """Build row and column bands for one table region.

    Doxygen:
    - @param box: Table bounding box in image coordinates.
    - @param horizontal: Horizontal ruling mask of the full image.
    - @param vertical: Vertical ruling mask of the full image.
    - @param fill_ratio: Minimum filled share for a ruling line.
    - @param min_gap: Rulings closer than this many pixels merge.
    - @return: Table with rows spanning the full width and columns spanning the full height.
    """
    h_crop = horizontal[box.top:box.bottom, box.left:box.right]
    v_crop = vertical[box.top:box.bottom, box.left:box.right]
    ys = _band_edges(ruling_positions(h_crop, axis=1, fill_ratio=fill_ratio), box.height(), min_gap)
    xs = _band_edges(ruling_positions(v_crop, axis=0, fill_ratio=fill_ratio), box.width(), min_gap)
    rows = [
        Rect(box.left, box.top + y0, box.right, box.top + y1)
        for y0, y1 in zip(ys, ys[1:])
    ]
    columns = [
        Rect(box.left + x0, box.top, box.left + x1, box.bottom)
        for x0, x1 in zip(xs, xs[1:])
    ]
    return Table(bounding_box=box, rows=rows, columns=columns)


def detect_tables(
    img_bgr: np.ndarray,
    min_table_area: int = 5000,
    min_side: int = 20,
    scale: int = 40,
    fill_ratio: float = 0.5,
    min_gap: int = 8,
) -> List[Table]:
    """Detect ruled tables and their row/column geometry.

    Doxygen:
    - @param img_bgr: Input image in BGR format.
    - @param min_table_area: Minimum bounding box area of a table region.
    - @param min_side: Minimum width and height of a table region.
    - @param scale: Ruling kernel length divisor, see `ruling_masks`.
    - @param fill_ratio: Minimum filled share for a ruling line.
    - @param min_gap: Rulings closer than this many pixels merge.
    - @return: Tables ordered top-to-bottom, then left-to-right.
    """
    horizontal, vertical = ruling_masks(img_bgr, scale=scale)
    table_mask = cv2.bitwise_or(horizontal, vertical)
    table_mask = cv2.dilate(table_mask, cv2.getStructuringElement(cv2.MORPH_RECT, (3, 3)), iterations=2)
    contours, _ = cv2.findContours(table_mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

    boxes: List[Rect] = []
    for contour in contours:
        x, y, w, h = cv2.boundingRect(contour)
        if w * h < min_table_area or w < min_side or h < min_side:
            continue
        boxes.append(Rect(int(x), int(y), int(x + w), int(y + h)))
    boxes.sort(key=lambda b: (b.top, b.left))

    return [
        split_table(box, horizontal, vertical, fill_ratio=fill_ratio, min_gap=min_gap)
        for box in boxes
    ]
