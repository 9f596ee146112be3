"""Assign OCR words to table cells.

A word belongs to a cell when its bounding box majorly overlaps the cell
region (see ``Rect.major_overlap``). The words come from the engine in
reading order, grouped into text lines; the text of matching words is
concatenated without a separator.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from tabocr.geometry import Rect
from .model import CellText, TextStatus, Word


def extract_text_from_words(region: Rect, words: Iterable[Word]) -> CellText:
    """Collect the text of every word in ``words`` that falls into ``region``.

    Doxygen:
    - @param region: Cell region, usually a row/column intersection.
    - @param words: Line-grouped word stream in reading order.
    - @return: CellText with status MATCHED or NO_MATCH.
    """
    parts: List[str] = []
    lines = 0
    line_open = False
    for word in words:
        line_open = True
        if word.last_in_line:
            lines += 1
            line_open = False
        if word.text is None:
            continue
        if region.major_overlap(word.box):
            parts.append(word.text)
    if line_open:
        lines += 1

    if not parts:
        return CellText("", TextStatus.NO_MATCH, 0, lines)
    return CellText("".join(parts), TextStatus.MATCHED, len(parts), lines)


def materialize_words(engine: Any) -> Optional[List[Word]]:
    """Read the whole page word stream once so it can serve many cell queries.

    Doxygen:
    - @param engine: Object exposing ``word_iterator()``.
    - @return: List of words, or None when the engine has no iterator.
    """
    it = engine.word_iterator()
    if it is None:
        return None
    return list(it)


def extract_text(region: Optional[Rect], engine: Any, words: Optional[List[Word]] = None) -> CellText:
    """Text of the words inside ``region``.

    Without ``words`` a fresh word iterator is requested from the engine for
    every call; passing the result of ``materialize_words`` reuses one page
    scan across calls and gives the same text.

    Doxygen:
    - @param region: Cell region; None for a row/column pair that does not intersect.
    - @param engine: Object exposing ``word_iterator()``.
    - @param words: Optional pre-read word list.
    - @return: CellText; empty text for NO_REGION, ENGINE_FAILURE and NO_MATCH.
    """
    if region is None:
        return CellText("", TextStatus.NO_REGION)
    stream: Optional[Iterable[Word]] = words
    if stream is None:
        stream = engine.word_iterator()
    if stream is None:
        return CellText("", TextStatus.ENGINE_FAILURE)
    return extract_text_from_words(region, stream)
