"""Word-level OCR data built on top of pytesseract and OpenCV.

This module provides:
- Building a word DataFrame from pytesseract output.
- Turning the DataFrame into a line-grouped word stream.
- Preprocessing images for OCR.
- Building the tesseract command-line config for a recognition run.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional

import cv2
import numpy as np
import pandas as pd
import pytesseract

from tabocr.geometry import Rect
from tabocr.tables.model import Word

# pytesseract.image_to_data level of a single word
WORD_LEVEL = 5

LINE_KEYS = ['page_num', 'block_num', 'par_num', 'line_num']

TABLE_VARIABLES = {
    'textord_tabfind_find_tables': '1',
    'textord_tablefind_recognize_tables': '1',
}


class OcrEngineMode(IntEnum):
    TESSERACT_ONLY = 0
    LSTM_ONLY = 1
    TESSERACT_LSTM_COMBINED = 2
    DEFAULT = 3


class PageSegMode(IntEnum):
    OSD_ONLY = 0
    AUTO_OSD = 1
    AUTO_ONLY = 2
    AUTO = 3
    SINGLE_COLUMN = 4
    SINGLE_BLOCK_VERT_TEXT = 5
    SINGLE_BLOCK = 6
    SINGLE_LINE = 7
    SINGLE_WORD = 8
    CIRCLE_WORD = 9
    SINGLE_CHAR = 10
    SPARSE_TEXT = 11
    SPARSE_TEXT_OSD = 12
    RAW_LINE = 13


def build_tesseract_config(
    data_path: Optional[str] = None,
    mode: OcrEngineMode = OcrEngineMode.LSTM_ONLY,
    psm: PageSegMode = PageSegMode.AUTO,
    variables: Optional[Dict[str, str]] = None,
) -> str:
    """Build the ``config`` string passed to pytesseract calls.

    Doxygen:
    - @param data_path: Directory holding the ``.traineddata`` files, or None for tesseract's default.
    - @param mode: OCR engine mode (``--oem``).
    - @param psm: Page segmentation mode (``--psm``).
    - @param variables: Extra tesseract variables passed with ``-c``; defaults to the table finder switches.
    - @return: Config string.
    """
    parts: List[str] = []
    if data_path:
        parts.append(f'--tessdata-dir "{data_path}"')
    parts.append(f'--oem {int(mode)}')
    parts.append(f'--psm {int(psm)}')
    for key, value in (TABLE_VARIABLES if variables is None else variables).items():
        parts.append(f'-c {key}={value}')
    return ' '.join(parts)


def build_word_frame(data: Dict[str, Any]) -> pd.DataFrame:
    """Create a word-level DataFrame from pytesseract.image_to_data output.

    Unlike confidence filtering, every word-level row is kept so the line
    grouping stays intact; a blank word gets ``text = None``.

    Doxygen:
    - @param data: Dict returned by `pytesseract.image_to_data(..., output_type=Output.DICT)`.
    - @return: DataFrame of words in reading order with right/bottom columns added.
    """
    df = pd.DataFrame(data)
    if df.empty:
        return df
    df = df[pd.to_numeric(df['level'], errors='coerce') == WORD_LEVEL].copy()
    df['conf'] = pd.to_numeric(df['conf'], errors='coerce').fillna(-1)
    text = df['text'].fillna('').astype(str).str.strip()
    df['text'] = text.where(text != '', None)
    for col in ['left', 'top', 'width', 'height']:
        df[col] = pd.to_numeric(df[col], errors='coerce').fillna(0).astype(int)
    df['right'] = df['left'] + df['width']
    df['bottom'] = df['top'] + df['height']
    return df.reset_index(drop=True)


def iter_words(df: pd.DataFrame) -> Iterator[Word]:
    """Yield words line by line, flagging the last word of each text line.

    Doxygen:
    - @param df: DataFrame produced by `build_word_frame`.
    - @return: Generator of Word in reading order.
    """
    if df.empty:
        return
    keys = [k for k in LINE_KEYS if k in df.columns]
    line_ids = list(df[keys].itertuples(index=False, name=None)) if keys else [()] * len(df)
    records = df[['text', 'left', 'top', 'right', 'bottom']].itertuples(index=False, name=None)
    for i, (text, left, top, right, bottom) in enumerate(records):
        last = i + 1 == len(line_ids) or line_ids[i + 1] != line_ids[i]
        yield Word(
            text=text if isinstance(text, str) else None,
            box=Rect(int(left), int(top), int(right), int(bottom)),
            last_in_line=last,
        )


def preprocess_image_for_ocr(img_bgr: np.ndarray) -> np.ndarray:
    """Preprocess a BGR image to improve OCR accuracy.

    Doxygen:
    - @param img_bgr: Input image in BGR format.
    - @return: Preprocessed BGR image.
    """
    gray = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)
    gray = cv2.bilateralFilter(gray, d=7, sigmaColor=50, sigmaSpace=50)
    th = cv2.adaptiveThreshold(gray, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
                               cv2.THRESH_BINARY, 31, 10)
    th = cv2.medianBlur(th, 3)
    # convert back to 3-channel BGR for consistency with downstream
    return cv2.cvtColor(th, cv2.COLOR_GRAY2BGR)


def ocr_word_frame(img: np.ndarray, lang: str = 'eng', config: str = '') -> pd.DataFrame:
    """Run Tesseract OCR and return the word DataFrame.

    Doxygen:
    - @param img: Input BGR image.
    - @param lang: Tesseract language(s), e.g. 'eng' or 'deu+eng'.
    - @param config: Config string from `build_tesseract_config`.
    - @return: DataFrame from `build_word_frame`.
    """
    rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB) if img.ndim == 3 else img
    data = pytesseract.image_to_data(rgb, lang=lang, config=config, output_type=pytesseract.Output.DICT)
    return build_word_frame(data)
