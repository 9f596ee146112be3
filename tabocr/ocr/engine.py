"""Tesseract-backed engine exposing tables and a line-grouped word stream.

Recognition runs once per image and the results stay in the engine, so
every ``word_iterator()`` call hands out a fresh generator over the same
page without running tesseract again.
"""

from __future__ import annotations

import os
from typing import Iterator, List, Optional

import cv2
import numpy as np
import pandas as pd
import pytesseract

from tabocr.geometry import Rect
from tabocr.tables.detector import detect_tables
from tabocr.tables.model import Table, Word
from .reader import (
    OcrEngineMode,
    PageSegMode,
    build_tesseract_config,
    iter_words,
    ocr_word_frame,
    preprocess_image_for_ocr,
)


class EngineInitError(RuntimeError):
    """Tesseract could not be started with the requested data path and language."""


class TesseractEngine:
    """Recognition state for one image: OCR words plus detected tables."""

    def __init__(
        self,
        data_path: Optional[str],
        language: str,
        mode: OcrEngineMode = OcrEngineMode.LSTM_ONLY,
        psm: PageSegMode = PageSegMode.AUTO,
        ocr_mode: str = 'raw',
    ) -> None:
        self.data_path = data_path
        self.language = language
        self.mode = mode
        self.psm = psm
        self.ocr_mode = ocr_mode
        self.config = build_tesseract_config(data_path, mode, psm)
        self._image: Optional[np.ndarray] = None
        self._words: Optional[pd.DataFrame] = None
        self._words_failed = False
        self._tables: List[Table] = []

    @classmethod
    def initialize(
        cls,
        data_path: Optional[str],
        language: str,
        mode: OcrEngineMode = OcrEngineMode.LSTM_ONLY,
        psm: PageSegMode = PageSegMode.AUTO,
        ocr_mode: str = 'raw',
    ) -> "TesseractEngine":
        """Check that tesseract can run with the given data and return an engine.

        Doxygen:
        - @param data_path: tessdata directory; None uses tesseract's built-in location.
        - @param language: Language(s) joined by '+', e.g. 'eng' or 'deu+eng'.
        - @param mode: OCR engine mode.
        - @param psm: Page segmentation mode.
        - @param ocr_mode: 'raw' to recognise the image as is, 'auto' to preprocess it first.
        - @return: Ready TesseractEngine.
        - @throws EngineInitError: If the binary, data path or language data is missing.
        """
        if ocr_mode not in ('raw', 'auto'):
            raise ValueError(f"Unknown OCR mode: {ocr_mode!r}")
        try:
            version = pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as e:
            raise EngineInitError(f"Tesseract executable not found: {e}") from e

        if data_path and not os.path.isdir(data_path):
            raise EngineInitError(f"Tesseract data path does not exist: {data_path}")

        config = f'--tessdata-dir "{data_path}"' if data_path else ''
        try:
            available = set(pytesseract.get_languages(config=config))
        except pytesseract.TesseractError as e:
            raise EngineInitError(f"Could not list Tesseract languages: {e}") from e
        missing = [code for code in language.split('+') if code and code not in available]
        if not language or missing:
            raise EngineInitError(f"Language data not available: {'+'.join(missing) or language!r}")

        print(f"Tesseract {version} found")
        return cls(data_path, language, mode=mode, psm=psm, ocr_mode=ocr_mode)

    def set_image(self, image: np.ndarray) -> None:
        """Load a BGR image, drop previous results and detect its tables."""
        if image is None or image.size == 0:
            raise ValueError("Image is empty")
        self._image = image
        self._words = None
        self._words_failed = False
        self._tables = detect_tables(image)

    def _ocr_input(self) -> np.ndarray:
        if self._image is None:
            raise RuntimeError("No image set")
        if self.ocr_mode == 'auto':
            return preprocess_image_for_ocr(self._image)
        return self._image

    def recognized_text(self) -> str:
        img = self._ocr_input()
        rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        return pytesseract.image_to_string(rgb, lang=self.language, config=self.config)

    def _word_frame(self) -> Optional[pd.DataFrame]:
        # a failed recognition is not retried until the next set_image
        if self._words is None and not self._words_failed:
            try:
                self._words = ocr_word_frame(self._ocr_input(), lang=self.language, config=self.config)
            except pytesseract.TesseractError as e:
                print(f"Warning: word recognition failed: {e}")
                self._words_failed = True
        return self._words

    def word_iterator(self) -> Optional[Iterator[Word]]:
        """Fresh word stream over the page, or None when there is nothing to iterate."""
        if self._image is None:
            return None
        df = self._word_frame()
        if df is None:
            return None
        return iter_words(df)

    @property
    def tables(self) -> List[Table]:
        return list(self._tables)

    def table_count(self) -> int:
        return len(self._tables)

    def table_bounding_box(self, index: int) -> Rect:
        return self._tables[index].bounding_box

    def table_rows(self, index: int) -> List[Rect]:
        return list(self._tables[index].rows)

    def table_columns(self, index: int) -> List[Rect]:
        return list(self._tables[index].columns)
