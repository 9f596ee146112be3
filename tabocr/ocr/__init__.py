"""OCR (Optical Character Recognition) layer.

This package wraps pytesseract: word data extraction, image preprocessing
and the engine object that pairs OCR words with detected tables.
"""

from .reader import (
    OcrEngineMode,
    PageSegMode,
    build_tesseract_config,
    build_word_frame,
    iter_words,
    preprocess_image_for_ocr,
    ocr_word_frame,
)
from .engine import EngineInitError, TesseractEngine

__all__ = [
    "OcrEngineMode",
    "PageSegMode",
    "build_tesseract_config",
    "build_word_frame",
    "iter_words",
    "preprocess_image_for_ocr",
    "ocr_word_frame",
    "EngineInitError",
    "TesseractEngine",
]
