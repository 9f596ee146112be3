"""Table model, ruled table detection and word-to-cell assignment."""

from .model import CellResult, CellText, Table, TextStatus, Word
from .cells import extract_text, extract_text_from_words, materialize_words
from .detector import detect_tables

__all__ = [
    "CellResult",
    "CellText",
    "Table",
    "TextStatus",
    "Word",
    "extract_text",
    "extract_text_from_words",
    "materialize_words",
    "detect_tables",
]
