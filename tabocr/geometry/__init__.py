"""Rectangle algebra used to match OCR words against table cells."""

from .rect import Rect, area_of

__all__ = [
    "Rect",
    "area_of",
]
