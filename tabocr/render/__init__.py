"""Rendering helpers for debug output."""

from .draw import draw_tables

__all__ = [
    "draw_tables",
]
