"""High-level pipeline orchestration for image → OCR → table cells."""

from .process import (
    format_cell_line,
    format_rect,
    format_table_header,
    format_table_structure,
    iter_table_cells,
    iter_tables,
    load_image,
    run_recognition,
)

__all__ = [
    "format_cell_line",
    "format_rect",
    "format_table_header",
    "format_table_structure",
    "iter_table_cells",
    "iter_tables",
    "load_image",
    "run_recognition",
]
