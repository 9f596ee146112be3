from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from tabocr.geometry import Rect


@dataclass(frozen=True)
class Word:
    text: Optional[str]
    box: Rect
    last_in_line: bool = False


@dataclass
class Table:
    bounding_box: Rect
    rows: List[Rect] = field(default_factory=list)
    columns: List[Rect] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.rows), len(self.columns)

    def cell(self, row_index: int, column_index: int) -> Optional[Rect]:
        return self.rows[row_index].intersection(self.columns[column_index])


class TextStatus(Enum):
    MATCHED = "matched"
    # no word in the stream overlapped the region
    NO_MATCH = "no_match"
    # the row and column do not intersect
    NO_REGION = "no_region"
    # the engine had no word iterator to offer
    ENGINE_FAILURE = "engine_failure"


@dataclass(frozen=True)
class CellText:
    text: str
    status: TextStatus
    words_matched: int = 0
    lines_scanned: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CellResult:
    table_index: int
    row_index: int
    column_index: int
    text: CellText
