"""Axis-aligned rectangles in image pixel space.

Coordinates follow the Tesseract convention: origin at the top-left corner,
y growing downward. Rectangles are not validated on construction, so an
inverted rectangle (left > right or top > bottom) is a legal value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_tuple(cls, box: Sequence[int]) -> "Rect":
        """Build a rectangle from an ``(left, top, right, bottom)`` sequence.

        Doxygen:
        - @param box: Four integer coordinates.
        - @return: New Rect.
        """
        left, top, right, bottom = box
        return cls(int(left), int(top), int(right), int(bottom))

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    def width(self) -> int:
        return abs(self.right - self.left)

    def height(self) -> int:
        return abs(self.top - self.bottom)

    def area(self) -> int:
        return self.width() * self.height()

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        """Overlapping part of two rectangles.

        The comparisons are directional, so inverted inputs produce no
        intersection even though their width and height are positive.

        Doxygen:
        - @param other: Rectangle to intersect with.
        - @return: The overlap, or None when the rectangles do not overlap
          with a positive area.
        """
        ox_left = max(self.left, other.left)
        ox_right = min(self.right, other.right)
        oy_top = max(self.top, other.top)
        oy_bottom = min(self.bottom, other.bottom)
        if ox_right > ox_left and oy_top < oy_bottom:
            return Rect(ox_left, oy_top, ox_right, oy_bottom)
        return None

    def major_overlap(self, other: "Rect") -> bool:
        """True when the overlap covers more than half of the smaller rectangle.

        Doxygen:
        - @param other: Rectangle to compare with.
        - @return: ``intersection area > 0.5 * min(area(self), area(other))``.
        """
        overlap = area_of(self.intersection(other))
        return overlap > 0.5 * min(self.area(), other.area())

    def contains(self, x: int, y: int) -> bool:
        """Strict interior test; points on the border are outside."""
        return self.left < x < self.right and self.top < y < self.bottom

    def __str__(self) -> str:
        return f"{self.left}, {self.top}, {self.right}, {self.bottom}"


def area_of(rect: Optional[Rect]) -> int:
    """Area of a rectangle, with a missing intersection counting as zero."""
    if rect is None:
        return 0
    return rect.area()
