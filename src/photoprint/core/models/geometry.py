"""
Module: geometry

Purpose:
    Provides the Rect dataclass - an axis-aligned rectangle used for page
    placements (centimeters), slot drawing areas and source crops (pixels).
    The unit is whatever the producer works in; Rect itself is unit-free.

Key Functions:
    - Rect.overlaps(other): Interior intersection test
    - Rect.translated(dx, dy): Shifted copy
    - Rect.as_box(): (left, top, right, bottom) tuple for PIL
    - Rect.to_dict(): Serialize for JSON

Used By:
    - builder.layout.models.PlacedItem
    - builder.images.geometry.DrawGeometry
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle with a top-left origin.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent

    Example:
        >>> r = Rect(1.0, 2.0, 10.0, 15.0)
        >>> r.right, r.bottom
        (11.0, 17.0)
    """

    x: float
    y: float
    width: float
    height: float

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height, or 0.0 for a rect without height."""
        if self.height <= 0:
            return 0.0
        return self.width / self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def overlaps(self, other: Rect, tolerance: float = 0.0) -> bool:
        """
        Check whether the interiors of two rects intersect.

        Rects that only share an edge do NOT overlap. ``tolerance`` shrinks
        the test so that floating-point contact is not reported.
        """
        return (
            self.x < other.right - tolerance
            and other.x < self.right - tolerance
            and self.y < other.bottom - tolerance
            and other.y < self.bottom - tolerance
        )

    def translated(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def as_box(self) -> tuple[int, int, int, int]:
        """
        Get as rounded (left, top, right, bottom) tuple for PIL.

        Edges are rounded independently so adjacent rects stay adjacent.
        """
        return (round(self.x), round(self.y), round(self.right), round(self.bottom))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def __repr__(self) -> str:
        return f"Rect({self.x:g}, {self.y:g}, {self.width:g}, {self.height:g})"
