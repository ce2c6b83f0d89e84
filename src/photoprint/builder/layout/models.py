"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing placed slots and pages. They are
    recomputed from scratch on every layout call, never mutated or cached.

Key Classes:
    - PlacedItem: One photo copy positioned on a page
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from photoprint.core.models import Rect, SourceImage

from .config import PageConfig


@dataclass(frozen=True)
class PlacedItem:
    """
    A photo copy positioned on a page.

    Coordinates are page-space centimeters from the top-left corner.

    Attributes:
        source: The SourceImage this copy prints
        x: Left edge of the slot
        y: Top edge of the slot
        width: Slot width after orientation
        height: Slot height after orientation
        rotated: Slot long axis differs from the selected size's long axis
        copy_index: 0-based copy number of the source

    Example:
        >>> item = PlacedItem(image, x=0.4, y=0.3, width=10, height=15)
        >>> item.rect.bottom
        15.3
    """

    source: SourceImage
    x: float
    y: float
    width: float
    height: float
    rotated: bool = False
    copy_index: int = 0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict:
        return {
            "source": self.source.id,
            "copy": self.copy_index + 1,
            "rotated": self.rotated,
            **self.rect.to_dict(),
        }


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: PlacedItems in consumption order
    """

    index: int
    placements: tuple[PlacedItem, ...]

    @property
    def placement_count(self) -> int:
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        return len(self.placements) == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        page: Page the plans were computed for
        slot_size: Natural (width_cm, height_cm) before orientation
        warnings: Oversized-slot messages

    Example:
        >>> result = paginate(images, settings)
        >>> result.page_count, result.total_placements
        (2, 3)
    """

    pages: tuple[PagePlan, ...]
    page: PageConfig
    slot_size: tuple[float, float]
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        return sum(p.placement_count for p in self.pages)

    def iter_placements(self) -> Iterator[tuple[PagePlan, PlacedItem]]:
        for plan in self.pages:
            for placement in plan.placements:
                yield plan, placement
