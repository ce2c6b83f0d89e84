"""
Module: builder.layout.paginator

Purpose:
    Arrange photo copies onto pages with single-pass shelf packing.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    Shelf (row-based) packing, left-to-right, top-to-bottom:
    1. Expand every image into `copies` placement requests, in input order
    2. Orient each request's slot (auto / portrait / landscape)
    3. Wrap to a new row when the slot would cross the right margin
    4. Start a new page when the slot would cross the bottom margin
    5. Center each page's content horizontally

    This is a heuristic, not an optimal bin packer. Nothing is sorted or
    backtracked, so the output follows the input order exactly and a
    repeated call with the same input gives the same pages. A slot larger
    than the printable area is still placed (on its own row or page) and
    reported in LayoutResult.warnings; no copy is ever dropped.

Dependencies:
    - builder.layout.models: PlacedItem, PagePlan
    - builder.layout.config: PageConfig

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator, List, Sequence

from photoprint.core.models import PrintSettings, SourceImage

from .config import A4, PageConfig
from .models import LayoutResult, PagePlan, PlacedItem
from .orientation import orient_slot, resolve_slot_size

logger = logging.getLogger(__name__)


def paginate(
    images: Sequence[SourceImage],
    settings: PrintSettings,
    page: PageConfig = A4,
) -> LayoutResult:
    """
    Lay out every copy of every image onto pages.

    Pure function of its arguments: images whose dimensions are still
    unknown are treated as square, and the caller recomputes once probing
    finishes.

    Args:
        images: Photos in print order
        settings: Settings snapshot (size, orientation, margin, spacing)
        page: Page size

    Returns:
        LayoutResult with page plans

    Example:
        >>> result = paginate([SourceImage("a", Path("a.jpg"), copies=3)], PrintSettings())
        >>> [p.placement_count for p in result.pages]
        [2, 1]
    """
    natural = resolve_slot_size(settings)
    margin = settings.margin_cm
    spacing = settings.spacing_cm
    tolerance = page.tolerance_cm
    right_limit = page.width_cm - margin + tolerance
    bottom_limit = page.height_cm - margin + tolerance

    pages: List[List[PlacedItem]] = []
    warnings: List[str] = []
    current: List[PlacedItem] = []

    x = margin
    y = margin
    row_height = 0.0
    row_count = 0

    printable_width = page.printable_width(margin)
    printable_height = page.printable_height(margin)

    for image, copy_index in _expand_copies(images):
        width, height, rotated = orient_slot(natural, image, settings.orientation)

        # Oversized: placed anyway, alone on its row or page
        if width > printable_width + tolerance or height > printable_height + tolerance:
            message = (
                f"Slot {width:g}x{height:g}cm for {image.display_name} exceeds the "
                f"printable area {printable_width:g}x{printable_height:g}cm"
            )
            logger.warning(message)
            warnings.append(message)

        # Wrap to next row
        if row_count and x + width > right_limit:
            x = margin
            y += row_height + spacing
            row_height = 0.0
            row_count = 0

        # Seal page
        if current and y + height > bottom_limit:
            pages.append(current)
            current = []
            x = margin
            y = margin
            row_height = 0.0
            row_count = 0

        current.append(PlacedItem(
            source=image,
            x=x,
            y=y,
            width=width,
            height=height,
            rotated=rotated,
            copy_index=copy_index,
        ))
        x += width + spacing
        row_height = max(row_height, height)
        row_count += 1

    if current:
        pages.append(current)

    plans = tuple(
        PagePlan(index=i, placements=_center_horizontally(placements, page.width_cm))
        for i, placements in enumerate(pages)
    )

    logger.debug(
        f"Paginated {sum(p.placement_count for p in plans)} copies of "
        f"{len(images)} images onto {len(plans)} pages"
    )

    return LayoutResult(
        pages=plans,
        page=page,
        slot_size=natural,
        warnings=warnings,
    )


def _expand_copies(images: Sequence[SourceImage]) -> Iterator[tuple[SourceImage, int]]:
    """Yield (image, copy_index) for every copy; an image's copies stay contiguous."""
    for image in images:
        for copy_index in range(image.copies):
            yield image, copy_index


def _center_horizontally(
    placements: List[PlacedItem],
    page_width: float,
) -> tuple[PlacedItem, ...]:
    """
    Shift a page's placements so their x-extent is centered on the page.

    Vertical positions are left untouched.
    """
    if not placements:
        return ()

    min_x = min(p.x for p in placements)
    max_x = max(p.right for p in placements)
    offset = (page_width - (max_x - min_x)) / 2 - min_x

    return tuple(replace(p, x=p.x + offset) for p in placements)
