"""
Module: builder.layout.orientation

Purpose:
    Resolve the selected print size to a natural slot size, and decide
    per photo whether that slot is turned on its side.

Key Functions:
    - resolve_slot_size(): Natural (width, height) in centimeters
    - orient_slot(): Effective slot for one photo under a policy

Used By:
    - builder.layout.paginator: Packing
    - builder.output.image_writer: Standalone slot files
"""

from __future__ import annotations

from typing import NamedTuple

from photoprint.core.models import Orientation, PrintSettings, SourceImage


class OrientedSlot(NamedTuple):
    width: float
    height: float
    rotated: bool


def resolve_slot_size(settings: PrintSettings) -> tuple[float, float]:
    """
    Natural slot size in centimeters, before any per-photo orientation.

    Catalog sizes come straight from the catalog; custom sizes are
    converted from their unit (inch x 2.54, px x 2.54 / 300).
    """
    return settings.photo_size.dimensions


def orient_slot(
    natural: tuple[float, float],
    image: SourceImage,
    orientation: Orientation,
) -> OrientedSlot:
    """
    Effective slot for ``image`` under ``orientation``.

    - AUTO: turn the slot when the photo's landscape-ness differs from the
      slot's. Photos with unknown dimensions count as not landscape.
    - LANDSCAPE: force width >= height.
    - PORTRAIT: force height >= width.

    Square slots are never reported as rotated since swapping them is a
    no-op.

    Example:
        >>> orient_slot((15, 10), image, Orientation.PORTRAIT)
        OrientedSlot(width=10, height=15, rotated=True)
    """
    width, height = natural

    if orientation is Orientation.AUTO:
        swap = image.is_landscape != (width > height)
    elif orientation is Orientation.LANDSCAPE:
        swap = width < height
    else:
        swap = width > height

    if swap and width != height:
        return OrientedSlot(height, width, True)
    return OrientedSlot(width, height, False)
