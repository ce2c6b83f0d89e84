"""
Module: builder.images.geometry

Purpose:
    Pure geometry for drawing one photo into one slot: whether the photo
    is turned 90 degrees, which part of it is kept (cover) and where it
    lands inside the slot.

Key Functions:
    - compute_draw_geometry(): Full draw/crop/rotate decision
    - should_rotate(): Slot vs photo aspect mismatch
    - usable_rect(): Slot area left after the border

Coordinate frames:
    - crop_rect is in source pixels of the photo as stored (unrotated)
    - dest_rect is in slot units (pixels for rasterization), top-left origin
    Consumers crop first, then rotate 90 degrees clockwise, then scale the
    result into dest_rect.

Used By:
    - builder.images.compositor: Pixel copy
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from photoprint.core.models import BorderStyle, FitMode, Rect

# Border inset on every side, as a fraction of slot width
BORDER_INSET_RATIO = 0.04
# Extra polaroid caption strip at the bottom, as a fraction of slot height
POLAROID_CAPTION_RATIO = 0.12
# Share of the cropped-away height taken from the top in cover mode
COVER_TOP_BIAS = 0.35


@dataclass(frozen=True)
class DrawGeometry:
    """
    How to draw a photo into a slot.

    Attributes:
        rotate_source: Turn the photo 90 degrees before fitting
        dest_rect: Where the (cropped, rotated) photo is drawn in the slot
        crop_rect: Kept source region in cover mode, None otherwise
    """

    rotate_source: bool
    dest_rect: Rect
    crop_rect: Optional[Rect] = None


def should_rotate(source_size: Tuple[float, float], slot_size: Tuple[float, float]) -> bool:
    """
    True when one of slot and photo leans landscape and the other portrait.

    Square shapes and unknown sizes never trigger a rotation.
    """
    src_w, src_h = source_size
    slot_w, slot_h = slot_size
    if src_w <= 0 or src_h <= 0 or slot_w <= 0 or slot_h <= 0:
        return False

    slot_aspect = slot_w / slot_h
    src_aspect = src_w / src_h
    return (slot_aspect > 1 and src_aspect < 1) or (slot_aspect < 1 and src_aspect > 1)


def usable_rect(slot_size: Tuple[float, float], border_style: BorderStyle) -> Rect:
    """
    Area of the slot the photo may cover.

    A plain border insets all four sides by 4% of the slot width; polaroid
    adds a further 12% of the slot height at the bottom.
    """
    slot_w, slot_h = slot_size
    if border_style is BorderStyle.NONE:
        return Rect(0.0, 0.0, slot_w, slot_h)

    inset = slot_w * BORDER_INSET_RATIO
    caption = slot_h * POLAROID_CAPTION_RATIO if border_style is BorderStyle.POLAROID else 0.0
    return Rect(
        inset,
        inset,
        max(0.0, slot_w - 2 * inset),
        max(0.0, slot_h - 2 * inset - caption),
    )


def compute_draw_geometry(
    source_size: Tuple[float, float],
    slot_size: Tuple[float, float],
    border_style: BorderStyle = BorderStyle.NONE,
    fit_mode: FitMode = FitMode.COVER,
) -> DrawGeometry:
    """
    Compute rotation, crop and destination for drawing a photo into a slot.

    The rotation check corrects any orientation mismatch left after
    layout. When the photo is rotated, the usable area is measured in the
    photo's own frame (width and height swapped) for the fit computation.

    Cover keeps the full usable area filled: a photo wider than the area
    loses equal strips left and right; a taller photo loses 35% of the
    excess at the top and 65% at the bottom, keeping heads in portraits.

    Contain shows the whole photo scaled to fit and centered, with no
    crop.

    Unknown source sizes and empty usable areas return the usable area
    with no crop and no rotation.

    Args:
        source_size: Photo (width, height) in pixels, (0, 0) when unknown
        slot_size: Slot (width, height)
        border_style: Border drawn inside the slot
        fit_mode: Cover or contain

    Returns:
        DrawGeometry for the slot

    Example:
        >>> g = compute_draw_geometry((4000, 3000), (1000, 1500))
        >>> g.rotate_source, g.crop_rect
        (True, Rect(0, 116.667, 4000, 2666.67))
    """
    usable = usable_rect(slot_size, border_style)
    src_w, src_h = source_size
    if src_w <= 0 or src_h <= 0 or usable.is_empty:
        return DrawGeometry(rotate_source=False, dest_rect=usable)

    rotate = should_rotate(source_size, slot_size)
    if rotate:
        frame_w, frame_h = usable.height, usable.width
    else:
        frame_w, frame_h = usable.width, usable.height

    source_aspect = src_w / src_h
    frame_aspect = frame_w / frame_h

    if fit_mode is FitMode.COVER:
        return DrawGeometry(
            rotate_source=rotate,
            dest_rect=usable,
            crop_rect=_cover_crop(src_w, src_h, source_aspect, frame_aspect),
        )

    # Contain: fit inside the drawing frame, then express in slot axes
    if source_aspect > frame_aspect:
        fit_w, fit_h = frame_w, frame_w / source_aspect
    else:
        fit_w, fit_h = frame_h * source_aspect, frame_h
    if rotate:
        fit_w, fit_h = fit_h, fit_w

    dest = Rect(
        usable.x + (usable.width - fit_w) / 2,
        usable.y + (usable.height - fit_h) / 2,
        fit_w,
        fit_h,
    )
    return DrawGeometry(rotate_source=rotate, dest_rect=dest)


def _cover_crop(src_w: float, src_h: float, source_aspect: float, frame_aspect: float) -> Rect:
    """Source region with the frame's aspect ratio; see compute_draw_geometry."""
    if source_aspect > frame_aspect:
        crop_w = src_h * frame_aspect
        return Rect((src_w - crop_w) / 2, 0.0, crop_w, float(src_h))

    crop_h = src_w / frame_aspect
    return Rect(0.0, (src_h - crop_h) * COVER_TOP_BIAS, float(src_w), crop_h)
