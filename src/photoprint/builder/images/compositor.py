"""
Module: builder.images.compositor

Purpose:
    Rasterize one photo into one slot bitmap: white background, optional
    border, then the photo cropped/rotated/scaled as computed by
    builder.images.geometry.

Key Functions:
    - compose_slot(): Slot bitmap for a decoded photo
    - slot_pixel_size(): Slot size in pixels at a given DPI

Dependencies:
    - PIL: Image manipulation

Used By:
    - builder.output.renderer: PDF pages
    - builder.output.image_writer: Standalone PNG files
"""

from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from photoprint.common.units import DEFAULT_DPI, cm_to_px
from photoprint.core.models import PrintSettings

from .geometry import compute_draw_geometry
from .provider import BACKGROUND_COLOR

logger = logging.getLogger(__name__)


def slot_pixel_size(width_cm: float, height_cm: float, dpi: int = DEFAULT_DPI) -> Tuple[int, int]:
    """
    Slot size in whole pixels (at least 1x1).

    Example:
        >>> slot_pixel_size(10, 15)
        (1181, 1772)
    """
    return (
        max(1, round(cm_to_px(width_cm, dpi))),
        max(1, round(cm_to_px(height_cm, dpi))),
    )


def compose_slot(
    photo: Image.Image,
    slot_px: Tuple[int, int],
    settings: PrintSettings,
) -> Image.Image:
    """
    Draw a photo into a new slot-sized RGB bitmap.

    The slot is filled white first, so borders and contain-mode
    letterboxing come out white.

    Args:
        photo: Decoded, upright photo
        slot_px: Slot (width, height) in pixels
        settings: Border style and fit mode

    Returns:
        New RGB image of size slot_px
    """
    canvas = Image.new("RGB", slot_px, BACKGROUND_COLOR)
    geometry = compute_draw_geometry(
        photo.size,
        slot_px,
        settings.border_style,
        settings.fit_mode,
    )

    left, top, right, bottom = geometry.dest_rect.as_box()
    if right <= left or bottom <= top:
        logger.debug(f"Nothing to draw in {slot_px[0]}x{slot_px[1]}px slot")
        return canvas

    drawn = photo
    if geometry.crop_rect is not None:
        drawn = drawn.crop(geometry.crop_rect.as_box())
    if geometry.rotate_source:
        # Quarter turn clockwise
        drawn = drawn.transpose(Image.Transpose.ROTATE_270)

    drawn = drawn.resize((right - left, bottom - top), Image.Resampling.LANCZOS)
    canvas.paste(drawn, (left, top))
    return canvas
