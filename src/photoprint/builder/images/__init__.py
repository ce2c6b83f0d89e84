"""
Module: builder.images

Purpose:
    Photo access and per-slot rasterization.

Key Classes:
    - ImageProvider: Abstract interface for photo access
    - FileImageProvider: Filesystem provider
    - DrawGeometry: Rotation, crop and destination for one slot

Key Functions:
    - compute_draw_geometry(): Pure slot geometry
    - compose_slot(): Slot bitmap from a decoded photo

Dependencies:
    - PIL: Image manipulation

Used By:
    - builder.loading: Dimension probing
    - builder.output: PDF and PNG writers
"""

from .compositor import compose_slot, slot_pixel_size
from .geometry import DrawGeometry, compute_draw_geometry, should_rotate, usable_rect
from .provider import (
    FileImageProvider,
    ImageDecodeError,
    ImageNotFoundError,
    ImageProvider,
)

__all__ = [
    "ImageProvider",
    "FileImageProvider",
    "ImageNotFoundError",
    "ImageDecodeError",
    "DrawGeometry",
    "compute_draw_geometry",
    "should_rotate",
    "usable_rect",
    "compose_slot",
    "slot_pixel_size",
]
