"""
Core Models Package

Immutable, validated data models shared by the layout engine, the slot
geometry and the output writers.

All models in this package are frozen dataclasses. A layout or geometry
computation receives a snapshot of them and never mutates it; a changed
setting or a freshly decoded image produces a new value and a new layout.
"""

from .geometry import Rect
from .images import SourceImage
from .settings import BorderStyle, FitMode, Orientation, PrintSettings
from .sizes import (
    CUSTOM_SIZE_ID,
    STANDARD_SIZES,
    PhotoSize,
    SizeUnit,
    UnknownSizeError,
    custom_size,
    get_standard_size,
)

__all__ = [
    "Rect",
    "SourceImage",
    "PrintSettings",
    "Orientation",
    "BorderStyle",
    "FitMode",
    "PhotoSize",
    "SizeUnit",
    "STANDARD_SIZES",
    "CUSTOM_SIZE_ID",
    "UnknownSizeError",
    "custom_size",
    "get_standard_size",
]
