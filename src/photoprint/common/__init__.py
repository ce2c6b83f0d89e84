"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .units import (
    CM_PER_INCH,
    DEFAULT_DPI,
    cm_to_pt,
    cm_to_px,
    inch_to_cm,
    px_to_cm,
)

__all__ = [
    "CM_PER_INCH",
    "DEFAULT_DPI",
    "cm_to_pt",
    "cm_to_px",
    "inch_to_cm",
    "px_to_cm",
]
