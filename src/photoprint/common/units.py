"""
Module: common.units

Purpose:
    Physical unit conversions. Centimeters are the working unit of the
    layout engine; pixels appear at rasterization time and PDF points at
    ReportLab's drawing boundary.

Used By:
    - core.models.sizes: Custom size normalization
    - builder.output: Slot pixel sizes and PDF coordinates
"""

from __future__ import annotations

CM_PER_INCH = 2.54
POINTS_PER_INCH = 72.0

# Print resolution used for custom pixel sizes and for rasterized slots
DEFAULT_DPI = 300


def cm_to_px(cm: float, dpi: int = DEFAULT_DPI) -> float:
    """Convert centimeters to (fractional) pixels at ``dpi``."""
    return cm * dpi / CM_PER_INCH


def px_to_cm(px: float, dpi: int = DEFAULT_DPI) -> float:
    """Convert pixels at ``dpi`` to centimeters."""
    return px * CM_PER_INCH / dpi


def inch_to_cm(inch: float) -> float:
    return inch * CM_PER_INCH


def cm_to_pt(cm: float) -> float:
    """
    Convert centimeters to PDF points.

    PDF points are 1/72 inch.
    """
    return cm / CM_PER_INCH * POINTS_PER_INCH
