"""
Module: sizes

Purpose:
    Photo print sizes. A fixed catalog of common paper print formats plus a
    user-defined custom size whose dimensions may be entered in
    centimeters, inches or pixels (at 300 DPI) and are normalized to
    centimeters before layout.

Key Functions:
    - get_standard_size(size_id): Catalog lookup
    - custom_size(width, height, unit): Build the custom variant

Key Classes:
    - PhotoSize: Immutable named size in centimeters
    - SizeUnit: Units accepted for custom sizes

Dependencies:
    - photoprint.common.units: Unit conversions

Used By:
    - core.models.settings.PrintSettings
    - builder.layout.orientation.resolve_slot_size
    - cli: --list-sizes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from photoprint.common.units import inch_to_cm, px_to_cm

CUSTOM_SIZE_ID = "custom"


class UnknownSizeError(KeyError):
    """Size id not present in the catalog."""
    pass


class SizeUnit(str, Enum):
    """Unit of a custom size entry."""

    CM = "cm"
    INCH = "inch"
    PX = "px"

    def to_cm(self, value: float) -> float:
        """Normalize ``value`` in this unit to centimeters (px assume 300 DPI)."""
        if self is SizeUnit.INCH:
            return inch_to_cm(value)
        if self is SizeUnit.PX:
            return px_to_cm(value)
        return value


@dataclass(frozen=True)
class PhotoSize:
    """
    Named physical print size (immutable).

    Catalog sizes are listed portrait (width <= height); the layout engine
    decides the per-photo orientation.

    Attributes:
        id: Catalog id like "10x15", or "custom"
        name: Human readable label
        width_cm: Natural width in centimeters
        height_cm: Natural height in centimeters
        is_custom: True for the user-defined size
    """

    id: str
    name: str
    width_cm: float
    height_cm: float
    is_custom: bool = False

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.width_cm <= 0:
            raise ValueError(f"width_cm must be positive: {self.width_cm}")
        if self.height_cm <= 0:
            raise ValueError(f"height_cm must be positive: {self.height_cm}")

    @property
    def dimensions(self) -> tuple[float, float]:
        """(width_cm, height_cm) tuple."""
        return (self.width_cm, self.height_cm)


STANDARD_SIZES: tuple[PhotoSize, ...] = (
    PhotoSize("10x15", '10x15 (4x6")', 10, 15),
    PhotoSize("13x18", '13x18 (5x7")', 13, 18),
    PhotoSize("15x21", '15x21 (6x8")', 15, 21),
    PhotoSize("20x25", '20x25 (8x10")', 20, 25),
    PhotoSize("10x10", '10x10 (4x4")', 10, 10),
    PhotoSize("5x7", '5x7 (2x3")', 5, 7),
    PhotoSize("3x4", "3x4", 3, 4),
)

_SIZES_BY_ID = {size.id: size for size in STANDARD_SIZES}


def get_standard_size(size_id: str) -> PhotoSize:
    """
    Look up a catalog size by id.

    Raises:
        UnknownSizeError: If ``size_id`` is not in the catalog
    """
    try:
        return _SIZES_BY_ID[size_id]
    except KeyError:
        known = ", ".join(_SIZES_BY_ID)
        raise UnknownSizeError(f"Unknown photo size {size_id!r} (known: {known})") from None


def custom_size(width: float, height: float, unit: SizeUnit | str = SizeUnit.CM) -> PhotoSize:
    """
    Build the custom PhotoSize from a width/height entered in ``unit``.

    Example:
        >>> custom_size(1000, 1500, "px").width_cm
        8.466666666666667
    """
    unit = SizeUnit(unit)
    return PhotoSize(
        id=CUSTOM_SIZE_ID,
        name=f"{width:g}x{height:g} {unit.value}",
        width_cm=unit.to_cm(width),
        height_cm=unit.to_cm(height),
        is_custom=True,
    )
