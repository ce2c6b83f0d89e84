"""
Module: settings

Purpose:
    PrintSettings - the immutable snapshot of every user-facing print
    option. The layout engine and the slot geometry receive one snapshot
    per call and never observe later edits; a changed option means a new
    snapshot and a fresh layout.

Key Classes:
    - PrintSettings: Print size, orientation policy, spacing and styling
    - Orientation, BorderStyle, FitMode: Option enums

Dependencies:
    - photoprint.core.models.sizes: Size catalog

Used By:
    - builder.layout: Slot size and orientation
    - builder.images.geometry: Border and fit behaviour
    - builder.config.BuildConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .sizes import (
    CUSTOM_SIZE_ID,
    PhotoSize,
    SizeUnit,
    custom_size,
    get_standard_size,
)


class Orientation(str, Enum):
    """Per-photo slot orientation policy."""

    AUTO = "auto"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class BorderStyle(str, Enum):
    """Decorative white border drawn inside each slot."""

    NONE = "none"
    PLAIN = "plain"
    POLAROID = "polaroid"


class FitMode(str, Enum):
    """How a photo fills its slot: crop to fill, or show it whole."""

    COVER = "cover"
    CONTAIN = "contain"


@dataclass(frozen=True)
class PrintSettings:
    """
    Print settings snapshot (immutable).

    Attributes:
        size_id: Catalog id, or "custom" to use the custom_* fields
        custom_width: Custom width in custom_unit
        custom_height: Custom height in custom_unit
        custom_unit: Unit of the custom dimensions
        orientation: Slot orientation policy
        margin_cm: Page border in centimeters
        spacing_cm: Gap between adjacent slots in centimeters
        border_style: Border drawn inside each slot
        fit_mode: Crop-to-fill or show-whole

    Example:
        >>> PrintSettings(size_id="13x18", orientation="portrait").photo_size.name
        '13x18 (5x7")'
    """

    size_id: str = "10x15"
    custom_width: float = 10.0
    custom_height: float = 15.0
    custom_unit: SizeUnit = SizeUnit.CM
    orientation: Orientation = Orientation.AUTO
    margin_cm: float = 0.3
    spacing_cm: float = 0.2
    border_style: BorderStyle = BorderStyle.NONE
    fit_mode: FitMode = FitMode.COVER

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        # Accept plain strings from callers, store enums
        object.__setattr__(self, "custom_unit", SizeUnit(self.custom_unit))
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        object.__setattr__(self, "border_style", BorderStyle(self.border_style))
        object.__setattr__(self, "fit_mode", FitMode(self.fit_mode))

        if self.margin_cm < 0:
            raise ValueError(f"margin_cm must be non-negative: {self.margin_cm}")
        if self.spacing_cm < 0:
            raise ValueError(f"spacing_cm must be non-negative: {self.spacing_cm}")
        if self.is_custom:
            if self.custom_width <= 0 or self.custom_height <= 0:
                raise ValueError(
                    f"custom size must be positive: {self.custom_width}x{self.custom_height}"
                )
        else:
            get_standard_size(self.size_id)

    @property
    def is_custom(self) -> bool:
        return self.size_id == CUSTOM_SIZE_ID

    @property
    def photo_size(self) -> PhotoSize:
        """The selected size with dimensions normalized to centimeters."""
        if self.is_custom:
            return custom_size(self.custom_width, self.custom_height, self.custom_unit)
        return get_standard_size(self.size_id)

    @property
    def has_border(self) -> bool:
        return self.border_style is not BorderStyle.NONE

    def to_dict(self) -> dict:
        """Serialize for build metadata."""
        size = self.photo_size
        return {
            "size_id": self.size_id,
            "size_name": size.name,
            "width_cm": size.width_cm,
            "height_cm": size.height_cm,
            "orientation": self.orientation.value,
            "margin_cm": self.margin_cm,
            "spacing_cm": self.spacing_cm,
            "border_style": self.border_style.value,
            "fit_mode": self.fit_mode.value,
        }
