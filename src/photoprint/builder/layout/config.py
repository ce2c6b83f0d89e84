"""
Module: builder.layout.config

Purpose:
    Physical page the layout engine packs slots onto. Page size is a
    parameter of every layout call; ISO A4 is only the default.

Key Classes:
    - PageConfig: Immutable page size and print resolution

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Page arrangement
    - builder.output: PDF page size and slot resolution
"""

from __future__ import annotations

from dataclasses import dataclass

from photoprint.common.units import CM_PER_INCH, DEFAULT_DPI

# ISO A4 portrait
A4_WIDTH_CM = 21.0
A4_HEIGHT_CM = 29.7

# Upper bound on the fit tolerance, whatever the DPI
MAX_FIT_TOLERANCE_CM = 0.01


@dataclass(frozen=True)
class PageConfig:
    """
    Page size and print resolution (immutable).

    Attributes:
        width_cm: Page width in centimeters
        height_cm: Page height in centimeters
        dpi: Resolution slots are rasterized at

    Example:
        >>> page = PageConfig()
        >>> page.printable_width(0.3)
        20.4
    """

    width_cm: float = A4_WIDTH_CM
    height_cm: float = A4_HEIGHT_CM
    dpi: int = DEFAULT_DPI

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.width_cm <= 0:
            raise ValueError(f"width_cm must be positive: {self.width_cm}")
        if self.height_cm <= 0:
            raise ValueError(f"height_cm must be positive: {self.height_cm}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")

    @property
    def tolerance_cm(self) -> float:
        """
        Boundary tolerance for fit checks: half a device pixel at ``dpi``,
        capped at MAX_FIT_TOLERANCE_CM.

        Floating-point drift smaller than this cannot change which pixels a
        slot covers once rasterized. The cap keeps a low DPI from letting
        slots that do not fit spill over the margins.
        """
        return min(CM_PER_INCH / self.dpi / 2, MAX_FIT_TOLERANCE_CM)

    def printable_width(self, margin_cm: float) -> float:
        """Width available for slots inside the margins."""
        return self.width_cm - 2 * margin_cm

    def printable_height(self, margin_cm: float) -> float:
        """Height available for slots inside the margins."""
        return self.height_cm - 2 * margin_cm

    def to_dict(self) -> dict:
        return {"width_cm": self.width_cm, "height_cm": self.height_cm, "dpi": self.dpi}


A4 = PageConfig()
