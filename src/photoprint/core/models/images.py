"""
Module: images

Purpose:
    The SourceImage model - one photograph in the print batch, with its
    copy count and (eventually) its decoded pixel dimensions.

    Dimensions start at (0, 0) and are filled in once the image header has
    been read. Everything downstream treats unknown dimensions as a square
    image, so a layout can be computed before probing finishes and simply
    recomputed afterwards.

Used By:
    - builder.loading.loader: Creates and probes SourceImages
    - builder.layout.paginator: Orientation decisions
    - builder.output: File naming and pixel access
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceImage:
    """
    A photo to print (immutable).

    Attributes:
        id: Stable identifier within the batch
        path: Location of the image file
        copies: Number of prints wanted (>= 1)
        width: Decoded pixel width, 0 while unknown
        height: Decoded pixel height, 0 while unknown
        error: Decode failure message, None when the image is usable
    """

    id: str
    path: Path
    copies: int = 1
    width: int = 0
    height: int = 0
    error: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate image on construction."""
        if self.copies < 1:
            raise ValueError(f"copies must be >= 1: {self.copies}")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"dimensions must be non-negative: {self.width}x{self.height}")

    @property
    def dimensions_known(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def is_landscape(self) -> bool:
        """True when wider than tall. Unknown dimensions are not landscape."""
        return self.width > self.height

    @property
    def aspect_ratio(self) -> float:
        """Width / height, 1.0 while dimensions are unknown."""
        if not self.dimensions_known:
            return 1.0
        return self.width / self.height

    @property
    def display_name(self) -> str:
        return Path(self.path).stem

    def with_dimensions(self, width: int, height: int) -> SourceImage:
        return replace(self, width=width, height=height, error=None)

    def with_copies(self, copies: int) -> SourceImage:
        return replace(self, copies=max(1, copies))

    def with_error(self, message: str) -> SourceImage:
        return replace(self, error=message)
