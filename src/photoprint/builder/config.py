"""
Module: builder.config

Purpose:
    Configuration dataclass for one build run. Immutable configuration
    with validation on construction.

Key Classes:
    - BuildConfig: Inputs, outputs and settings for one build run
    - OutputFormat: PDF document, PNG files, or both

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Argument mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from photoprint.builder.layout.config import PageConfig
from photoprint.core.models.settings import PrintSettings


class OutputFormat(str, Enum):
    PDF = "pdf"
    PNG = "png"
    BOTH = "both"

    @property
    def wants_pdf(self) -> bool:
        return self in (OutputFormat.PDF, OutputFormat.BOTH)

    @property
    def wants_png(self) -> bool:
        return self in (OutputFormat.PNG, OutputFormat.BOTH)


@dataclass(frozen=True)
class BuildConfig:
    """
    Configuration for one build run (immutable).

    Attributes:
        inputs: Image files and/or directories to print
        output_dir: Base directory; each run gets a timestamped subfolder
        settings: Print settings snapshot
        page: Page size and DPI
        output_format: PDF, PNG files, or both
        copies: Default copy count for every image
        copies_by_name: Per-file copy counts keyed by file name or stem
        zip_images: Also bundle exported PNGs into images.zip
        write_metadata: Write build_metadata.json into the run folder
        max_workers: Threads used to probe image dimensions
        run_name: Overrides the timestamped subfolder name

    Example:
        >>> config = BuildConfig(
        ...     inputs=[Path("holiday")],
        ...     output_dir=Path("prints"),
        ...     output_format=OutputFormat.BOTH,
        ... )
    """

    inputs: List[Path]
    output_dir: Path
    settings: PrintSettings = field(default_factory=PrintSettings)
    page: PageConfig = field(default_factory=PageConfig)
    output_format: OutputFormat = OutputFormat.PDF
    copies: int = 1
    copies_by_name: Dict[str, int] = field(default_factory=dict)
    zip_images: bool = False
    write_metadata: bool = True
    max_workers: int = 4
    run_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        object.__setattr__(self, "output_format", OutputFormat(self.output_format))
        if not self.inputs:
            raise ValueError("inputs must name at least one file or directory")
        if self.copies < 1:
            raise ValueError(f"copies must be >= 1: {self.copies}")
        for name, count in self.copies_by_name.items():
            if count < 1:
                raise ValueError(f"copies for {name!r} must be >= 1: {count}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
