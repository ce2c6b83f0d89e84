"""
Module: builder

Purpose:
    Print building pipeline: lay photo copies out on pages and export
    them as a PDF document or as standalone slot images.

Key Functions:
    - paginate(): Shelf-pack photo copies onto pages
    - compute_draw_geometry(): Crop/fit/rotate geometry for one slot
    - build_prints(): Main entry point for a print run

Key Classes:
    - BuildConfig: Configuration for a print run
    - PageConfig: Page size and resolution

Dependencies:
    - PIL: Image manipulation
    - reportlab: PDF generation

Used By:
    - photoprint.cli: Command line interface
"""

from .config import BuildConfig, OutputFormat
from .controller import BuildError, BuildResult, build_prints
from .images import compute_draw_geometry
from .layout import PageConfig, paginate

__all__ = [
    # Config
    "BuildConfig",
    "OutputFormat",
    "PageConfig",
    # Core
    "paginate",
    "compute_draw_geometry",
    # Controller
    "build_prints",
    "BuildResult",
    "BuildError",
]
