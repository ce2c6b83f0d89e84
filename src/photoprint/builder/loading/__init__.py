"""
Module: builder.loading

Purpose:
    Collect input photos and probe their dimensions.

Key Functions:
    - load_source_images(): Discover, create and probe photos
    - discover_images(): Expand files/directories

Used By:
    - builder.controller: Main build controller
"""

from .loader import (
    IMAGE_EXTENSIONS,
    LoaderError,
    create_source_images,
    discover_images,
    load_source_images,
    probe_dimensions,
)

__all__ = [
    "IMAGE_EXTENSIONS",
    "LoaderError",
    "create_source_images",
    "discover_images",
    "load_source_images",
    "probe_dimensions",
]
