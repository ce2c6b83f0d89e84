"""
Module: builder.layout

Purpose:
    Page layout for photo prints.
    Converts a batch of photos into positioned page layouts.

Key Functions:
    - paginate(): Arrange photo copies onto pages
    - resolve_slot_size(): Natural slot size for the selected print size
    - orient_slot(): Per-photo slot orientation

Key Classes:
    - PageConfig: Page size and resolution
    - PlacedItem: Photo copy placed on a page
    - PagePlan: Single page layout plan
    - LayoutResult: All pages plus warnings

Used By:
    - builder.controller: Main build controller
    - builder.output: PDF and PNG writers
"""

from .config import A4, PageConfig
from .models import LayoutResult, PagePlan, PlacedItem
from .orientation import OrientedSlot, orient_slot, resolve_slot_size
from .paginator import paginate

__all__ = [
    # Config
    "A4",
    "PageConfig",
    # Models
    "PlacedItem",
    "PagePlan",
    "LayoutResult",
    "OrientedSlot",
    # Functions
    "orient_slot",
    "resolve_slot_size",
    "paginate",
]
