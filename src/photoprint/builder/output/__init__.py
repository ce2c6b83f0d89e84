"""
Module: builder.output

Purpose:
    Output generation: a paginated PDF via ReportLab, or one PNG per
    photo copy.

Key Functions:
    - render_to_pdf(): Render layout to PDF
    - write_slot_images(): Export slot-sized PNGs
    - write_images_zip(): Bundle PNGs in a ZIP

Used By:
    - builder.controller: Pipeline orchestration
"""

from .image_writer import ExportReport, write_images_zip, write_slot_images
from .renderer import RenderReport, render_to_pdf

__all__ = [
    "render_to_pdf",
    "RenderReport",
    "write_slot_images",
    "write_images_zip",
    "ExportReport",
]
