"""
Module: builder.output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page; each PlacedItem is filled white
    and then drawn as a slot bitmap rasterized at the page DPI.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - PIL: Slot bitmaps
    - builder.layout.models: LayoutResult, PlacedItem

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from photoprint.builder.images import (
    FileImageProvider,
    ImageDecodeError,
    ImageNotFoundError,
    ImageProvider,
    compose_slot,
    slot_pixel_size,
)
from photoprint.builder.layout.models import LayoutResult, PlacedItem
from photoprint.common.units import cm_to_pt
from photoprint.core.models import PrintSettings

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 95


@dataclass(frozen=True)
class RenderReport:
    """
    Outcome of a PDF render.

    Attributes:
        output_path: Written PDF
        page_count: Pages in the PDF
        drawn: Slots drawn with their photo
        warnings: One message per skipped slot
    """

    output_path: Path
    page_count: int
    drawn: int
    warnings: List[str] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.warnings)


def render_to_pdf(
    layout: LayoutResult,
    settings: PrintSettings,
    output_path: Path,
    provider: Optional[ImageProvider] = None,
    *,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> RenderReport:
    """
    Render layout result to PDF file.

    A slot whose photo cannot be read stays a white rectangle; the
    failure is logged and reported, and the rest of the batch continues.

    Args:
        layout: Layout result from paginator
        settings: Border style and fit mode for the slots
        output_path: Path to write PDF
        provider: Photo access (filesystem by default)
        jpeg_quality: Quality of the embedded slot bitmaps

    Returns:
        RenderReport for the written file

    Raises:
        OSError: If the PDF cannot be written

    Example:
        >>> report = render_to_pdf(layout, settings, Path("out/print.pdf"))
        >>> report.page_count
        2
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    # Only close a provider created here; a caller's provider stays open
    owns_provider = provider is None
    if owns_provider:
        provider = FileImageProvider()

    page = layout.page
    page_width_pt = cm_to_pt(page.width_cm)
    page_height_pt = cm_to_pt(page.height_cm)

    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    c.setTitle(output_path.stem)

    drawn = 0
    warnings: List[str] = []
    try:
        for plan in layout.pages:
            for placement in plan.placements:
                problem = _draw_slot(c, placement, settings, provider, page.dpi, page_height_pt, jpeg_quality)
                if problem is None:
                    drawn += 1
                else:
                    warnings.append(problem)
            c.showPage()

        c.save()
    finally:
        if owns_provider:
            provider.close()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")
    return RenderReport(
        output_path=output_path,
        page_count=layout.page_count,
        drawn=drawn,
        warnings=warnings,
    )


def _draw_slot(
    c: canvas.Canvas,
    placement: PlacedItem,
    settings: PrintSettings,
    provider: ImageProvider,
    dpi: int,
    page_height_pt: float,
    jpeg_quality: int,
) -> Optional[str]:
    """
    Draw one placement. Returns a warning message when it was skipped.
    """
    x_pt = cm_to_pt(placement.x)
    width_pt = cm_to_pt(placement.width)
    height_pt = cm_to_pt(placement.height)
    # Top-down centimeters to bottom-up points
    y_pt = page_height_pt - cm_to_pt(placement.y) - height_pt

    c.saveState()
    c.setFillColorRGB(1, 1, 1)
    c.rect(x_pt, y_pt, width_pt, height_pt, stroke=0, fill=1)
    c.restoreState()

    source = placement.source
    if source.error:
        message = f"Skipped {source.path.name} (copy {placement.copy_index + 1}): {source.error}"
        logger.warning(message)
        return message

    try:
        photo = provider.open(source)
    except (ImageNotFoundError, ImageDecodeError) as e:
        message = f"Skipped {source.path.name} (copy {placement.copy_index + 1}): {e}"
        logger.warning(message)
        return message

    slot = compose_slot(photo, slot_pixel_size(placement.width, placement.height, dpi), settings)
    c.drawImage(
        _pil_to_reader(slot, jpeg_quality),
        x_pt,
        y_pt,
        width=width_pt,
        height=height_pt,
    )
    logger.debug(f"Drew {source.path.name} at ({placement.x:.2f}, {placement.y:.2f})cm")
    return None


def _pil_to_reader(img: Image.Image, quality: int) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    JPEG data is embedded by ReportLab as-is.
    """
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=quality)
    buf.seek(0)
    return ImageReader(buf)
