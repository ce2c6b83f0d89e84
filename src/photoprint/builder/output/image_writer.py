"""
Module: builder.output.image_writer

Purpose:
    Export every photo copy as its own slot-sized PNG, rasterized at the
    page DPI, instead of laying them out on pages. Orientation follows the
    same rules as the layout engine.

Key Functions:
    - write_slot_images(): One PNG per copy
    - write_images_zip(): Bundle exported PNGs in a ZIP archive

Dependencies:
    - PIL/Pillow
    - zipfile (std)

Used By:
    - builder.controller: Build pipeline (PNG output)
"""

from __future__ import annotations

import logging
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Set

from photoprint.builder.images import (
    FileImageProvider,
    ImageDecodeError,
    ImageNotFoundError,
    ImageProvider,
    compose_slot,
    slot_pixel_size,
)
from photoprint.builder.layout import A4, PageConfig, orient_slot, resolve_slot_size
from photoprint.core.models import PrintSettings, SourceImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportReport:
    """
    Outcome of a PNG export.

    Attributes:
        paths: Written files in export order
        warnings: One message per skipped photo or file
    """

    paths: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def written(self) -> int:
        return len(self.paths)


def write_slot_images(
    images: Sequence[SourceImage],
    settings: PrintSettings,
    output_dir: Path,
    provider: Optional[ImageProvider] = None,
    *,
    page: PageConfig = A4,
) -> ExportReport:
    """
    Write one PNG per copy of every photo.

    Files are named ``photo-<name>-<copy>.png`` and carry DPI metadata so
    they print at the slot's physical size. A photo that cannot be read
    is skipped with a warning; the others are still written.

    Args:
        images: Photos with copy counts
        settings: Size, orientation, border and fit
        output_dir: Directory for the PNG files
        provider: Photo access (filesystem by default)
        page: Supplies the DPI

    Returns:
        ExportReport listing written files and warnings
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    owns_provider = provider is None
    if owns_provider:
        provider = FileImageProvider()
    natural = resolve_slot_size(settings)

    paths: List[Path] = []
    warnings: List[str] = []
    used_names: Set[str] = set()

    try:
        for image in images:
            if image.error:
                message = f"Skipped {image.path.name}: {image.error}"
                logger.warning(message)
                warnings.append(message)
                continue

            try:
                photo = provider.open(image)
            except (ImageNotFoundError, ImageDecodeError) as e:
                message = f"Skipped {image.path.name}: {e}"
                logger.warning(message)
                warnings.append(message)
                continue

            width, height, _ = orient_slot(natural, image, settings.orientation)
            slot = compose_slot(photo, slot_pixel_size(width, height, page.dpi), settings)
            stem = _unique_stem(_sanitize_filename(image.display_name), used_names)

            for copy_index in range(image.copies):
                path = output_dir / f"photo-{stem}-{copy_index + 1}.png"
                try:
                    slot.save(path, format="PNG", dpi=(page.dpi, page.dpi))
                except OSError as e:
                    message = f"Failed to write {path.name}: {e}"
                    logger.warning(message)
                    warnings.append(message)
                    continue
                paths.append(path)
    finally:
        if owns_provider:
            provider.close()

    logger.info(f"Wrote {len(paths)} slot images to {output_dir}")
    return ExportReport(paths=paths, warnings=warnings)


def write_images_zip(paths: Sequence[Path], output_path: Path) -> Path:
    """
    Bundle exported images into a ZIP archive (flat, by file name).

    Returns:
        Path to created ZIP file
    """
    if output_path.suffix != ".zip":
        output_path = output_path.with_suffix(".zip")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
        for path in paths:
            zf.write(path, arcname=path.name)

    logger.info(f"Bundled {len(paths)} images into {output_path}")
    return output_path


def _sanitize_filename(name: str) -> str:
    """
    Make a file stem filesystem-safe.

    Converts:
        "IMG_0042"        -> "IMG_0042"
        "beach day (2)"   -> "beach-day-2"
    """
    cleaned = re.sub(r"[^A-Za-z0-9_\-]+", "-", name).strip("-")
    return cleaned or "photo"


def _unique_stem(stem: str, used: Set[str]) -> str:
    candidate = stem
    counter = 2
    while candidate in used:
        candidate = f"{stem}_{counter}"
        counter += 1
    used.add(candidate)
    return candidate
