"""
Module: builder.controller

Purpose:
    Orchestrate the complete print pipeline.
    Load → Probe → Paginate → Render PDF / Export PNGs → Metadata

Key Functions:
    - build_prints(): Main entry point for a print run

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.loading: Photo discovery and probing
    - builder.layout: Pagination
    - builder.output: PDF rendering and PNG export

Used By:
    - cli: Command line interface
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from photoprint import __version__

from .config import BuildConfig
from .images import FileImageProvider, ImageProvider
from .layout import LayoutResult, paginate
from .loading import LoaderError, load_source_images
from .output import render_to_pdf, write_images_zip, write_slot_images

logger = logging.getLogger(__name__)

METADATA_FILENAME = "build_metadata.json"


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_dir: Run folder everything was written to
        pdf_path: Generated PDF (if requested)
        image_paths: Generated PNG files (if requested)
        zip_path: ZIP bundle of the PNG files (if requested)
        layout: Layout the PDF was rendered from
        photo_count: Photos in the batch
        copy_count: Copies placed
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_prints(config)
        >>> print(f"{result.copy_count} prints on {result.page_count} pages")
    """

    output_dir: Path
    pdf_path: Optional[Path]
    image_paths: tuple[Path, ...]
    zip_path: Optional[Path]
    layout: LayoutResult
    photo_count: int
    copy_count: int
    metadata: dict
    warnings: tuple[str, ...]

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def build_prints(
    config: BuildConfig,
    provider: Optional[ImageProvider] = None,
) -> BuildResult:
    """
    Build a print run from start to finish.

    Pipeline:
    1. Discover photos and probe their dimensions
    2. Paginate copies onto pages
    3. Render the PDF and/or export slot PNGs
    4. Write build metadata

    Args:
        config: Build configuration
        provider: Photo access (filesystem by default)

    Returns:
        BuildResult with paths and metadata

    Raises:
        BuildError: If inputs are missing or output cannot be written

    Example:
        >>> config = BuildConfig(inputs=[Path("holiday")], output_dir=Path("prints"))
        >>> result = build_prints(config)
        >>> result.pdf_path.name
        'print-20260116-103045.pdf'
    """
    if provider is None:
        with FileImageProvider() as owned:
            return build_prints(config, owned)

    warnings: List[str] = []
    start_time = time.perf_counter()
    settings = config.settings

    logger.info(
        f"Starting print build: size {settings.photo_size.name}, "
        f"orientation {settings.orientation.value}, fit {settings.fit_mode.value}"
    )

    # 1. Load photos
    try:
        images = load_source_images(
            config.inputs,
            copies=config.copies,
            copies_by_name=config.copies_by_name,
            provider=provider,
            max_workers=config.max_workers,
        )
    except LoaderError as e:
        raise BuildError(f"Failed to load photos: {e}") from e

    if not images:
        raise BuildError("No photos found in the given inputs")

    for image in images:
        if image.error:
            warnings.append(f"Unreadable photo {image.path.name}: {image.error}")

    logger.info(f"Loaded {len(images)} photos")

    # 2. Paginate
    layout = paginate(images, settings, config.page)
    warnings.extend(layout.warnings)
    logger.info(f"Paginated {layout.total_placements} copies onto {layout.page_count} pages")

    # 3. Output
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    output_dir = _generate_run_folder(Path(config.output_dir), config, timestamp)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")

    pdf_path = None
    image_paths: tuple[Path, ...] = ()
    zip_path = None

    try:
        if config.output_format.wants_pdf:
            pdf_path = output_dir / f"print-{timestamp}.pdf"
            report = render_to_pdf(layout, settings, pdf_path, provider)
            warnings.extend(report.warnings)

        if config.output_format.wants_png:
            export = write_slot_images(images, settings, output_dir / "images", provider, page=config.page)
            warnings.extend(export.warnings)
            image_paths = tuple(export.paths)
            if config.zip_images:
                zip_path = write_images_zip(image_paths, output_dir / "images.zip")
    except OSError as e:
        raise BuildError(f"Failed to write output: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Print build completed in {elapsed:.2f}s")

    # 4. Metadata
    metadata = _build_metadata(config, layout, len(images), pdf_path, image_paths, warnings)
    if config.write_metadata:
        _write_metadata(output_dir, metadata)

    return BuildResult(
        output_dir=output_dir,
        pdf_path=pdf_path,
        image_paths=image_paths,
        zip_path=zip_path,
        layout=layout,
        photo_count=len(images),
        copy_count=layout.total_placements,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _generate_run_folder(base_dir: Path, config: BuildConfig, timestamp: str) -> Path:
    """
    Create a unique run folder path inside the output directory.

    Returns:
        Path like base/20260116-103045__10x15__cover (suffixed on collision)
    """
    if config.run_name:
        folder_name = config.run_name
    else:
        settings = config.settings
        size_segment = settings.size_id
        folder_name = f"{timestamp}__{size_segment}__{settings.fit_mode.value}"
    folder_name = re.sub(r"[^A-Za-z0-9_\-+.]", "-", folder_name).strip("-") or "run"

    candidate = base_dir / folder_name
    suffix = 1
    while candidate.exists():
        candidate = base_dir / f"{folder_name} ({suffix})"
        suffix += 1
    return candidate


def _build_metadata(
    config: BuildConfig,
    layout: LayoutResult,
    photo_count: int,
    pdf_path: Optional[Path],
    image_paths: tuple[Path, ...],
    warnings: List[str],
) -> dict:
    """Build metadata dictionary describing the run."""
    return {
        "generator": f"photoprint {__version__}",
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "settings": config.settings.to_dict(),
        "page": config.page.to_dict(),
        "output_format": config.output_format.value,
        "photo_count": photo_count,
        "copy_count": layout.total_placements,
        "page_count": layout.page_count,
        "pages": [
            [placement.to_dict() for placement in plan.placements]
            for plan in layout.pages
        ],
        "pdf": pdf_path.name if pdf_path else None,
        "images": [path.name for path in image_paths],
        "warnings": list(warnings),
    }


def _write_metadata(output_dir: Path, metadata: dict) -> None:
    path = output_dir / METADATA_FILENAME
    path.write_text(json.dumps(metadata, indent=2), encoding="utf-8")
    logger.info(f"Wrote build metadata to {path}")
