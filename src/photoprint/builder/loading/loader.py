"""
Module: builder.loading.loader

Purpose:
    Turn the paths a user hands in into SourceImages ready for layout:
    expand directories, assign copy counts, and probe pixel dimensions.

Key Functions:
    - discover_images(): Expand files/directories into photo paths
    - create_source_images(): SourceImages with unknown dimensions
    - probe_dimensions(): Fill in dimensions (thread pool)
    - load_source_images(): All of the above

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - concurrent.futures: Parallel header reads
    - builder.images.provider: Dimension probing

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from photoprint.core.models import SourceImage

from ..images.provider import (
    FileImageProvider,
    ImageDecodeError,
    ImageNotFoundError,
    ImageProvider,
)

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".gif", ".tif", ".tiff"}


class LoaderError(Exception):
    """Error collecting input photos."""
    pass


def discover_images(paths: Iterable[Path]) -> List[Path]:
    """
    Expand input paths into photo files.

    Files are kept in the order given (whatever their extension, so an
    explicit bad file surfaces as a per-photo error later). Directories
    contribute their photo files, sorted by name, non-recursively.

    Raises:
        LoaderError: If an input path does not exist
    """
    found: List[Path] = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            entries = sorted(
                p for p in path.iterdir()
                if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
            )
            logger.debug(f"Found {len(entries)} photos in {path}")
            found.extend(entries)
        elif path.is_file():
            found.append(path)
        else:
            raise LoaderError(f"Input path does not exist: {path}")
    return found


def create_source_images(
    paths: Sequence[Path],
    *,
    copies: int = 1,
    copies_by_name: Optional[Dict[str, int]] = None,
) -> List[SourceImage]:
    """
    Create SourceImages with dimensions still unknown.

    Args:
        paths: Photo files in print order
        copies: Default copy count
        copies_by_name: Copy counts keyed by file name or stem

    Returns:
        One SourceImage per path, ids unique within the batch
    """
    copies_by_name = copies_by_name or {}
    seen: Dict[str, int] = {}
    images = []
    for path in paths:
        count = copies_by_name.get(path.name, copies_by_name.get(path.stem, copies))
        images.append(SourceImage(id=_unique_id(path, seen), path=path, copies=count))
    return images


def probe_dimensions(
    images: Sequence[SourceImage],
    provider: Optional[ImageProvider] = None,
    *,
    max_workers: int = 4,
) -> List[SourceImage]:
    """
    Fill in pixel dimensions, keeping input order.

    Header reads run on a thread pool. A photo that cannot be read keeps
    (0, 0) dimensions and gets its error set instead of failing the batch.
    """
    provider = provider or FileImageProvider()

    def _probe(image: SourceImage) -> SourceImage:
        try:
            width, height = provider.probe(image)
        except (ImageNotFoundError, ImageDecodeError) as e:
            logger.warning(f"Skipping dimensions for {image.path.name}: {e}")
            return image.with_error(str(e))
        return image.with_dimensions(width, height)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        probed = list(executor.map(_probe, images))

    failed = sum(1 for image in probed if image.error)
    logger.info(f"Probed {len(probed)} photos ({failed} unreadable)")
    return probed


def load_source_images(
    paths: Iterable[Path],
    *,
    copies: int = 1,
    copies_by_name: Optional[Dict[str, int]] = None,
    provider: Optional[ImageProvider] = None,
    max_workers: int = 4,
) -> List[SourceImage]:
    """
    Discover, create and probe photos in one step.

    Raises:
        LoaderError: If an input path does not exist

    Example:
        >>> images = load_source_images([Path("holiday")], copies=2)
        >>> images[0].dimensions_known
        True
    """
    files = discover_images(paths)
    images = create_source_images(files, copies=copies, copies_by_name=copies_by_name)
    return probe_dimensions(images, provider, max_workers=max_workers)


def _unique_id(path: Path, seen: Dict[str, int]) -> str:
    """File name, suffixed with a counter when the same name appears twice."""
    base = path.name
    count = seen.get(base, 0)
    seen[base] = count + 1
    return base if count == 0 else f"{base}#{count + 1}"
