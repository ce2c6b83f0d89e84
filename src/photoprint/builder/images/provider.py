"""
Module: builder.images.provider

Purpose:
    Abstract interface for reading photo files: cheap dimension probes
    for layout, full decodes for rasterization.

Key Classes:
    - ImageProvider: Abstract base class for image access
    - FileImageProvider: Reads photos from the local filesystem
    - ImageNotFoundError: Photo file is missing
    - ImageDecodeError: Photo file cannot be decoded

Dependencies:
    - PIL: Image decoding, EXIF orientation

Used By:
    - builder.loading.loader: Dimension probing
    - builder.output: Slot rasterization
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Tuple

from PIL import ExifTags, Image, ImageOps, UnidentifiedImageError

from photoprint.core.models import SourceImage

# EXIF orientations that turn the stored image a quarter turn
_QUARTER_TURN_ORIENTATIONS = {5, 6, 7, 8}

BACKGROUND_COLOR = "white"


class ImageNotFoundError(Exception):
    """Photo file not found."""
    pass


class ImageDecodeError(Exception):
    """Photo file exists but is not a readable image."""
    pass


class ImageProvider(ABC):
    """
    Abstract interface for accessing photo pixels.

    Implementations handle where the photos actually live.
    """

    @abstractmethod
    def probe(self, image: SourceImage) -> Tuple[int, int]:
        """
        Get the displayed (width, height) of a photo without decoding it.

        Raises:
            ImageNotFoundError: If the photo is missing
            ImageDecodeError: If the photo is not a readable image
        """

    @abstractmethod
    def open(self, image: SourceImage) -> Image.Image:
        """
        Decode a photo as an upright RGB image.

        Raises:
            ImageNotFoundError: If the photo is missing
            ImageDecodeError: If the photo is not a readable image
        """

    def close(self) -> None:
        """Release any cached resources."""

    def __enter__(self) -> "ImageProvider":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class FileImageProvider(ImageProvider):
    """
    Provider reading photos from disk.

    EXIF orientation is applied, so a phone photo shot upright reports and
    decodes as portrait. The most recently decoded photo is kept, since
    consecutive placements are usually copies of the same photo.

    Example:
        >>> with FileImageProvider() as provider:
        ...     pixels = provider.open(image)
    """

    def __init__(self) -> None:
        self._cached_key: Optional[Path] = None
        self._cached: Optional[Image.Image] = None

    def probe(self, image: SourceImage) -> Tuple[int, int]:
        path = self._existing_path(image)
        try:
            with Image.open(path) as raw:
                width, height = raw.size
                orientation = raw.getexif().get(ExifTags.Base.Orientation)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageDecodeError(f"Cannot read {path}: {e}") from e

        if orientation in _QUARTER_TURN_ORIENTATIONS:
            width, height = height, width
        return width, height

    def open(self, image: SourceImage) -> Image.Image:
        path = self._existing_path(image)
        if self._cached is not None and self._cached_key == path:
            return self._cached

        try:
            with Image.open(path) as raw:
                upright = ImageOps.exif_transpose(raw)
                decoded = _flatten(upright)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageDecodeError(f"Cannot decode {path}: {e}") from e

        self.close()
        self._cached_key = path
        self._cached = decoded
        return decoded

    def close(self) -> None:
        if self._cached is not None:
            self._cached.close()
        self._cached = None
        self._cached_key = None

    @staticmethod
    def _existing_path(image: SourceImage) -> Path:
        path = Path(image.path)
        if not path.is_file():
            raise ImageNotFoundError(f"Photo not found: {path}")
        return path


def _flatten(image: Image.Image) -> Image.Image:
    """Convert to RGB, compositing any transparency onto white."""
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, BACKGROUND_COLOR)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    return image.convert("RGB")
