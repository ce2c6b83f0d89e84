import pytest
import sys
from pathlib import Path
from PIL import ExifTags, Image

# Add src to sys.path so we can import photoprint
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from photoprint.core.models import SourceImage


# Common test fixtures
@pytest.fixture
def make_photo(tmp_path: Path):
    """Factory writing a solid-color photo file and returning its path."""
    def _create(
        name: str = "photo.jpg",
        size: tuple[int, int] = (400, 300),
        color: str = "red",
        exif_orientation: int | None = None,
        mode: str = "RGB",
    ) -> Path:
        img = Image.new(mode, size, color)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        kwargs = {}
        if exif_orientation is not None:
            exif = Image.Exif()
            exif[ExifTags.Base.Orientation] = exif_orientation
            kwargs["exif"] = exif
        img.save(path, **kwargs)
        return path
    return _create


@pytest.fixture
def make_image():
    """Factory for SourceImage values without files behind them."""
    def _create(
        width: int = 0,
        height: int = 0,
        copies: int = 1,
        image_id: str = "img",
    ) -> SourceImage:
        return SourceImage(
            id=image_id,
            path=Path(f"/photos/{image_id}.jpg"),
            copies=copies,
            width=width,
            height=height,
        )
    return _create
