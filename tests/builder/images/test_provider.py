"""
Tests for FileImageProvider.
"""

import pytest

from photoprint.builder.images import FileImageProvider, ImageDecodeError, ImageNotFoundError
from photoprint.core.models import SourceImage


@pytest.fixture
def provider():
    with FileImageProvider() as p:
        yield p


def _source(path):
    return SourceImage(id=path.name, path=path)


class TestProbe:

    def test_probe_returns_pixel_size(self, make_photo, provider):
        path = make_photo(size=(400, 300))
        assert provider.probe(_source(path)) == (400, 300)

    def test_probe_when_exif_quarter_turn_then_dimensions_swapped(self, make_photo, provider):
        """Orientation 6 means the camera was held upright: stored landscape, shown portrait."""
        path = make_photo(size=(400, 300), exif_orientation=6)
        assert provider.probe(_source(path)) == (300, 400)

    def test_probe_when_exif_upside_down_then_dimensions_kept(self, make_photo, provider):
        path = make_photo(size=(400, 300), exif_orientation=3)
        assert provider.probe(_source(path)) == (400, 300)

    def test_probe_when_missing_then_raises_not_found(self, tmp_path, provider):
        with pytest.raises(ImageNotFoundError):
            provider.probe(_source(tmp_path / "nope.jpg"))

    def test_probe_when_not_an_image_then_raises_decode_error(self, tmp_path, provider):
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"definitely not a jpeg")

        with pytest.raises(ImageDecodeError):
            provider.probe(_source(path))


class TestOpen:

    def test_open_applies_exif_orientation(self, make_photo, provider):
        path = make_photo(size=(400, 300), exif_orientation=6)

        image = provider.open(_source(path))

        assert image.size == (300, 400)
        assert image.mode == "RGB"

    def test_open_when_transparent_then_flattened_on_white(self, make_photo, provider):
        path = make_photo(name="clear.png", size=(20, 20), color=(255, 0, 0, 0), mode="RGBA")

        image = provider.open(_source(path))

        assert image.mode == "RGB"
        assert image.getpixel((10, 10)) == (255, 255, 255)

    def test_open_when_same_photo_twice_then_cached(self, make_photo, provider):
        source = _source(make_photo())
        assert provider.open(source) is provider.open(source)

    def test_open_when_not_an_image_then_raises_decode_error(self, tmp_path, provider):
        path = tmp_path / "broken.png"
        path.write_bytes(b"\x89PNG garbage")

        with pytest.raises(ImageDecodeError):
            provider.open(_source(path))
