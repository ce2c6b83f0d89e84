"""
Tests for builder.images.geometry.

The geometry is pure, so these tests pin exact numbers for the crop and
placement math in every border/fit combination.
"""

import pytest

from photoprint.builder.images import compute_draw_geometry, should_rotate, usable_rect
from photoprint.core.models import BorderStyle, FitMode, Rect


def _approx_rect(rect):
    return pytest.approx((rect.x, rect.y, rect.width, rect.height))


class TestShouldRotate:

    def test_should_rotate_when_landscape_photo_portrait_slot_then_true(self):
        assert should_rotate((4000, 3000), (1000, 1500)) is True

    def test_should_rotate_when_same_orientation_then_false(self):
        assert should_rotate((3000, 4000), (1000, 1500)) is False

    @pytest.mark.parametrize("source", [(1000, 1000), (0, 0)])
    def test_should_rotate_when_square_or_unknown_photo_then_false(self, source):
        assert should_rotate(source, (1000, 1500)) is False

    def test_should_rotate_when_square_slot_then_false(self):
        assert should_rotate((4000, 3000), (1000, 1000)) is False

    @pytest.mark.parametrize("source,slot", [
        ((4000, 3000), (1000, 1500)),
        ((3000, 4000), (1000, 1500)),
        ((1200, 800), (500, 700)),
    ])
    def test_should_rotate_is_symmetric_under_flipping_both(self, source, slot):
        flipped = should_rotate(source[::-1], slot[::-1])
        assert should_rotate(source, slot) == flipped
        assert should_rotate(source[::-1], slot) != flipped


class TestUsableRect:

    def test_usable_rect_when_no_border_then_whole_slot(self):
        assert usable_rect((1000, 1500), BorderStyle.NONE) == Rect(0, 0, 1000, 1500)

    def test_usable_rect_when_plain_then_inset_four_percent_of_width(self):
        assert _approx_rect(usable_rect((1000, 1500), BorderStyle.PLAIN)) == (40, 40, 920, 1420)

    def test_usable_rect_when_polaroid_then_caption_strip_removed(self):
        """Extra 12% of the slot height (180) comes off the bottom."""
        assert _approx_rect(usable_rect((1000, 1500), BorderStyle.POLAROID)) == (40, 40, 920, 1240)

    def test_usable_rect_when_slot_too_small_then_clamped_to_zero(self):
        assert usable_rect((100, 1), BorderStyle.POLAROID).height == 0


class TestCoverGeometry:

    def test_cover_when_landscape_photo_in_portrait_slot_then_rotated_and_cropped(self):
        """
        4000x3000 into 10x15: the drawing frame is 15x10 (aspect 1.5).

        The photo is taller than that, so the crop keeps the full width,
        crop height 4000 / 1.5 and takes 35% of the excess from the top.
        """
        geometry = compute_draw_geometry((4000, 3000), (10, 15))

        crop_h = 4000 / 1.5
        assert geometry.rotate_source is True
        assert geometry.dest_rect == Rect(0, 0, 10, 15)
        assert _approx_rect(geometry.crop_rect) == (0, (3000 - crop_h) * 0.35, 4000, crop_h)
        assert geometry.crop_rect.y == pytest.approx(116.667, abs=0.001)

    def test_cover_when_photo_wider_then_centered_horizontal_crop(self):
        geometry = compute_draw_geometry((3000, 1000), (1500, 1000))

        assert geometry.rotate_source is False
        assert _approx_rect(geometry.crop_rect) == (750, 0, 1500, 1000)

    def test_cover_when_photo_taller_then_top_biased_crop(self):
        geometry = compute_draw_geometry((1000, 3000), (1000, 1000))

        assert _approx_rect(geometry.crop_rect) == (0, 2000 * 0.35, 1000, 1000)

    @pytest.mark.parametrize("border", list(BorderStyle))
    @pytest.mark.parametrize("source,slot", [
        ((4000, 3000), (1000, 1500)),
        ((3000, 4000), (1000, 1500)),
        ((6000, 1000), (1500, 1000)),
        ((1000, 6000), (1000, 1000)),
        ((2000, 2000), (1500, 1000)),
    ])
    def test_cover_crop_matches_frame_aspect_and_stays_in_bounds(self, source, slot, border):
        # Act
        geometry = compute_draw_geometry(source, slot, border, FitMode.COVER)

        # Assert
        crop = geometry.crop_rect
        dest = geometry.dest_rect
        frame_aspect = dest.height / dest.width if geometry.rotate_source else dest.aspect_ratio
        assert crop.aspect_ratio == pytest.approx(frame_aspect)
        assert crop.x >= -1e-9 and crop.y >= -1e-9
        assert crop.right <= source[0] + 1e-6
        assert crop.bottom <= source[1] + 1e-6
        assert dest == usable_rect(slot, border)


class TestContainGeometry:

    def test_contain_when_wide_photo_in_square_slot_then_letterboxed(self):
        geometry = compute_draw_geometry((2000, 1000), (1000, 1000), fit_mode=FitMode.CONTAIN)

        assert geometry.crop_rect is None
        assert geometry.rotate_source is False
        assert _approx_rect(geometry.dest_rect) == (0, 250, 1000, 500)

    def test_contain_when_rotated_then_dimensions_swapped_into_slot_axes(self):
        geometry = compute_draw_geometry((4000, 3000), (1000, 1500), fit_mode=FitMode.CONTAIN)

        assert geometry.rotate_source is True
        assert _approx_rect(geometry.dest_rect) == (0, 250 / 3, 1000, 4000 / 3)

    @pytest.mark.parametrize("border", list(BorderStyle))
    @pytest.mark.parametrize("source,slot", [
        ((4000, 3000), (1000, 1500)),
        ((3000, 4000), (1000, 1500)),
        ((6000, 1000), (1500, 1000)),
        ((1000, 1000), (1500, 1000)),
    ])
    def test_contain_keeps_aspect_and_stays_centered(self, source, slot, border):
        geometry = compute_draw_geometry(source, slot, border, FitMode.CONTAIN)

        dest = geometry.dest_rect
        usable = usable_rect(slot, border)
        source_aspect = source[0] / source[1]
        expected = 1 / source_aspect if geometry.rotate_source else source_aspect
        assert dest.aspect_ratio == pytest.approx(expected)
        assert dest.x - usable.x == pytest.approx(usable.right - dest.right)
        assert dest.y - usable.y == pytest.approx(usable.bottom - dest.bottom)
        assert dest.width <= usable.width + 1e-9
        assert dest.height <= usable.height + 1e-9


class TestDegenerateGeometry:

    @pytest.mark.parametrize("fit", list(FitMode))
    def test_unknown_source_when_drawn_then_fills_usable_area(self, fit):
        geometry = compute_draw_geometry((0, 0), (1000, 1500), BorderStyle.PLAIN, fit)

        assert geometry.rotate_source is False
        assert geometry.crop_rect is None
        assert geometry.dest_rect == usable_rect((1000, 1500), BorderStyle.PLAIN)

    def test_empty_slot_when_drawn_then_no_crop(self):
        geometry = compute_draw_geometry((4000, 3000), (0, 0))

        assert geometry.crop_rect is None
        assert geometry.dest_rect.is_empty

    def test_geometry_is_deterministic(self):
        args = ((4000, 3000), (1000, 1500), BorderStyle.POLAROID, FitMode.COVER)
        assert compute_draw_geometry(*args) == compute_draw_geometry(*args)
