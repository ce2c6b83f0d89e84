"""
Tests for builder.layout.paginator.

Covers shelf packing order, page breaks, centering, oversized slots and the
layout invariants (copy conservation, no overlap, margins respected).
"""

import itertools

import pytest

from photoprint.builder.layout import A4, PageConfig, paginate
from photoprint.core.models import PrintSettings


def _assert_layout_invariants(result, settings):
    """No overlaps on a page and every slot inside the margins (within tolerance)."""
    page = result.page
    tol = page.tolerance_cm
    margin = settings.margin_cm
    for plan in result.pages:
        for item in plan.placements:
            assert item.x >= margin - tol
            assert item.y >= margin - tol
            assert item.right <= page.width_cm - margin + tol
            assert item.bottom <= page.height_cm - margin + tol
        for a, b in itertools.combinations(plan.placements, 2):
            assert not a.rect.overlaps(b.rect, tolerance=tol), f"{a} overlaps {b}"


class TestPaginateBasic:
    """Tests for the packing walk itself."""

    def test_paginate_when_no_images_then_no_pages(self):
        result = paginate([], PrintSettings())
        assert result.page_count == 0
        assert result.total_placements == 0
        assert result.warnings == []

    def test_paginate_when_three_unknown_images_then_two_pages(self, make_image):
        """
        Three 10x15 slots on A4 with 0.3 margin and 0.2 spacing.

        Two fit side by side (0.3 + 10 + 0.2 + 10 = 20.5), the second row
        would end at 15.5 + 15 = 30.5 > 29.4 so the third starts page 2.
        """
        # Arrange
        images = [make_image(image_id=n) for n in ("a", "b", "c")]

        # Act
        result = paginate(images, PrintSettings())

        # Assert
        assert result.page_count == 2
        first, second = result.pages
        assert [p.source.id for p in first.placements] == ["a", "b"]
        assert [p.x for p in first.placements] == pytest.approx([0.4, 10.6])
        assert [p.y for p in first.placements] == pytest.approx([0.3, 0.3])
        assert [(p.width, p.height) for p in first.placements] == [(10, 15), (10, 15)]
        assert [p.source.id for p in second.placements] == ["c"]
        assert second.placements[0].x == pytest.approx(5.5)
        assert second.placements[0].y == pytest.approx(0.3)

    def test_paginate_when_copies_then_fanned_out_contiguously(self, make_image):
        images = [make_image(image_id="a", copies=3), make_image(image_id="b", copies=2)]

        result = paginate(images, PrintSettings(size_id="5x7"))

        order = [(p.source.id, p.copy_index) for _, p in result.iter_placements()]
        assert order == [("a", 0), ("a", 1), ("a", 2), ("b", 0), ("b", 1)]

    def test_paginate_when_landscape_photos_then_slots_rotated(self, make_image):
        """Auto orientation turns 10x15 into 15x10; only one fits per row."""
        images = [make_image(4000, 3000, image_id=f"p{i}") for i in range(4)]

        result = paginate(images, PrintSettings())

        assert result.page_count == 2
        for _, item in result.iter_placements():
            assert (item.width, item.height) == (15, 10)
            assert item.rotated is True
            assert item.x == pytest.approx(3.0)
        assert [p.y for p in result.pages[0].placements] == pytest.approx([0.3, 10.5])

    def test_paginate_when_portrait_policy_then_landscape_slot_turned(self, make_image):
        """A 15x10 custom slot under the portrait policy becomes 10x15."""
        settings = PrintSettings(
            size_id="custom", custom_width=15, custom_height=10, orientation="portrait",
        )

        result = paginate([make_image()], settings)

        item = result.pages[0].placements[0]
        assert (item.width, item.height) == (10, 15)
        assert item.rotated is True

    def test_paginate_when_row_fits_exactly_then_no_wrap(self, make_image):
        """Floating point drift on an exact fit is absorbed by the tolerance."""
        settings = PrintSettings(size_id="10x10", margin_cm=0.5, spacing_cm=0.1)
        page = PageConfig(width_cm=21.1, height_cm=30.0)

        result = paginate([make_image(image_id="a"), make_image(image_id="b")], settings, page)

        ys = [p.y for p in result.pages[0].placements]
        assert ys[0] == ys[1]

    def test_paginate_when_custom_page_then_page_size_used(self, make_image):
        settings = PrintSettings(margin_cm=0.1, spacing_cm=0.1)
        page = PageConfig(width_cm=10.2, height_cm=15.2)

        result = paginate([make_image(copies=3)], settings, page)

        assert result.page_count == 3
        assert result.page is page
        assert all(p.placement_count == 1 for p in result.pages)

    def test_paginate_is_deterministic(self, make_image):
        images = [make_image(300, 200, image_id="a", copies=4), make_image(200, 300, image_id="b", copies=3)]
        settings = PrintSettings(size_id="13x18")

        assert paginate(images, settings) == paginate(images, settings)


class TestPaginateOversized:
    """Tests for slots larger than the printable area."""

    def test_paginate_when_slot_too_big_then_placed_with_warning(self, make_image):
        """20x25 with a 3cm margin leaves 15cm of printable width."""
        settings = PrintSettings(size_id="20x25", margin_cm=3.0)

        result = paginate([make_image(copies=2)], settings)

        assert result.total_placements == 2
        assert result.page_count == 2
        assert len(result.warnings) == 2
        assert "exceeds the printable area" in result.warnings[0]

    def test_paginate_when_oversized_then_no_empty_pages(self, make_image):
        settings = PrintSettings(size_id="20x25", margin_cm=3.0)

        result = paginate([make_image(copies=3)], settings)

        assert all(not plan.is_empty for plan in result.pages)
        for plan in result.pages:
            assert plan.placements[0].y == pytest.approx(3.0)

    def test_paginate_when_fits_then_no_warnings(self, make_image):
        result = paginate([make_image(copies=5)], PrintSettings())
        assert result.warnings == []


class TestPaginateInvariants:
    """Properties that hold for every layout."""

    @pytest.mark.parametrize("size_id", ["3x4", "5x7", "10x10", "10x15", "13x18"])
    @pytest.mark.parametrize("spacing", [0.0, 0.2, 0.5])
    def test_paginate_conserves_copies_and_respects_bounds(self, make_image, size_id, spacing):
        # Arrange
        images = [
            make_image(4000, 3000, image_id="land", copies=3),
            make_image(3000, 4000, image_id="port", copies=4),
            make_image(image_id="unknown", copies=2),
            make_image(1000, 1000, image_id="square", copies=1),
        ]
        settings = PrintSettings(size_id=size_id, spacing_cm=spacing)

        # Act
        result = paginate(images, settings)

        # Assert
        assert result.total_placements == sum(i.copies for i in images)
        for image in images:
            copies = [p for _, p in result.iter_placements() if p.source.id == image.id]
            assert [p.copy_index for p in copies] == list(range(image.copies))
        _assert_layout_invariants(result, settings)

    @pytest.mark.parametrize("orientation", ["auto", "portrait", "landscape"])
    def test_paginate_centers_each_page(self, make_image, orientation):
        images = [make_image(400, 300, image_id="a", copies=3), make_image(image_id="b", copies=2)]
        settings = PrintSettings(size_id="5x7", orientation=orientation)

        result = paginate(images, settings)

        for plan in result.pages:
            left = min(p.x for p in plan.placements)
            right = max(p.right for p in plan.placements)
            assert left + right == pytest.approx(A4.width_cm)

    def test_paginate_pages_indexed_in_order(self, make_image):
        result = paginate([make_image(copies=9)], PrintSettings())
        assert [plan.index for plan in result.pages] == list(range(result.page_count))


class TestPaginateLowDpi:
    """The fit tolerance stays small when the page DPI is very low."""

    def test_paginate_when_low_dpi_then_two_slots_do_not_share_a_short_row(self, make_image):
        """Two 10cm slots need 20cm; a 19cm page holds one per row at any DPI."""
        # Arrange
        settings = PrintSettings(size_id="10x10", margin_cm=0, spacing_cm=0)
        page = PageConfig(width_cm=19.0, height_cm=30.0, dpi=1)
        images = [make_image(image_id=n) for n in ("a", "b", "c")]

        # Act
        result = paginate(images, settings, page)

        # Assert
        placements = [p for _, p in result.iter_placements()]
        assert len({p.y for p in placements}) == 3
        for item in placements:
            assert item.x >= -page.tolerance_cm
            assert item.right <= page.width_cm + page.tolerance_cm
        _assert_layout_invariants(result, settings)
