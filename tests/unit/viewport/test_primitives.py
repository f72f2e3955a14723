"""Unit tests for viewport geometry primitives.

Tests Viewport and CropArea Pydantic models including:
- Construction and validation
- Computed edges (right, bottom)
- Tuple conversion (to/from)
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from screenshooter.viewport import CropArea, Viewport


class TestViewport:
    """Tests for the Viewport model."""

    def test_viewport_creation_valid(self) -> None:
        """Test creating a valid Viewport."""
        viewport = Viewport(width=1280, height=720)
        assert viewport.width == 1280
        assert viewport.height == 720

    def test_viewport_accepts_fractional_size(self) -> None:
        """Test Viewport keeps fractional sizes from high-DPI measurements."""
        viewport = Viewport(width=1280.5, height=720.25)
        assert viewport.to_tuple() == (1280.5, 720.25)

    def test_viewport_keeps_integers(self) -> None:
        """Test integral sizes are not coerced to float."""
        viewport = Viewport(width=1000, height=800)
        assert isinstance(viewport.width, int)

    @pytest.mark.parametrize(("width", "height"), [(0, 100), (100, 0), (-1, 100)])
    def test_viewport_rejects_non_positive(self, width: int, height: int) -> None:
        """Test Viewport rejects zero or negative dimensions."""
        with pytest.raises(ValidationError, match="greater than 0"):
            Viewport(width=width, height=height)

    def test_viewport_from_tuple(self) -> None:
        """Test Viewport from tuple construction."""
        assert Viewport.from_tuple((1000, 800)) == Viewport(width=1000, height=800)

    def test_viewport_from_mapping(self) -> None:
        """Test Viewport built from a measured mapping."""
        viewport = Viewport.model_validate({"width": 1000, "height": 800})
        assert viewport.to_tuple() == (1000, 800)

    def test_viewport_is_frozen(self) -> None:
        """Test Viewport is immutable (frozen)."""
        viewport = Viewport(width=1000, height=800)
        with pytest.raises(ValidationError):
            viewport.width = 10  # type: ignore[misc]


class TestCropArea:
    """Tests for the CropArea model."""

    def test_crop_area_creation_valid(self) -> None:
        """Test creating a valid CropArea."""
        crop_area = CropArea(left=10, top=20, width=300, height=400)
        assert crop_area.to_tuple() == (10, 20, 300, 400)

    def test_crop_area_allows_negative_offsets(self) -> None:
        """Test CropArea keeps negative left and top for the validator."""
        crop_area = CropArea(left=-10, top=-5, width=100, height=100)
        assert crop_area.left == -10
        assert crop_area.top == -5

    def test_crop_area_allows_empty_size(self) -> None:
        """Test CropArea allows zero width and height."""
        crop_area = CropArea(left=0, top=0, width=0, height=0)
        assert crop_area.right == 0
        assert crop_area.bottom == 0

    @pytest.mark.parametrize(("width", "height"), [(-1, 10), (10, -1)])
    def test_crop_area_rejects_negative_size(self, width: int, height: int) -> None:
        """Test CropArea rejects negative dimensions."""
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            CropArea(left=0, top=0, width=width, height=height)

    def test_crop_area_edges(self) -> None:
        """Test right and bottom edges."""
        crop_area = CropArea(left=400, top=50, width=200, height=100)
        assert crop_area.right == 600
        assert crop_area.bottom == 150

    def test_crop_area_from_tuple(self) -> None:
        """Test CropArea from tuple construction."""
        crop_area = CropArea.from_tuple((1, 2, 3, 4))
        assert crop_area == CropArea(left=1, top=2, width=3, height=4)

    def test_crop_area_hashable(self) -> None:
        """Test CropArea can be used in sets."""
        areas = {
            CropArea(left=0, top=0, width=1, height=1),
            CropArea(left=0, top=0, width=1, height=1),
        }
        assert len(areas) == 1
