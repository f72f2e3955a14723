"""Geometry primitives for viewport captures.

This module provides immutable Pydantic models describing the captured
browser viewport and the region to crop out of it. Both share one
coordinate space where (0, 0) is the top-left corner of the viewport.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field

Number = int | float


class Viewport(BaseModel, frozen=True):
    """The visible browser drawing surface that gets captured.

    Attributes:
        width: Horizontal extent in pixels (> 0).
        height: Vertical extent in pixels (> 0).
    """

    width: Number = Field(..., gt=0, description="Width in pixels")
    height: Number = Field(..., gt=0, description="Height in pixels")

    def to_tuple(self) -> tuple[Number, Number]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[Number, Number]) -> Self:
        """Create Viewport from (width, height) tuple."""
        return cls(width=size[0], height=size[1])


class CropArea(BaseModel, frozen=True):
    """A rectangle to extract from the captured viewport image.

    ``left`` and ``top`` are not constrained: element measurements taken
    in the browser can legitimately come back negative when an element is
    scrolled or positioned out of view. Whether such an area can be
    captured is decided by the coordinate validator, not by the model.

    The area spans:
    - Top-left: (left, top)
    - Bottom-right: (left + width, top + height) [exclusive]

    Attributes:
        left: Left edge X coordinate.
        top: Top edge Y coordinate.
        width: Horizontal extent in pixels (>= 0).
        height: Vertical extent in pixels (>= 0).
    """

    left: Number = Field(..., description="Left edge X coordinate")
    top: Number = Field(..., description="Top edge Y coordinate")
    width: Number = Field(..., ge=0, description="Width in pixels")
    height: Number = Field(..., ge=0, description="Height in pixels")

    @property
    def right(self) -> Number:
        """Return the X coordinate of the right edge (exclusive)."""
        return self.left + self.width

    @property
    def bottom(self) -> Number:
        """Return the Y coordinate of the bottom edge (exclusive)."""
        return self.top + self.height

    def to_tuple(self) -> tuple[Number, Number, Number, Number]:
        """Convert to (left, top, width, height) tuple."""
        return (self.left, self.top, self.width, self.height)

    @classmethod
    def from_tuple(cls, bbox: tuple[Number, Number, Number, Number]) -> Self:
        """Create CropArea from (left, top, width, height) tuple."""
        return cls(left=bbox[0], top=bbox[1], width=bbox[2], height=bbox[3])
