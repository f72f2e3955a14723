"""Custom exceptions for viewport capture validation.

Each error carries a ready-to-show, multi-line message telling the test
author how to fix the test or its configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from screenshooter.viewport.primitives import CropArea, Viewport


class ViewportError(Exception):
    """Base exception for crop areas that cannot be captured."""

    def __init__(self, message: str) -> None:
        """Initialize viewport error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class OffsetViewportError(ViewportError):
    """Raised when a crop area lies outside the viewport left, top or right bounds."""

    def __init__(self) -> None:
        super().__init__(
            "Can not capture the specified region of the viewport.\n"
            "Position of the region is outside of the viewport left, top or right bounds.\n"
            "Check that elements:\n"
            " - does not overflows the document\n"
            " - does not overflows browser viewport\n"
            "Alternatively, you can increase browser window size using\n"
            '"setWindowSize" or "windowSize" option in the config file.'
        )


class HeightViewportError(ViewportError):
    """Raised when a crop area is taller than the viewport.

    The offending geometry is embedded in the message and kept on the
    instance so the failure can be diagnosed without digging through logs.

    Attributes:
        viewport: The viewport the crop area was validated against.
        crop_area: The crop area that does not fit.
    """

    def __init__(self, viewport: Viewport, crop_area: CropArea) -> None:
        self.viewport = viewport
        self.crop_area = crop_area
        super().__init__(
            "Can not capture the specified region of the viewport.\n"
            "The region bottom bound is outside of the viewport height.\n"
            'Alternatively, you can test such cases by setting "true" value '
            'to option "compositeImage" in the config file.\n'
            f"Element position: {crop_area.left}, {crop_area.top}; "
            f"size: {crop_area.width}, {crop_area.height}.\n"
            f"Viewport size: {viewport.width}, {viewport.height}."
        )
