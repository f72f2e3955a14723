"""Viewport capture validation for screenshooter.

This package checks that a crop area measured in the browser can actually
be cut out of the captured viewport image, before the crop happens.

Key Components:
    - Primitives: Viewport and CropArea models
    - CoordValidator: Offset and height checks for a crop area
    - Errors: OffsetViewportError and HeightViewportError

Example:
    from screenshooter.viewport import CoordValidator, CropArea, Viewport

    validator = CoordValidator(browser, {"allowViewportOverflow": False})
    viewport = Viewport(width=1000, height=800)
    crop_area = CropArea(left=0, top=0, width=500, height=400)
    validator.validate(viewport, crop_area)  # Raises if not capturable
"""

from screenshooter.viewport.coord_validator import (
    BrowserSessionProtocol,
    CoordValidator,
    CoordValidatorOptions,
    is_outside_of_viewport,
)
from screenshooter.viewport.errors import (
    HeightViewportError,
    OffsetViewportError,
    ViewportError,
)
from screenshooter.viewport.primitives import CropArea, Viewport

__all__ = [
    "BrowserSessionProtocol",
    "CoordValidator",
    "CoordValidatorOptions",
    "CropArea",
    "HeightViewportError",
    "OffsetViewportError",
    "Viewport",
    "ViewportError",
    "is_outside_of_viewport",
]
