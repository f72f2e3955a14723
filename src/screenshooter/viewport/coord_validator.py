"""Crop area validation against the captured viewport.

The validator runs right before an image is cropped. It rejects crop areas
that cannot be cut out of the viewport bitmap, so a bad measurement fails
loudly instead of producing a truncated or shifted screenshot.

Two checks run in order and the first failure wins:
1. Offset: top/left must be non-negative and the right edge must not pass
   the viewport width. Skipped when viewport overflow is allowed.
2. Height: the crop area must not be taller than the viewport. Always
   enforced, overflow or not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn, Protocol, Self

from pydantic import BaseModel, ConfigDict, Field

from screenshooter.config import Settings
from screenshooter.config import settings as default_settings
from screenshooter.utils.logging import get_logger
from screenshooter.viewport.errors import (
    HeightViewportError,
    OffsetViewportError,
    ViewportError,
)
from screenshooter.viewport.primitives import CropArea, Viewport

_LOGGER_NAMESPACE = "screenshooter.coord_validator"


class BrowserSessionProtocol(Protocol):
    """Anything that identifies the browser session doing the capture."""

    @property
    def id(self) -> str:
        """Stable session identifier used to label diagnostics."""
        ...


class CoordValidatorOptions(BaseModel):
    """Options recognized by CoordValidator.

    Unknown keys are ignored so callers can pass a whole capture config.

    Attributes:
        allow_viewport_overflow: Skip the left/top/right bounds check.
            The height check is still applied.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", validate_by_name=True)

    allow_viewport_overflow: bool = Field(
        default=False,
        alias="allowViewportOverflow",
        description="Ignore OffsetViewportError",
    )


def is_outside_of_viewport(viewport: Viewport, crop_area: CropArea) -> bool:
    """Check whether a crop area crosses the viewport left, top or right bounds."""
    return crop_area.top < 0 or crop_area.left < 0 or crop_area.right > viewport.width


class CoordValidator:
    """Validates compatibility of viewport and crop area coordinates.

    The browser session is only used to name the logger; the validator
    keeps no reference to it and holds no per-call state, so one instance
    may be shared between threads.

    Example:
        >>> validator = CoordValidator(browser)
        >>> validator.validate(
        ...     Viewport(width=1000, height=800),
        ...     CropArea(left=0, top=0, width=500, height=400),
        ... )
    """

    def __init__(
        self,
        browser: BrowserSessionProtocol,
        options: CoordValidatorOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            browser: Browser session instance; only its ``id`` is used.
            options: Validator options, either a CoordValidatorOptions or a
                mapping with an ``allow_viewport_overflow`` (or
                ``allowViewportOverflow``) key. Defaults apply when None.
        """
        if options is None:
            options = CoordValidatorOptions()
        elif not isinstance(options, CoordValidatorOptions):
            options = CoordValidatorOptions.model_validate(dict(options))

        self._log = get_logger(f"{_LOGGER_NAMESPACE}.{browser.id}")
        self._allow_viewport_overflow = options.allow_viewport_overflow

    @classmethod
    def create(
        cls,
        browser: BrowserSessionProtocol,
        options: CoordValidatorOptions | Mapping[str, Any] | None = None,
    ) -> Self:
        """Factory alias for the constructor."""
        return cls(browser, options)

    @classmethod
    def from_settings(
        cls,
        browser: BrowserSessionProtocol,
        settings: Settings | None = None,
    ) -> Self:
        """Build a validator configured from application settings.

        Args:
            browser: Browser session instance.
            settings: Settings to read ALLOW_VIEWPORT_OVERFLOW from.
                Defaults to the module-level settings singleton.
        """
        settings = settings or default_settings
        return cls(
            browser,
            CoordValidatorOptions(
                allow_viewport_overflow=settings.ALLOW_VIEWPORT_OVERFLOW
            ),
        )

    @property
    def allow_viewport_overflow(self) -> bool:
        """Whether the left/top/right bounds check is skipped."""
        return self._allow_viewport_overflow

    def validate(self, viewport: Viewport, crop_area: CropArea) -> None:
        """Validate that a crop area can be captured from the viewport.

        Args:
            viewport: Size of the captured viewport.
            crop_area: Region to be cut out of the viewport image.

        Raises:
            OffsetViewportError: If overflow is not allowed and the crop
                area crosses the viewport left, top or right bounds.
            HeightViewportError: If the crop area is taller than the
                viewport. Only checked once the offset check has passed.
        """
        self._log.debug("viewport size", viewport=viewport.model_dump())
        self._log.debug("crop area", crop_area=crop_area.model_dump())

        if not self._allow_viewport_overflow and is_outside_of_viewport(
            viewport, crop_area
        ):
            self._report_offset_viewport_error()

        if crop_area.height > viewport.height:
            self._report_height_viewport_error(viewport, crop_area)

    def is_valid(self, viewport: Viewport, crop_area: CropArea) -> bool:
        """Check if a crop area can be captured without raising.

        Convenience method that wraps validate().

        Returns:
            True if validate() passes, False if it raises a ViewportError.
        """
        try:
            self.validate(viewport, crop_area)
        except ViewportError:
            return False
        return True

    def _report_offset_viewport_error(self) -> NoReturn:
        self._log.debug(
            "crop area is outside of the viewport left, top or right bounds"
        )
        raise OffsetViewportError()

    def _report_height_viewport_error(
        self, viewport: Viewport, crop_area: CropArea
    ) -> NoReturn:
        # Some browsers hit this far more often than others; the workaround
        # there is compositeImage, not a bigger window.
        self._log.debug("crop area bottom bound is outside of the viewport height")
        raise HeightViewportError(viewport, crop_area)
