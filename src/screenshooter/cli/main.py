"""screenshooter CLI.

Command-line interface for checking a crop area against a viewport, handy
when reproducing a failed capture from the numbers in its error message.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from pydantic import ValidationError

from screenshooter import __version__
from screenshooter.utils.logging import (
    configure_logging,
    get_logger,
    set_correlation_context,
)
from screenshooter.viewport import (
    CoordValidator,
    CoordValidatorOptions,
    CropArea,
    Viewport,
    ViewportError,
)

app = typer.Typer(
    name="screenshooter",
    help="screenshooter: viewport capture validation for visual tests",
    add_completion=False,
)


class _CliSession:
    """Stand-in browser session carrying only an identifier."""

    def __init__(self, session_id: str) -> None:
        self.id = session_id


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"screenshooter {__version__}")


@app.command()
def validate(  # noqa: PLR0913
    viewport: Annotated[
        str, typer.Option("--viewport", help="Viewport size as WIDTHxHEIGHT")
    ],
    crop_area: Annotated[
        str,
        typer.Option("--crop-area", help="Crop area as LEFT,TOP,WIDTH,HEIGHT"),
    ],
    allow_viewport_overflow: Annotated[
        bool,
        typer.Option(
            "--allow-viewport-overflow",
            help="Skip the left/top/right bounds check",
        ),
    ] = False,
    browser_id: Annotated[
        str, typer.Option("--browser-id", help="Browser id used to label logs")
    ] = "cli",
    test_id: Annotated[
        str | None,
        typer.Option("--test-id", help="Visual test title attached to logs"),
    ] = None,
    capture_id: Annotated[
        str | None,
        typer.Option("--capture-id", help="Screenshot state name attached to logs"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Check that a crop area can be captured from a viewport."""
    _configure_logging(verbose)
    set_correlation_context(
        session_id=browser_id, test_id=test_id, capture_id=capture_id
    )
    logger = get_logger(__name__)

    try:
        parsed_viewport = Viewport.from_tuple(_parse_numbers(viewport, "x", 2))
        parsed_crop_area = CropArea.from_tuple(_parse_numbers(crop_area, ",", 4))
    except (ValueError, ValidationError) as e:
        typer.echo(f"Error: invalid geometry: {e}", err=True)
        raise typer.Exit(2) from None

    validator = CoordValidator(
        _CliSession(browser_id),
        CoordValidatorOptions(allow_viewport_overflow=allow_viewport_overflow),
    )

    try:
        validator.validate(parsed_viewport, parsed_crop_area)
    except ViewportError as e:
        logger.info("Crop area rejected", error=type(e).__name__)
        if json_output:
            typer.echo(
                json.dumps(
                    {
                        "valid": False,
                        "error": type(e).__name__,
                        "message": e.message,
                    },
                    indent=2,
                )
            )
        else:
            typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps({"valid": True}))
    else:
        typer.echo("OK")


# =============================================================================
# Helpers
# =============================================================================


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _parse_numbers(
    raw: str, separator: str, count: int
) -> tuple[int | float, ...]:
    """Split ``raw`` on ``separator`` into exactly ``count`` numbers.

    Integral values come back as int so error messages echo them unchanged.

    Raises:
        ValueError: If the part count is wrong or a part is not a number.
    """
    parts = [part.strip() for part in raw.lower().split(separator)]
    if len(parts) != count:
        raise ValueError(f"expected {count} values separated by {separator!r}")
    numbers: list[int | float] = []
    for part in parts:
        value = float(part)
        numbers.append(int(value) if value.is_integer() else value)
    return tuple(numbers)


if __name__ == "__main__":
    app()
