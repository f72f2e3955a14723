"""CLI module for screenshooter.

Provides the command-line interface for validating crop areas against
viewport sizes.
"""

from __future__ import annotations

from screenshooter.cli.main import app

__all__ = ["app"]
