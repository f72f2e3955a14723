"""screenshooter: viewport capture validation for screenshot-based visual testing."""

__version__ = "0.1.0"
