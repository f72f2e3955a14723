"""Shared utilities for screenshooter."""
