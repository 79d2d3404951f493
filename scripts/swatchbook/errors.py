"""
Exceptions raised by the swatchbook pipeline.

Every failure is fatal to the run that hit it; the CLI reports the message
and exits non-zero.
"""

from __future__ import annotations


class SwatchbookError(Exception):
    """Base class for swatchbook errors."""
    pass


class MissingPathError(SwatchbookError):
    """No stylesheet path was supplied and no default is allowed."""

    def __init__(self, message: str = "No css path provided") -> None:
        super().__init__(message)


class ResourceNotFoundError(SwatchbookError):
    """The requested stylesheet did not match any loaded stylesheet."""

    def __init__(self, css_path: str) -> None:
        self.css_path = css_path
        super().__init__(f"No style sheet found for: {css_path}")


class ConfigError(SwatchbookError):
    """The configuration file could not be read or is invalid."""
    pass


class BrowserUnavailableError(SwatchbookError):
    """Playwright (or its Chromium build) is not installed."""
    pass
