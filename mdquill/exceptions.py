"""Custom exceptions for mdquill."""

from typing import Optional


class MdQuillError(Exception):
    """Base exception for mdquill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(MdQuillError):
    """Exception raised while reading markdown input."""

    pass


class LayoutError(MdQuillError):
    """Exception raised during line wrapping or pagination."""

    pass


class MeasurementUnavailableError(LayoutError):
    """Raised when the rendering surface cannot report a text width.

    This is the only layout condition that aborts a document build.
    """

    pass


class RenderingError(MdQuillError):
    """Exception raised while painting onto a rendering surface."""

    pass


class FontError(MdQuillError):
    """Exception raised during font resolution."""

    pass


class ConfigurationError(MdQuillError):
    """Exception raised for invalid render settings."""

    pass
