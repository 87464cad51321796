"""Configuration error raised when loaded settings fail validation."""

from typing import Optional, Any

from .base import SolidAppError


class ConfigurationError(SolidAppError):
    """Merged configuration did not pass validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
