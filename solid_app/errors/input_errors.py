"""
Input error classifications for the example domains.

These exceptions are raised when a caller passes a value the modeled
fixed-width types could not hold, or asks a collaborator for work it has
no rule for.
"""

from typing import Optional, Any

from .base import SolidAppError


class DimensionRangeError(SolidAppError, ValueError):
    """Value is not an integer inside the allowed unsigned range."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, min_value: int = 0,
                 max_value: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.min_value = min_value
        self.max_value = max_value


class UnsupportedCountryError(SolidAppError, TypeError):
    """Tax calculator has no rule for the given country type."""

    def __init__(self, message: str, country_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.country_type = country_type
