"""
Error classification for the SOLID examples.

The examples themselves raise very little: empty searches are empty lists,
not errors. These exceptions cover the inputs Python will not reject on its
own, like integers outside the fixed-width ranges the examples model, and
invalid configuration.
"""

from .base import SolidAppError
from .configuration import ConfigurationError
from .input_errors import (
    DimensionRangeError,
    UnsupportedCountryError,
)

__all__ = [
    "SolidAppError",
    # Input Errors
    "DimensionRangeError",
    "UnsupportedCountryError",
    # Configuration
    "ConfigurationError",
]
