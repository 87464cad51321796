"""Configuration defaults, loading and validation."""

from .defaults import DefaultConfig, ShapeParams, TaxParams, get_default_config
from .loader import ConfigLoader, load_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ShapeParams",
    "TaxParams",
    "ValidationError",
    "get_default_config",
    "load_config",
]
