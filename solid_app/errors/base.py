"""Base exception shared by all SOLID example errors."""

from typing import Optional, Dict, Any


class SolidAppError(Exception):
    """Base class for errors raised by the examples."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
