"""
Logging configuration and utilities for the SOLID examples.
"""
from .config import configure_logging, get_logger, get_principle_logger

__all__ = ["configure_logging", "get_logger", "get_principle_logger"]
