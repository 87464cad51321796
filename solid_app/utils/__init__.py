"""
Utility functions module.

Integer range helpers shared by the shape and country examples. Python
integers never overflow, so the fixed-width ranges the examples model are
checked explicitly instead.
"""

from .ints import UINT16_BITS, UINT32_BITS, ensure_uint, uint_max, widen_product

__all__ = ["UINT16_BITS", "UINT32_BITS", "ensure_uint", "uint_max", "widen_product"]
