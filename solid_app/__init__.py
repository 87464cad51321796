"""
SOLID App - Object-Oriented Design Principle Examples

Five small, independent examples of the SOLID principles built around toy
domains: fruit baskets, rectangles and squares, country tax calculators and
text concatenation.
"""

__version__ = "0.1.0"
__author__ = "SOLID App Team"
