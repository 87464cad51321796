"""
Open/closed example.

TextAdder.add_to_text never changes; new kinds of text addition are new
TextAddType subclasses.
"""

from .adder import TextAdder
from .strategies import TextAddType, TextAppend, TextInsertAt, TextPrepend

__all__ = [
    "TextAddType",
    "TextAdder",
    "TextAppend",
    "TextInsertAt",
    "TextPrepend",
]
