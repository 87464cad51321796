"""
Substitutability counterexample.

Rectangle promises that setting the width leaves the height alone. Square
overrides both setters to keep its sides equal, so code written against
Rectangle gets surprising areas when handed a Square. Use the shapes in
``segregated`` instead.
"""

from typing import Optional

from ..config.defaults import ShapeParams
from ..logging.config import get_principle_logger
from ..utils.ints import ensure_uint, widen_product

logger = get_principle_logger(__name__, "liskov_substitution")


class Rectangle:
    """Rectangle with independently mutable width and height."""

    def __init__(self, width: int, height: int, params: Optional[ShapeParams] = None):
        self.params = params or ShapeParams()
        self._width = ensure_uint(width, self.params.dimension_bits, "width")
        self._height = ensure_uint(height, self.params.dimension_bits, "height")

    def set_width(self, width: int) -> None:
        self._width = ensure_uint(width, self.params.dimension_bits, "width")

    def set_height(self, height: int) -> None:
        self._height = ensure_uint(height, self.params.dimension_bits, "height")

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def calculate_area(self) -> int:
        """Width times height, computed in the widened area range."""
        return widen_product(self._width, self._height, self.params.area_bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class Square(Rectangle):
    """Square that keeps its sides equal through Rectangle's setters."""

    def __init__(self, side: int, params: Optional[ShapeParams] = None):
        super().__init__(side, side, params)

    def set_width(self, width: int) -> None:
        width = ensure_uint(width, self.params.dimension_bits, "width")
        self._width = self._height = width
        logger.debug("Square width set also changed height", side=width)

    def set_height(self, height: int) -> None:
        height = ensure_uint(height, self.params.dimension_bits, "height")
        self._width = self._height = height
        logger.debug("Square height set also changed width", side=height)
