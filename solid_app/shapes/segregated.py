"""
Segregated shape interfaces.

TwoDSimpleShape offers only area. Rectangle adds width and height mutators,
Square adds a single length. Callers that only need an area depend on
TwoDSimpleShape and never see mutators they cannot use.
"""

from typing import Optional

from ..config.defaults import ShapeParams
from ..utils.ints import ensure_uint, widen_product


class TwoDSimpleShape:
    """Shape with two stored dimensions and an area."""

    def __init__(self, width: int, height: int, params: Optional[ShapeParams] = None):
        self.params = params or ShapeParams()
        self._width = ensure_uint(width, self.params.dimension_bits, "width")
        self._height = ensure_uint(height, self.params.dimension_bits, "height")

    def calculate_area(self) -> int:
        return widen_product(self._width, self._height, self.params.area_bits)

    def _checked(self, value: int, field: str) -> int:
        return ensure_uint(value, self.params.dimension_bits, field)


class Rectangle(TwoDSimpleShape):
    """Shape with independently mutable width and height."""

    def set_width(self, width: int) -> None:
        self._width = self._checked(width, "width")

    def set_height(self, height: int) -> None:
        self._height = self._checked(height, "height")

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height


class Square(TwoDSimpleShape):
    """Shape with a single length and no width or height mutators."""

    def __init__(self, side: int, params: Optional[ShapeParams] = None):
        super().__init__(side, side, params)

    def set_length(self, side: int) -> None:
        self._width = self._height = self._checked(side, "length")

    def get_length(self) -> int:
        return self._width
