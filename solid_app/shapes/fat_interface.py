"""
Fat interface counterexample.

FatSquare stays substitutable for Rectangle by turning the width and height
setters into no-ops, but every Square user now sees four methods that do
nothing useful. ``segregated.Square`` drops them entirely.
"""

from typing import Optional

from ..config.defaults import ShapeParams
from ..logging.config import get_principle_logger
from ..utils.ints import ensure_uint
from .liskov import Rectangle

logger = get_principle_logger(__name__, "interface_segregation")


class FatSquare(Rectangle):
    """Square carrying Rectangle's whole interface."""

    def __init__(self, side: int, params: Optional[ShapeParams] = None):
        super().__init__(side, side, params)

    def set_width(self, width: int) -> None:
        logger.debug("Ignored width set on square", width=width)

    def set_height(self, height: int) -> None:
        logger.debug("Ignored height set on square", height=height)

    def set_length(self, side: int) -> None:
        side = ensure_uint(side, self.params.dimension_bits, "length")
        self._width = self._height = side

    def get_width(self) -> int:
        return self.get_length()

    def get_height(self) -> int:
        return self.get_length()

    def get_length(self) -> int:
        return self._width
