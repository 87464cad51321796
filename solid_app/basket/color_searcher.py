"""High-level color listing modules."""

import sys
from typing import TextIO, Optional

from ..logging.config import get_principle_logger
from .fruit_basket import FruitBasket
from .interfaces import BasketSearcher

logger = get_principle_logger(__name__, "dependency_inversion")


def _print_found(names: list[str], stream: Optional[TextIO]) -> None:
    out = stream or sys.stdout
    for name in names:
        print(f"Found {name}", file=out)


class ColorSearcher:
    """Lists fruit of a color from any BasketSearcher."""

    def list_color(self, basket: BasketSearcher, color: str,
                   stream: Optional[TextIO] = None) -> list[str]:
        """
        Print ``Found <name>`` for each matching fruit.

        Args:
            basket: Any searchable basket
            color: Exact color to match
            stream: Output stream, stdout when omitted

        Returns:
            Names that were printed, in order
        """
        found = basket.search_by_color(color)
        _print_found(found, stream)
        logger.debug("Listed fruit by color", color=color, matches=len(found))
        return found


class CoupledColorSearcher:
    """
    Lists fruit of a color by walking a FruitBasket's entries directly.

    Produces the same output as ColorSearcher, but only works with
    FruitBasket and breaks whenever its storage changes. Kept as the
    counterexample to ColorSearcher.
    """

    def list_color(self, fruit_basket: FruitBasket, color: str,
                   stream: Optional[TextIO] = None) -> list[str]:
        found = [item.fruit for item in fruit_basket.items if item.color == color]
        _print_found(found, stream)
        return found
