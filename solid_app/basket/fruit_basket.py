"""Low-level fruit basket module."""

from collections.abc import Sequence

import structlog

from .interfaces import BasketSearcher
from .models import FruitItem

logger = structlog.get_logger(__name__)


class FruitBasket(BasketSearcher):
    """
    Ordered collection of (fruit, color) pairs.

    Filtering lives here rather than in its callers, so the storage layout
    can change without touching anything that searches the basket.
    """

    def __init__(self) -> None:
        self._items: list[FruitItem] = []

    def add_to_basket(self, fruit: str, color: str) -> None:
        """Append one fruit to the end of the basket."""
        self._items.append(FruitItem(fruit=fruit, color=color))
        logger.debug("Fruit added to basket", fruit=fruit, color=color, size=len(self._items))

    def search_by_color(self, color: str) -> list[str]:
        found = [item.fruit for item in self._items if item.color == color]
        logger.debug("Basket searched by color", color=color, matches=len(found))
        return found

    @property
    def items(self) -> Sequence[FruitItem]:
        """Stored entries in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)
