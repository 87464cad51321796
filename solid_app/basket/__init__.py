"""
Dependency inversion example.

The high-level ColorSearcher depends on the BasketSearcher abstraction, and
the low-level FruitBasket implements it. Neither knows the other's details.
"""

from .color_searcher import ColorSearcher, CoupledColorSearcher
from .fruit_basket import FruitBasket
from .interfaces import BasketSearcher
from .models import FruitItem

__all__ = [
    "BasketSearcher",
    "ColorSearcher",
    "CoupledColorSearcher",
    "FruitBasket",
    "FruitItem",
]
