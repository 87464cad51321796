"""Pytest configuration and shared fixtures."""

import pytest

from solid_app.basket import FruitBasket
from solid_app.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _configure_logging() -> None:
    """Route structlog through stdlib logging so stdout holds only example output."""
    configure_logging(level="WARNING", cache_logger_on_first_use=False)


@pytest.fixture
def fruit_basket() -> FruitBasket:
    """Basket with two red fruits around a green one."""
    basket = FruitBasket()
    basket.add_to_basket("apple", "red")
    basket.add_to_basket("grape", "green")
    basket.add_to_basket("cherry", "red")
    return basket
