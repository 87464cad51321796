"""Fruit basket entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FruitItem:
    """A single fruit stored in a basket."""
    fruit: str
    color: str
