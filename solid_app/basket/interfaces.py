"""Abstract search capability shared by high- and low-level basket modules."""

from abc import ABC, abstractmethod


class BasketSearcher(ABC):
    """Anything that can be searched for fruit by color."""

    @abstractmethod
    def search_by_color(self, color: str) -> list[str]:
        """
        Find fruit names matching a color.

        Args:
            color: Exact, case-sensitive color to match

        Returns:
            Names of matching fruit in insertion order, empty if none match
        """
        pass
