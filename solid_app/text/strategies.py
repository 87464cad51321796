"""Pluggable text addition strategies."""

from abc import ABC, abstractmethod


class TextAddType(ABC):
    """Base class for ways of combining an original string with a new one."""

    @abstractmethod
    def add(self, original: str, new_string: str) -> str:
        """
        Combine two strings.

        Args:
            original: Text being added to
            new_string: Text to add

        Returns:
            The combined text
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TextAppend(TextAddType):
    """Adds the new string after the original."""

    def add(self, original: str, new_string: str) -> str:
        return original + new_string


class TextPrepend(TextAddType):
    """Adds the new string before the original."""

    def add(self, original: str, new_string: str) -> str:
        return new_string + original


class TextInsertAt(TextAddType):
    """Inserts the new string after the first ``position`` characters."""

    def __init__(self, position: int):
        if position < 0:
            raise ValueError(f"position must be non-negative, got {position}")
        self.position = position

    def add(self, original: str, new_string: str) -> str:
        # Slicing past the end appends
        return original[:self.position] + new_string + original[self.position:]

    def __repr__(self) -> str:
        return f"TextInsertAt(position={self.position})"
