"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef


class BaseParser(ABC):
    """Abstract interface for link parsers."""

    @abstractmethod
    def parse(self, text: str) -> Iterator[LinkRef]:
        """Parse text and yield found links."""
        pass

    @staticmethod
    def position(text: str, offset: int) -> tuple[int, int]:
        """Return 1-based (line, column) of ``offset`` in ``text``."""
        line_number = text.count("\n", 0, offset) + 1
        column_number = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return line_number, column_number
