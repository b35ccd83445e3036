"""Interactive selector abstraction for testing."""

from abc import ABC, abstractmethod


class UrlSelector(ABC):
    """Abstract fuzzy selector for dependency injection."""

    @abstractmethod
    def select(self, urls: list[str]) -> str | None:
        """Present URLs for interactive selection.

        Args:
            urls: Candidate URLs, shown one per line

        Returns:
            The chosen URL, or None if the user cancelled

        Raises:
            SelectionError: If the selector itself fails
        """
        ...
