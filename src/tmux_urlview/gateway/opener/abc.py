"""URL opener abstraction for testing."""

from abc import ABC, abstractmethod


class UrlOpener(ABC):
    """Abstract handoff of a URL to the OS default handler."""

    @abstractmethod
    def open_url(self, url: str) -> None:
        """Open a URL.

        Raises:
            OpenError: If the opener command fails
        """
        ...
