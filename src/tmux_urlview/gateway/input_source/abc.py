"""Input source abstraction for testing.

This module provides an ABC for acquiring the text to scan for URLs, either
from the active tmux pane or from stdin.
"""

from abc import ABC, abstractmethod


class InputSource(ABC):
    """Abstract source of captured terminal text."""

    @abstractmethod
    def read_input(self) -> str:
        """Return the raw text to scan for URLs.

        Raises:
            InputError: If neither the pane nor stdin can be read
        """
        ...
