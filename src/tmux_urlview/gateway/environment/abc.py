"""Process environment abstraction for testing.

This module provides an ABC for environment variables and stdin access so
that input acquisition can be tested without a real terminal or tmux session.
"""

from abc import ABC, abstractmethod


class Environment(ABC):
    """Abstract process environment for dependency injection."""

    @abstractmethod
    def get_env(self, key: str) -> str | None:
        """Look up an environment variable.

        Args:
            key: Variable name, e.g. "TMUX_PANE"

        Returns:
            The value, or None if unset
        """
        ...

    @abstractmethod
    def is_stdin_interactive(self) -> bool:
        """Check if stdin is connected to an interactive terminal (TTY).

        Returns:
            True if stdin is a TTY, False otherwise
        """
        ...

    @abstractmethod
    def read_stdin(self) -> bytes:
        """Read all remaining bytes from stdin.

        Raises:
            OSError: If stdin cannot be read
        """
        ...
