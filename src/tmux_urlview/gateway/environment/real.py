"""Real environment implementation using os.environ and sys.stdin."""

import os
import sys

from tmux_urlview.gateway.environment.abc import Environment


class RealEnvironment(Environment):
    """Production implementation backed by the current process."""

    def get_env(self, key: str) -> str | None:
        return os.environ.get(key)

    def is_stdin_interactive(self) -> bool:
        """Check if stdin is connected to an interactive terminal.

        Returns:
            True if stdin is a TTY, False otherwise
        """
        return sys.stdin.isatty()

    def read_stdin(self) -> bytes:
        return sys.stdin.buffer.read()
