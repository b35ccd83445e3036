"""Real UrlOpener implementation using `open` (macOS) or `xdg-open`."""

import logging
import sys

from tmux_urlview.core.errors import OpenError
from tmux_urlview.gateway.command_runner.abc import CommandRunner
from tmux_urlview.gateway.opener.abc import UrlOpener

logger = logging.getLogger(__name__)


def default_opener_command(platform: str) -> list[str]:
    """Return the OS opener command for a sys.platform value."""
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class RealUrlOpener(UrlOpener):
    """Production implementation delegating to an opener command."""

    def __init__(self, *, command: list[str], command_runner: CommandRunner) -> None:
        self._command = list(command)
        self._command_runner = command_runner

    def open_url(self, url: str) -> None:
        logger.debug("Opening %s with %s", url, self._command[0])
        result = self._command_runner.run([*self._command, url], stdin_text=None)
        if not result.succeeded:
            detail = result.stderr or f"exit status {result.returncode}"
            raise OpenError(f"{self._command[0]} failed: {detail}")


def create_url_opener(
    command: tuple[str, ...] | None, command_runner: CommandRunner
) -> RealUrlOpener:
    """Create a RealUrlOpener, falling back to the platform default command."""
    resolved = list(command) if command is not None else default_opener_command(sys.platform)
    return RealUrlOpener(command=resolved, command_runner=command_runner)
