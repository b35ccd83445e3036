"""Real InputSource implementation.

RealInputSource captures the active tmux pane when running interactively
inside tmux, and reads stdin otherwise (e.g. `tmux capture-pane -p | tmux-urlview`).
"""

import logging

from tmux_urlview.core.errors import InputError
from tmux_urlview.gateway.command_runner.abc import CommandRunner
from tmux_urlview.gateway.environment.abc import Environment
from tmux_urlview.gateway.input_source.abc import InputSource

logger = logging.getLogger(__name__)

TMUX_PANE_ENV_VAR = "TMUX_PANE"


def build_capture_args(pane: str) -> list[str]:
    """Build the tmux argument list that prints a pane's visible contents."""
    return ["tmux", "capture-pane", "-p", "-t", pane]


class RealInputSource(InputSource):
    """Production implementation reading from tmux or stdin."""

    def __init__(self, *, environment: Environment, command_runner: CommandRunner) -> None:
        self._environment = environment
        self._command_runner = command_runner

    def read_input(self) -> str:
        pane = self._environment.get_env(TMUX_PANE_ENV_VAR)
        if self._environment.is_stdin_interactive() and pane:
            return self._capture_pane(pane)
        return self._read_stdin()

    def _capture_pane(self, pane: str) -> str:
        logger.debug("Capturing tmux pane %s", pane)
        result = self._command_runner.run(build_capture_args(pane), stdin_text=None)
        if not result.succeeded:
            detail = result.stderr or f"tmux exited with status {result.returncode}"
            raise InputError(f"failed to capture tmux pane {pane}: {detail}")
        return result.stdout

    def _read_stdin(self) -> str:
        logger.debug("Reading input from stdin")
        try:
            data = self._environment.read_stdin()
        except OSError as e:
            raise InputError(f"failed to read stdin: {e}") from e
        return data.decode("utf-8", errors="replace")
