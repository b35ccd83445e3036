"""Real UrlSelector implementation using fzf (or a configured replacement)."""

from tmux_urlview.core.errors import SelectionError
from tmux_urlview.gateway.command_runner.abc import CommandRunner
from tmux_urlview.gateway.selector.abc import UrlSelector

# fzf exits 1 when nothing matched and 130 when interrupted with Esc/Ctrl-C
CANCEL_EXIT_CODES = frozenset({1, 130})


class RealUrlSelector(UrlSelector):
    """Production implementation piping URLs through a fuzzy finder."""

    def __init__(self, *, command: list[str], command_runner: CommandRunner) -> None:
        self._command = list(command)
        self._command_runner = command_runner

    def select(self, urls: list[str]) -> str | None:
        result = self._command_runner.run(self._command, stdin_text="\n".join(urls))
        if result.returncode in CANCEL_EXIT_CODES:
            return None
        if not result.succeeded:
            detail = result.stderr or f"exit status {result.returncode}"
            raise SelectionError(f"{self._command[0]} failed: {detail}")

        selected = result.stdout.strip()
        if not selected:
            return None
        return selected
