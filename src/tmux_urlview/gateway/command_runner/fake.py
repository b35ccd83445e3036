from dataclasses import dataclass

from tmux_urlview.gateway.command_runner.abc import CommandResult, CommandRunner


@dataclass(frozen=True)
class CommandCall:
    args: list[str]
    stdin_text: str | None


class FakeCommandRunner(CommandRunner):
    def __init__(self, *, results: dict[str, CommandResult] | None) -> None:
        """Create FakeCommandRunner.

        Args:
            results: Result to return keyed by program name (args[0]).
                Programs without an entry succeed with empty output.
        """
        self._results = dict(results) if results is not None else {}
        self._calls: list[CommandCall] = []

    @classmethod
    def create_succeeding_all(cls) -> "FakeCommandRunner":
        """Create a FakeCommandRunner where every command succeeds silently."""
        return cls(results=None)

    def run(self, args: list[str], *, stdin_text: str | None) -> CommandResult:
        self._calls.append(CommandCall(args=list(args), stdin_text=stdin_text))
        return self._results.get(args[0], CommandResult(returncode=0, stdout="", stderr=""))

    @property
    def calls(self) -> list[CommandCall]:
        return list(self._calls)

    @property
    def last_call(self) -> CommandCall | None:
        if not self._calls:
            return None
        return self._calls[-1]
