from abc import ABC, abstractmethod
from dataclasses import dataclass

COMMAND_NOT_FOUND_EXIT_CODE = 127
CANNOT_EXECUTE_EXIT_CODE = 126


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class CommandRunner(ABC):
    @abstractmethod
    def run(self, args: list[str], *, stdin_text: str | None) -> CommandResult:
        """Run an external program to completion.

        Non-zero exit is reported in the returned result, never raised.

        Args:
            args: Program name followed by its arguments
            stdin_text: Text fed to the program's stdin, or None to inherit stdin
        """
        pass
