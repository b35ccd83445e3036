"""Fake Environment implementation for testing.

FakeEnvironment is an in-memory implementation that returns configured
variables, TTY state, and stdin content, enabling fast and deterministic tests.
"""

from tmux_urlview.gateway.environment.abc import Environment


class FakeEnvironment(Environment):
    """In-memory fake implementation that returns configured state.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        env_vars: dict[str, str] | None = None,
        is_interactive: bool = False,
        stdin: bytes = b"",
        stdin_error: str | None = None,
    ) -> None:
        """Create FakeEnvironment with configured state.

        Args:
            env_vars: Environment variables visible to get_env
            is_interactive: Whether to report stdin as interactive (TTY)
            stdin: Bytes returned by read_stdin
            stdin_error: If set, read_stdin raises OSError with this message
        """
        self._env_vars = dict(env_vars) if env_vars is not None else {}
        self._is_interactive = is_interactive
        self._stdin = stdin
        self._stdin_error = stdin_error
        self._stdin_read_count = 0

    @property
    def stdin_read_count(self) -> int:
        """Number of times read_stdin was called.

        This property is for test assertions only.
        """
        return self._stdin_read_count

    def get_env(self, key: str) -> str | None:
        return self._env_vars.get(key)

    def is_stdin_interactive(self) -> bool:
        return self._is_interactive

    def read_stdin(self) -> bytes:
        self._stdin_read_count += 1
        if self._stdin_error is not None:
            raise OSError(self._stdin_error)
        return self._stdin
