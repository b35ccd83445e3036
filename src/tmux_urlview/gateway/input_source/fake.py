"""Fake InputSource implementation for testing."""

from tmux_urlview.core.errors import InputError
from tmux_urlview.gateway.input_source.abc import InputSource


class FakeInputSource(InputSource):
    """In-memory fake returning configured text.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, text: str, read_error: str | None = None) -> None:
        """Create FakeInputSource.

        Args:
            text: Text returned by read_input
            read_error: If set, read_input raises InputError with this message
        """
        self._text = text
        self._read_error = read_error

    def read_input(self) -> str:
        if self._read_error is not None:
            raise InputError(self._read_error)
        return self._text
