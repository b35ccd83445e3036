"""Fake UrlSelector implementation for testing."""

from tmux_urlview.core.errors import SelectionError
from tmux_urlview.gateway.selector.abc import UrlSelector


class FakeUrlSelector(UrlSelector):
    """In-memory fake that returns a configured choice and records offers.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, selected: str | None, select_error: str | None = None) -> None:
        """Create FakeUrlSelector.

        Args:
            selected: URL returned by select, or None to simulate cancellation
            select_error: If set, select raises SelectionError with this message
        """
        self._selected = selected
        self._select_error = select_error
        self._offered: list[list[str]] = []

    @property
    def offered(self) -> list[list[str]]:
        """URL lists passed to select, in call order.

        This property is for test assertions only.
        """
        return [list(urls) for urls in self._offered]

    def select(self, urls: list[str]) -> str | None:
        self._offered.append(list(urls))
        if self._select_error is not None:
            raise SelectionError(self._select_error)
        return self._selected
