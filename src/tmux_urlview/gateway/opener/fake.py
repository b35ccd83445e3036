from tmux_urlview.core.errors import OpenError
from tmux_urlview.gateway.opener.abc import UrlOpener


class FakeUrlOpener(UrlOpener):
    def __init__(self, *, open_error: str | None = None) -> None:
        self._open_error = open_error
        self._opened_urls: list[str] = []

    def open_url(self, url: str) -> None:
        self._opened_urls.append(url)
        if self._open_error is not None:
            raise OpenError(self._open_error)

    @property
    def opened_urls(self) -> list[str]:
        return list(self._opened_urls)
