"""Fake ConfigStore implementation for testing."""

from pathlib import Path

from tmux_urlview.core.config import UrlviewConfig
from tmux_urlview.core.errors import ConfigError
from tmux_urlview.gateway.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory fake returning a configured UrlviewConfig.

    This class has NO public setup methods beyond constructor.
    """

    def __init__(
        self,
        *,
        config: UrlviewConfig | None = None,
        load_error: str | None = None,
    ) -> None:
        self._config = config if config is not None else UrlviewConfig()
        self._load_error = load_error

    def config_path(self) -> Path:
        return Path("/fake/tmux-urlview/config.toml")

    def load_config(self) -> UrlviewConfig:
        if self._load_error is not None:
            raise ConfigError(self._load_error)
        return self._config
