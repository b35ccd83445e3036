"""Abstract base class for configuration storage.

ConfigStore provides access to ~/.tmux-urlview/config.toml. This gateway
enables testing by avoiding direct Path.home() calls.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from tmux_urlview.core.config import UrlviewConfig


class ConfigStore(ABC):
    """Abstract interface for reading user configuration."""

    @abstractmethod
    def config_path(self) -> Path:
        """Get path to the config file."""
        ...

    @abstractmethod
    def load_config(self) -> UrlviewConfig:
        """Load configuration, returning defaults when no file exists.

        Raises:
            ConfigError: If the file is malformed or a key has the wrong type
        """
        ...
