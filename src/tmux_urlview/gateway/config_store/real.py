"""Real ConfigStore implementation.

RealConfigStore reads ~/.tmux-urlview/config.toml. Every key is optional:

    selector_command = ["fzf", "--reverse"]
    opener_command = ["firefox"]
    binding_key = "u"
"""

import logging
import tomllib
from pathlib import Path

from tmux_urlview.core.config import DEFAULT_BINDING_KEY, DEFAULT_SELECTOR_COMMAND, UrlviewConfig
from tmux_urlview.core.errors import ConfigError
from tmux_urlview.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset({"selector_command", "opener_command", "binding_key"})


def _installation_path() -> Path:
    """Return path to the tmux-urlview config directory.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    return Path.home() / ".tmux-urlview"


def _parse_command(data: dict[str, object], key: str, config_path: Path) -> tuple[str, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' in {config_path} must be a non-empty list of strings")
    return tuple(value)


def parse_config(data: dict[str, object], config_path: Path) -> UrlviewConfig:
    """Build a UrlviewConfig from decoded TOML data."""
    binding_key = data.get("binding_key", DEFAULT_BINDING_KEY)
    if not isinstance(binding_key, str) or not binding_key.strip():
        raise ConfigError(f"'binding_key' in {config_path} must be a non-empty string")

    selector_command = _parse_command(data, "selector_command", config_path)
    unknown = sorted(k for k in data if k not in KNOWN_KEYS)
    if unknown:
        logger.debug("Ignoring unknown config keys: %s", unknown)

    return UrlviewConfig(
        selector_command=(
            selector_command if selector_command is not None else DEFAULT_SELECTOR_COMMAND
        ),
        opener_command=_parse_command(data, "opener_command", config_path),
        binding_key=binding_key.strip(),
    )


class RealConfigStore(ConfigStore):
    """Production implementation that reads ~/.tmux-urlview/config.toml."""

    def config_path(self) -> Path:
        """Get path to config file.

        Returns:
            Path to ~/.tmux-urlview/config.toml
        """
        return _installation_path() / "config.toml"

    def load_config(self) -> UrlviewConfig:
        config_path = self.config_path()
        if not config_path.exists():
            return UrlviewConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        return parse_config(data, config_path)
