"""Configuration values for tmux-urlview."""

from dataclasses import dataclass

DEFAULT_SELECTOR_COMMAND = ("fzf",)
DEFAULT_BINDING_KEY = "U"


@dataclass(frozen=True)
class UrlviewConfig:
    """User configuration loaded from ~/.tmux-urlview/config.toml.

    opener_command is None when the platform default (open / xdg-open) applies.
    """

    selector_command: tuple[str, ...] = DEFAULT_SELECTOR_COMMAND
    opener_command: tuple[str, ...] | None = None
    binding_key: str = DEFAULT_BINDING_KEY
