"""Error types raised by tmux-urlview gateways and orchestration.

Each fatal category of a run has its own type so the CLI can report a distinct
message. User cancellation is not an error and has no type here.
"""


class UrlviewError(Exception):
    """Base class for failures that end a tmux-urlview run."""


class InputError(UrlviewError):
    """Raised when captured pane text or stdin cannot be read."""


class SelectionError(UrlviewError):
    """Raised when the interactive selector fails (not when it is cancelled)."""


class OpenError(UrlviewError):
    """Raised when the OS opener fails to hand off a URL."""


class ConfigError(UrlviewError):
    """Raised when ~/.tmux-urlview/config.toml is malformed."""
