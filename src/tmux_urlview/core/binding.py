"""tmux key binding emitted by `tmux-urlview init`."""

from tmux_urlview.core.config import DEFAULT_BINDING_KEY


def build_binding_line(key: str = DEFAULT_BINDING_KEY) -> str:
    """Return the tmux.conf line that opens tmux-urlview in a popup.

    The pane is piped in, so tmux-urlview reads stdin rather than capturing itself.
    """
    return f"bind {key} display-popup -E 'tmux capture-pane -p | tmux-urlview'"
