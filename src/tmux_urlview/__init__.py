"""tmux-urlview CLI entry point.

This package provides a Click-based CLI that extracts URLs from a tmux pane
(or stdin), lets the user pick one with fzf, and opens it. See
`tmux-urlview --help` for details.
"""

from tmux_urlview.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `tmux-urlview` console script."""
    cli()
