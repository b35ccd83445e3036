"""No-op URL opener for dry-run mode.

This module provides an opener that prevents launching a browser while
printing what would have been opened.
"""

import click

from tmux_urlview.gateway.opener.abc import UrlOpener


class DryRunUrlOpener(UrlOpener):
    """No-op wrapper that prints instead of opening in dry-run mode."""

    def __init__(self, wrapped: UrlOpener) -> None:
        """Create a dry-run wrapper around a UrlOpener implementation.

        Args:
            wrapped: The UrlOpener implementation to wrap
        """
        self._wrapped = wrapped

    def open_url(self, url: str) -> None:
        """No-op for opening in dry-run mode."""
        click.echo(f"[DRY RUN] Would open: {url}")
