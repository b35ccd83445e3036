"""Binding emitter for tmux.conf.

Usage:
    # Append to ~/.tmux.conf
    tmux-urlview init >> ~/.tmux.conf
"""

import click

from tmux_urlview.core.binding import build_binding_line
from tmux_urlview.core.context import UrlviewContext


@click.command("init")
@click.pass_obj
def init_cmd(ctx: UrlviewContext) -> None:
    """Print the tmux key binding for tmux-urlview.

    \b
      # Append to your tmux config, then reload it
      tmux-urlview init >> ~/.tmux.conf
      tmux source-file ~/.tmux.conf
    """
    click.echo(build_binding_line(ctx.config.binding_key))
