import logging

import click

from tmux_urlview.cli.commands.init import init_cmd
from tmux_urlview.core.context import create_context
from tmux_urlview.core.errors import UrlviewError
from tmux_urlview.core.run import run_urlview

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="tmux-urlview")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print the selected URL instead of opening it")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Pick a URL from the current tmux pane (or stdin) and open it."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except UrlviewError as e:
            raise click.ClickException(str(e)) from e

    if ctx.invoked_subcommand is not None:
        return

    try:
        run_urlview(ctx.obj)
    except UrlviewError as e:
        raise click.ClickException(str(e)) from e


cli.add_command(init_cmd)
