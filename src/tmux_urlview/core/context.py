"""UrlviewContext - dependency injection container for tmux-urlview.

Created at the CLI entry point and threaded through the application via
Click's context system. Tests build one with UrlviewContext.for_test() and
pass it as `obj=` to CliRunner.invoke.
"""

from dataclasses import dataclass

from tmux_urlview.core.config import UrlviewConfig
from tmux_urlview.gateway.command_runner.abc import CommandRunner
from tmux_urlview.gateway.command_runner.real import RealCommandRunner
from tmux_urlview.gateway.config_store.abc import ConfigStore
from tmux_urlview.gateway.config_store.real import RealConfigStore
from tmux_urlview.gateway.environment.abc import Environment
from tmux_urlview.gateway.environment.real import RealEnvironment
from tmux_urlview.gateway.input_source.abc import InputSource
from tmux_urlview.gateway.input_source.fake import FakeInputSource
from tmux_urlview.gateway.input_source.real import RealInputSource
from tmux_urlview.gateway.opener.abc import UrlOpener
from tmux_urlview.gateway.opener.dry_run import DryRunUrlOpener
from tmux_urlview.gateway.opener.fake import FakeUrlOpener
from tmux_urlview.gateway.opener.real import create_url_opener
from tmux_urlview.gateway.selector.abc import UrlSelector
from tmux_urlview.gateway.selector.fake import FakeUrlSelector
from tmux_urlview.gateway.selector.real import RealUrlSelector


@dataclass(frozen=True)
class UrlviewContext:
    """Immutable context holding all dependencies for a tmux-urlview run.

    Frozen to prevent accidental modification at runtime.
    """

    input_source: InputSource
    selector: UrlSelector
    opener: UrlOpener
    config: UrlviewConfig
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        input_source: InputSource | None = None,
        selector: UrlSelector | None = None,
        opener: UrlOpener | None = None,
        config: UrlviewConfig | None = None,
        dry_run: bool = False,
    ) -> "UrlviewContext":
        """Create a context backed by fakes.

        Unspecified gateways default to empty input, a cancelling selector,
        and a recording opener.
        """
        return UrlviewContext(
            input_source=input_source if input_source is not None else FakeInputSource(text=""),
            selector=selector if selector is not None else FakeUrlSelector(selected=None),
            opener=opener if opener is not None else FakeUrlOpener(),
            config=config if config is not None else UrlviewConfig(),
            dry_run=dry_run,
        )


def build_context(
    *,
    config_store: ConfigStore,
    environment: Environment,
    command_runner: CommandRunner,
    dry_run: bool,
) -> UrlviewContext:
    """Wire production gateways on top of the given low-level capabilities.

    Args:
        config_store: Source of user configuration
        environment: Process environment used for input acquisition
        command_runner: Runner shared by tmux, the selector, and the opener
        dry_run: If True, print the chosen URL instead of opening it

    Raises:
        ConfigError: If the configuration is malformed
    """
    config = config_store.load_config()

    opener: UrlOpener = create_url_opener(config.opener_command, command_runner)
    if dry_run:
        opener = DryRunUrlOpener(opener)

    return UrlviewContext(
        input_source=RealInputSource(environment=environment, command_runner=command_runner),
        selector=RealUrlSelector(
            command=list(config.selector_command), command_runner=command_runner
        ),
        opener=opener,
        config=config,
        dry_run=dry_run,
    )


def create_context(*, dry_run: bool) -> UrlviewContext:
    """Create production context with real implementations."""
    return build_context(
        config_store=RealConfigStore(),
        environment=RealEnvironment(),
        command_runner=RealCommandRunner(),
        dry_run=dry_run,
    )
