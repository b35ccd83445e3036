"""Tests for wiring production gateways with fake capabilities."""

import pytest

from tmux_urlview.core.config import UrlviewConfig
from tmux_urlview.core.context import build_context
from tmux_urlview.core.errors import ConfigError
from tmux_urlview.core.run import run_urlview
from tmux_urlview.gateway.command_runner.abc import CommandResult
from tmux_urlview.gateway.command_runner.fake import FakeCommandRunner
from tmux_urlview.gateway.config_store.fake import FakeConfigStore
from tmux_urlview.gateway.environment.fake import FakeEnvironment


def test_full_flow_captures_pane_selects_and_opens() -> None:
    """Pane text flows through fzf to the configured opener."""
    runner = FakeCommandRunner(
        results={
            "tmux": CommandResult(
                returncode=0, stdout="docs at https://example.com/docs.\n", stderr=""
            ),
            "fzf": CommandResult(returncode=0, stdout="https://example.com/docs\n", stderr=""),
        }
    )
    ctx = build_context(
        config_store=FakeConfigStore(config=UrlviewConfig(opener_command=("open",))),
        environment=FakeEnvironment(env_vars={"TMUX_PANE": "%1"}, is_interactive=True),
        command_runner=runner,
        dry_run=False,
    )

    assert run_urlview(ctx) == "https://example.com/docs"
    assert [call.args for call in runner.calls] == [
        ["tmux", "capture-pane", "-p", "-t", "%1"],
        ["fzf"],
        ["open", "https://example.com/docs"],
    ]


def test_dry_run_does_not_run_opener(capsys: pytest.CaptureFixture[str]) -> None:
    runner = FakeCommandRunner(
        results={"fzf": CommandResult(returncode=0, stdout="https://example.com\n", stderr="")}
    )
    ctx = build_context(
        config_store=FakeConfigStore(config=UrlviewConfig(opener_command=("open",))),
        environment=FakeEnvironment(stdin=b"https://example.com"),
        command_runner=runner,
        dry_run=True,
    )

    run_urlview(ctx)

    assert [call.args[0] for call in runner.calls] == ["fzf"]
    assert "[DRY RUN] Would open: https://example.com" in capsys.readouterr().out


def test_configured_selector_command_is_used() -> None:
    runner = FakeCommandRunner(
        results={"sk": CommandResult(returncode=130, stdout="", stderr="")}
    )
    ctx = build_context(
        config_store=FakeConfigStore(config=UrlviewConfig(selector_command=("sk", "--ansi"))),
        environment=FakeEnvironment(stdin=b"https://example.com"),
        command_runner=runner,
        dry_run=False,
    )

    assert run_urlview(ctx) is None
    assert runner.last_call is not None
    assert runner.last_call.args == ["sk", "--ansi"]


def test_config_error_propagates() -> None:
    with pytest.raises(ConfigError, match="bad config"):
        build_context(
            config_store=FakeConfigStore(load_error="bad config"),
            environment=FakeEnvironment(),
            command_runner=FakeCommandRunner.create_succeeding_all(),
            dry_run=False,
        )
