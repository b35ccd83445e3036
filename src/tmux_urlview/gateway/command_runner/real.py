import logging
import shutil
import subprocess

from tmux_urlview.gateway.command_runner.abc import (
    CANNOT_EXECUTE_EXIT_CODE,
    COMMAND_NOT_FOUND_EXIT_CODE,
    CommandResult,
    CommandRunner,
)

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    def run(self, args: list[str], *, stdin_text: str | None) -> CommandResult:
        # LBYL: Check if command exists first
        if shutil.which(args[0]) is None:
            return CommandResult(
                returncode=COMMAND_NOT_FOUND_EXIT_CODE,
                stdout="",
                stderr=f"command not found: {args[0]}",
            )

        logger.debug("Running %s", args)
        # stderr is inherited so interactive programs like fzf can draw on the terminal
        try:
            result = subprocess.run(
                args,
                input=stdin_text,
                stdout=subprocess.PIPE,
                check=False,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            # e.g. exec format error or permission denied on a file that which() accepted
            logger.debug("Failed to start %s: %s", args[0], e)
            return CommandResult(returncode=CANNOT_EXECUTE_EXIT_CODE, stdout="", stderr=str(e))
        logger.debug("%s exited with %d", args[0], result.returncode)
        return CommandResult(returncode=result.returncode, stdout=result.stdout, stderr="")
