"""Pick-and-open flow: read text, extract URLs, select one, open it."""

import logging

from tmux_urlview.core.context import UrlviewContext
from tmux_urlview.core.errors import InputError, OpenError, SelectionError
from tmux_urlview.core.url_extraction import extract_urls

logger = logging.getLogger(__name__)


def run_urlview(ctx: UrlviewContext) -> str | None:
    """Run one pick-and-open cycle.

    Each step depends on the previous one's output, so they run strictly in
    sequence.

    Returns:
        The URL that was opened, or None if nothing was found or the user cancelled

    Raises:
        InputError: If input could not be read
        SelectionError: If the selector failed
        OpenError: If the opener failed
    """
    try:
        text = ctx.input_source.read_input()
    except InputError as e:
        raise InputError(f"error reading input: {e}") from e

    urls = extract_urls(text)
    logger.debug("Found %d URL(s)", len(urls))
    if not urls:
        return None

    try:
        selected = ctx.selector.select(urls)
    except SelectionError as e:
        raise SelectionError(f"error selecting URL: {e}") from e

    if selected is None:
        logger.debug("Selection cancelled")
        return None

    try:
        ctx.opener.open_url(selected)
    except OpenError as e:
        raise OpenError(f"error opening URL: {e}") from e

    return selected
