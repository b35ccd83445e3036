"""Extract http(s) URLs from captured terminal text.

This is the only piece of tmux-urlview with real logic; everything else is
plumbing around external programs. The extractor is a pure function: safe to
call repeatedly and from any thread.
"""

import re
from urllib.parse import urlsplit

# Scheme prefix is matched case-sensitively; \S is Unicode-aware for str patterns.
URL_PATTERN = re.compile(r"https?://\S+")

# Trailing characters trimmed from a match before validation.
TRAILING_STOP_CHARS = ".,;!?)(]}"

_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Unreserved and sub-delims plus the extra characters Go's net/url tolerates in
# a host; anything non-ASCII passes through.
_HOST = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:\[\]<>\"%\u0080-\U0010ffff]*")
_PORT = re.compile(r"[0-9]*")


def _split_host_port(netloc: str) -> tuple[str, str | None]:
    """Split the authority's host from its port, dropping any userinfo.

    The port is returned without its colon and is empty when absent. It is
    None when something other than a port follows a bracketed IP literal.
    """
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        end = hostinfo.find("]") + 1
        host, rest = hostinfo[:end], hostinfo[end:]
        if rest and not rest.startswith(":"):
            return host, None
        return host, rest[1:]
    host, sep, port = hostinfo.rpartition(":")
    if not sep:
        return hostinfo, ""
    return host, port


def is_valid_url(candidate: str) -> bool:
    """Check whether a cleaned candidate parses under the generic URL grammar.

    A bare scheme such as ``https://`` has no authority and is rejected. The
    query is not inspected: a raw ``%`` there is accepted.
    """
    if _CONTROL_CHARS.search(candidate) is not None:
        return False

    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False

    if parts.scheme not in ("http", "https") or parts.netloc == "":
        return False

    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_PERCENT_ESCAPE.search(component) is not None:
            return False

    host, port = _split_host_port(parts.netloc)
    if port is None or _PORT.fullmatch(port) is None:
        return False
    return _HOST.fullmatch(host) is not None


def extract_urls(text: str) -> list[str]:
    """Return unique, valid URLs found in text, in first-occurrence order.

    Args:
        text: Arbitrary captured text; may span many lines.

    Returns:
        List of URLs with trailing punctuation removed. Empty if none found.
    """
    urls: list[str] = []
    seen: set[str] = set()

    for match in URL_PATTERN.finditer(text):
        cleaned = match.group(0).rstrip(TRAILING_STOP_CHARS)
        if cleaned in seen:
            continue
        if not is_valid_url(cleaned):
            continue
        seen.add(cleaned)
        urls.append(cleaned)

    return urls
