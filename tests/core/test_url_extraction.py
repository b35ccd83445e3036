"""Tests for URL extraction from captured terminal text."""

import pytest

from tmux_urlview.core.url_extraction import extract_urls, is_valid_url


def test_no_urls_returns_empty_list() -> None:
    """Plain text without a scheme yields nothing."""
    assert extract_urls("This is just plain text with no URLs") == []


def test_empty_text_returns_empty_list() -> None:
    assert extract_urls("") == []


def test_single_https_url() -> None:
    assert extract_urls("Check out https://example.com for more info") == ["https://example.com"]


def test_url_with_path_and_query_is_kept_whole() -> None:
    text = "Visit https://secure.example.com/path?param=value"
    assert extract_urls(text) == ["https://secure.example.com/path?param=value"]


def test_multiple_urls_keep_input_order() -> None:
    text = "See https://example.com and http://test.org"
    assert extract_urls(text) == ["https://example.com", "http://test.org"]


def test_trailing_punctuation_is_stripped() -> None:
    """Sentence punctuation after a URL is not part of it."""
    text = "Visit https://example.com. Also check https://test.org!"
    assert extract_urls(text) == ["https://example.com", "https://test.org"]


def test_repeated_mixed_trailing_characters_are_all_stripped() -> None:
    text = "(see https://example.com/a).]}!? and [https://example.org]"
    assert extract_urls(text) == ["https://example.com/a", "https://example.org"]


def test_inner_punctuation_is_kept() -> None:
    """Only trailing stop characters are trimmed."""
    text = "https://en.wikipedia.org/wiki/Foo_(bar)_baz,qux"
    assert extract_urls(text) == ["https://en.wikipedia.org/wiki/Foo_(bar)_baz,qux"]


def test_duplicate_urls_are_collapsed() -> None:
    text = "https://example.com and https://example.com again"
    assert extract_urls(text) == ["https://example.com"]


def test_duplicates_keep_first_occurrence_position() -> None:
    text = "https://a.example https://b.example https://a.example. https://c.example"
    assert extract_urls(text) == ["https://a.example", "https://b.example", "https://c.example"]


def test_url_in_multiline_text() -> None:
    assert extract_urls("Line 1\nhttps://example.com\nLine 3") == ["https://example.com"]


def test_bare_scheme_is_discarded() -> None:
    text = "Valid: https://example.com Invalid: https://"
    assert extract_urls(text) == ["https://example.com"]


def test_scheme_reduced_to_nothing_by_stripping_is_discarded() -> None:
    assert extract_urls("weird https://).") == []


def test_uppercase_scheme_is_not_matched() -> None:
    assert extract_urls("HTTPS://EXAMPLE.COM and Http://example.org") == []


def test_other_schemes_are_ignored() -> None:
    assert extract_urls("ftp://example.com mailto:me@example.com") == []


def test_url_followed_by_tab_and_unicode_whitespace() -> None:
    text = "https://example.com\tnext https://example.org\u00a0after"
    assert extract_urls(text) == ["https://example.com", "https://example.org"]


def test_non_ascii_url_is_kept() -> None:
    assert extract_urls("docs: https://例え.jp/パス") == ["https://例え.jp/パス"]


def test_invalid_port_is_discarded() -> None:
    assert extract_urls("https://example.com:notaport/ https://example.org:8080/x") == [
        "https://example.org:8080/x"
    ]


def test_unbalanced_ipv6_bracket_is_discarded() -> None:
    assert extract_urls("http://[::1/path") == []


def test_reextracting_joined_output_is_stable() -> None:
    text = "a https://example.com, b (http://test.org/x?y=1) c https://example.com"
    first = extract_urls(text)
    assert extract_urls("\n".join(first)) == first


@pytest.mark.parametrize(
    "candidate",
    [
        "https://",
        "http://",
        "https:///path",
        "https://example.com/%zz",
        "https://example.com/\x1b[0m",
        "https://example.com#50%",
        "https://example.com:8o80/",
        "http://[::1]x/",
    ],
)
def test_is_valid_url_rejects_malformed(candidate: str) -> None:
    assert is_valid_url(candidate) is False


@pytest.mark.parametrize(
    "candidate",
    [
        "https://example.com",
        "http://localhost:8000/a/b?c=d#frag",
        "https://user:pw@example.com/%20x",
        "http://[::1]:8080/",
        "https://example.com:99999",
        "https://example.com:/",
        "https://shop.example/sale?off=50%",
        "https://sub_domain.example~1/",
    ],
)
def test_is_valid_url_accepts_well_formed(candidate: str) -> None:
    assert is_valid_url(candidate) is True


def test_raw_percent_in_query_is_kept() -> None:
    """Query strings are not checked for percent-encoding."""
    text = "see https://shop.example/sale?off=50% now"
    assert extract_urls(text) == ["https://shop.example/sale?off=50%"]


def test_bad_percent_escape_in_path_or_fragment_is_discarded() -> None:
    text = "https://a.example/50%off https://b.example/#100% https://c.example/ok"
    assert extract_urls(text) == ["https://c.example/ok"]


@pytest.mark.parametrize(
    "host",
    ["a|b.example", "ex{a}.com", "exa`mple.com", "exa^mple.com", "a\\b.example"],
)
def test_invalid_host_characters_are_discarded(host: str) -> None:
    assert extract_urls(f"open https://{host}/page now") == []


def test_non_ascii_host_is_kept() -> None:
    assert extract_urls("https://bücher.example/") == ["https://bücher.example/"]
