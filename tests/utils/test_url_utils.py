import pytest

from mapcrawl.utils.url_utils import has_host, normalize_address


@pytest.mark.parametrize("raw, expected", [
    ("https://example.com/", "https://example.com"),
    ("https://example.com/a/", "https://example.com/a"),
    ("https://example.com/a#frag", "https://example.com/a"),
    ("https://example.com/a/#frag", "https://example.com/a"),
    ("https://example.com/a?q=1", "https://example.com/a?q=1"),
    (" https://example.com/a ", "https://example.com/a"),
    ("https://example.com/a//", "https://example.com/a/"),
    ("https://example.com//#top", "https://example.com/"),
])
def test_normalize_address(raw, expected):
    assert normalize_address(raw) == expected


@pytest.mark.parametrize("url, expected", [
    ("https://example.com", True),
    ("http://example.com:8080/x", True),
    ("example.com", False),
    ("/path", False),
    ("mailto:a@example.com", False),
    ("ftp://example.com", False),
    ("http://[::1", False),
])
def test_has_host(url, expected):
    assert has_host(url) is expected
