from urllib.parse import urldefrag, urlparse


def normalize_address(url: str) -> str:
    """Drop the fragment and one trailing slash so equal pages share one key."""
    without_fragment, _ = urldefrag(url.strip())
    return without_fragment.removesuffix("/")


def has_host(url: str) -> bool:
    """Return True for absolute http(s) URLs with a host component."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
