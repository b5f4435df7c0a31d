"""URL absolutisation against the configured wiki base URL."""

from __future__ import annotations

from urllib.parse import urlparse


def is_absolute(url: str) -> bool:
    """True for ``scheme://...`` URLs."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def is_root_relative(url: str) -> bool:
    return url.startswith("/")


def absolutize(url: str, base_url: str) -> str:
    """Resolve a root-relative *url* against *base_url*.

    - ``/w/Diamond``             -> ``{base_url}/w/Diamond`` (plain prefixing,
      so a base URL carrying a path keeps it)
    - ``//upload.host/a.png``    -> ``{base scheme}://upload.host/a.png``
    - anything else (absolute, fragment, relative, ``mailto:``) is returned
      untouched.
    """
    if not url or not base_url or not is_root_relative(url):
        return url
    if url.startswith("//"):
        scheme = urlparse(base_url).scheme or "https"
        return f"{scheme}:{url}"
    return base_url.rstrip("/") + url


def normalize_url(url: str | None, base_url: str) -> str:
    """Absolutise *url* when root-relative; empty input yields ``""``."""
    if not url:
        return ""
    url = url.strip()
    if is_absolute(url):
        return url
    return absolutize(url, base_url)


def extract_domain(url: str) -> str:
    """Return the netloc (host) component of a URL, lowercased."""
    try:
        return urlparse(url).netloc.lower()
    except ValueError:
        return ""


def is_external(url: str, base_url: str) -> bool:
    """True when *url* is an absolute http(s) URL on another host than *base_url*."""
    if not is_absolute(url):
        return False
    if urlparse(url).scheme not in ("http", "https"):
        return False
    return extract_domain(url) != extract_domain(base_url)
