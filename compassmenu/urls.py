"""URL helpers used by filters and page state providers."""

from __future__ import annotations
from typing import AbstractSet
from urllib.parse import urlsplit

from .config import OPENABLE_URL_SCHEMES


def is_openable_url(text: str, schemes: AbstractSet[str] = OPENABLE_URL_SCHEMES) -> bool:
    """True if text is an absolute URL with one of the allowed schemes.

    Surrounding whitespace is ignored; embedded whitespace is rejected.
    """
    candidate = text.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if scheme not in schemes:
        return False
    if scheme == "file":
        return bool(parts.path)
    return bool(parts.netloc)


def parent_url(url: str) -> str:
    """Parent URL in the path hierarchy.

    Examples:
        http://example.org/abc/def  -> http://example.org/abc/
        http://example.org/abc/def/ -> http://example.org/abc/
        http://example.org/         -> http://example.org/
        other-scheme:/abc/def       -> other-scheme:/abc/
    """
    last_slash = url.rfind("/")
    first_colon = url.find(":")

    if last_slash == len(url) - 1:
        last_slash = url.rfind("/", 0, len(url) - 1)

    # No slash, or only the "//" following the scheme
    if last_slash == -1 or last_slash == first_colon + 2:
        return url

    return url[:last_slash + 1]


def is_top_url(url: str) -> bool:
    """True if there is nothing above url in the path hierarchy."""
    return parent_url(url) == url
