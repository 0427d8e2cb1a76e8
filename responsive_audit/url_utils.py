"""Shared URL utilities — read URL lists and derive filesystem-safe slugs."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import quote, urlparse

from responsive_audit.errors import UrlListError

MAX_SLUG_LENGTH = 100
EMPTY_SLUG = "page"
INVALID_URL_SLUG = "invalid-url"

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_HOST_SCHEMES = ("http", "https")


def slug_from_url(url: str) -> str:
    """Derive a stable directory name from host + path.

    Hosts are taken in their ASCII (IDNA) form and non-ASCII path bytes are
    percent-encoded first, so pages with non-Latin paths keep distinct slugs.
    Distinct URLs may still map to the same slug (query strings and fragments
    are ignored, punctuation is folded); callers share the directory in that case.
    """
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except (ValueError, TypeError, AttributeError):
        return INVALID_URL_SLUG
    if not parsed.scheme or any(c.isspace() for c in parsed.netloc):
        return INVALID_URL_SLUG
    if parsed.scheme in _HOST_SCHEMES and not hostname:
        return INVALID_URL_SLUG

    try:
        host = hostname.encode("idna").decode("ascii") if hostname else ""
    except UnicodeError:
        return INVALID_URL_SLUG
    path = quote(parsed.path, safe="/%")

    slug = _NON_ALNUM.sub("-", host + path).strip("-")
    return slug[:MAX_SLUG_LENGTH] or EMPTY_SLUG


def parse_url_list(content: str) -> list[str]:
    """Split newline-delimited URLs, dropping blank and ``#`` comment lines."""
    urls = []
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def read_url_list(path: str | Path) -> list[str]:
    """Read a URL list file."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UrlListError(f"Failed to read URLs file {path}: {e}") from e
    return parse_url_list(content)
