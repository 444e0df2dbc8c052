"""Host and port extraction for raw target URLs."""

from __future__ import annotations

import re

_HTTP_PREFIXES = ("http://", "https://")
_SCHEME_SEGMENTS = {"http", "https"}
_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_http_url(url: str) -> bool:
    return url.startswith(_HTTP_PREFIXES)


def parse_url(url: str) -> str:
    """Return the host part of `url` (scheme stripped, cut at the first `/`)."""
    host = url.removeprefix("http://").removeprefix("https://")
    return host.split("/", 1)[0]


def get_port(url: str) -> str:
    """Detect an explicit port by scanning colon-delimited segments.

    The first middle segment that is non-empty, is not a bare `http`/`https`
    and parses as an integer wins. The last segment is also considered when
    the URL has no `://` scheme separator (`host:8080`). Segments with a
    trailing path (`8080/health`) do not match.
    """
    parts = url.split(":")
    candidates = parts[1:] if "://" not in url else parts[1:-1]
    for part in candidates:
        if not part or part in _SCHEME_SEGMENTS:
            continue
        if _INT_RE.fullmatch(part):
            return part
    return ""


def dial_host(host: str, port: str) -> str:
    """Drop a `:port` suffix from `host` when it repeats the detected port."""
    suffix = f":{port}"
    if port and host.endswith(suffix):
        return host[: -len(suffix)]
    return host
