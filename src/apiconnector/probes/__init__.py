"""Network probe helpers."""

from .http_probe import probe_http_status
from .net_probe import probe_tcp
from .url import dial_host, get_port, is_http_url, parse_url

__all__ = [
    "dial_host",
    "get_port",
    "is_http_url",
    "parse_url",
    "probe_http_status",
    "probe_tcp",
]
