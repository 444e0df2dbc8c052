"""Probe a single target URL over TCP and/or HTTP."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable

from apiconnector.cancel import CancelToken
from apiconnector.errors import CANCELLED_MESSAGE, ProbeCancelledError, RequestCreationError
from apiconnector.probes.http_probe import TRANSPORT_ERRORS, probe_http_status
from apiconnector.probes.net_probe import probe_tcp
from apiconnector.probes.url import dial_host, get_port, is_http_url, parse_url
from apiconnector.settings import DEFAULT_SETTINGS, ProbeSettings

logger = logging.getLogger(__name__)

Dialer = Callable[..., None]
Fetcher = Callable[..., int]


@dataclass(frozen=True, slots=True)
class ProbeResult:
    status: str
    latency: float
    error: str

    @property
    def ok(self) -> bool:
        return not self.error


def _status_for_code(code: int) -> str:
    if 200 <= code < 300:
        return "OK"
    return f"HTTP {code}"


def probe_target(
    url: str,
    token: CancelToken,
    *,
    settings: ProbeSettings = DEFAULT_SETTINGS,
    dial: Dialer = probe_tcp,
    fetch: Fetcher = probe_http_status,
) -> ProbeResult:
    """Check one URL and report status, latency and error text.

    Only invalid URLs, unreachable ports, transport failures and cancellation
    set `error`; an HTTP response outside 2xx is reported through `status`
    alone and still counts as reachable.
    """
    start = time.perf_counter()

    if token.cancelled:
        return ProbeResult(status="", latency=0.0, error=CANCELLED_MESSAGE)

    host = parse_url(url)
    if not host:
        return ProbeResult(status="ERROR", latency=0.0, error="Invalid URL")

    port = get_port(url)
    if port:
        address = dial_host(host, port)
        logger.debug("dialing %s:%s", address, port)
        try:
            dial(address, port, timeout_seconds=settings.timeout)
        except (OSError, ValueError) as exc:
            return ProbeResult(status="FAIL", latency=0.0, error=f"Port {port} unreachable: {exc}")

    if is_http_url(url):
        logger.debug("GET %s", url)
        try:
            code = fetch(
                url,
                token,
                timeout_seconds=settings.timeout,
                poll_interval=settings.poll_interval,
            )
        except RequestCreationError as exc:
            return ProbeResult(status="ERROR", latency=0.0, error=f"Request creation error: {exc}")
        except (ProbeCancelledError, ValueError, *TRANSPORT_ERRORS) as exc:
            return ProbeResult(status="FAIL", latency=0.0, error=f"HTTP error: {exc}")

        latency = time.perf_counter() - start
        logger.debug("GET %s -> %s", url, code)
        return ProbeResult(status=_status_for_code(code), latency=latency, error="")

    return ProbeResult(status="OK", latency=time.perf_counter() - start, error="")
