"""Single non-redirecting HTTP GET probe."""

from __future__ import annotations

from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import HTTPRedirectHandler, Request, build_opener

from apiconnector.cancel import CancelToken, call_with_cancel
from apiconnector.errors import RequestCreationError

TRANSPORT_ERRORS = (URLError, HTTPException, OSError)


class _NoRedirectHandler(HTTPRedirectHandler):
    """Hand 3xx responses back to the caller instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):  # type: ignore[no-untyped-def]
        return None


def urlopen(req: Request, timeout: float):  # type: ignore[no-untyped-def]
    # Built per call so proxy environment variables are read at request time.
    opener = build_opener(_NoRedirectHandler)
    return opener.open(req, timeout=timeout)  # noqa: S310 - operator-supplied targets


def build_request(url: str) -> Request:
    """Build the GET request; raises `ValueError` for URLs urllib rejects."""
    return Request(url=url, method="GET")


def _fetch_status(req: Request, timeout_seconds: float) -> int:
    try:
        with urlopen(req, timeout=timeout_seconds) as resp:
            return int(getattr(resp, "status", 0) or 0)
    except HTTPError as exc:
        # Non-2xx (and unfollowed 3xx) responses still carry a status code.
        exc.close()
        return int(exc.code)


def probe_http_status(
    url: str,
    token: CancelToken,
    *,
    timeout_seconds: float = 5.0,
    poll_interval: float = 0.05,
) -> int:
    """Issue one GET to `url` and return the response status code.

    Raises `RequestCreationError` when the request cannot be built, one of
    `TRANSPORT_ERRORS` or a `ValueError` from urllib on network failure, and
    `ProbeCancelledError` when `token` is cancelled before the response arrives.
    """
    try:
        req = build_request(url)
    except ValueError as exc:
        raise RequestCreationError(str(exc)) from exc
    return call_with_cancel(
        token,
        _fetch_status,
        req,
        timeout_seconds,
        poll_interval=poll_interval,
    )
