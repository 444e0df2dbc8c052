"""Cooperative cancellation token and the process signal listener."""

from __future__ import annotations

import logging
import signal
import threading
from typing import Any, Callable, TypeVar

from apiconnector.errors import ProbeCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CancelToken:
    """One-shot cancellation flag shared by the runner and its probes."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()


def install_signal_listener(
    token: CancelToken,
    on_signal: Callable[[], None] | None = None,
    *,
    signals: tuple[signal.Signals, ...] = SHUTDOWN_SIGNALS,
) -> Callable[[], None]:
    """Cancel `token` on the first interrupt/termination signal.

    `on_signal` runs once, before the token is cancelled. Returns a callable
    that puts the previous handlers back.
    """

    def _handle(signum: int, frame: Any) -> None:  # noqa: ARG001
        if token.cancelled:
            return
        logger.info("received signal %s", signal.Signals(signum).name)
        if on_signal is not None:
            on_signal()
        token.cancel()

    previous = {sig: signal.signal(sig, _handle) for sig in signals}

    def restore() -> None:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    return restore


def call_with_cancel(
    token: CancelToken,
    func: Callable[..., T],
    *args: Any,
    poll_interval: float = 0.05,
    **kwargs: Any,
) -> T:
    """Run a blocking call on a worker thread, giving up when `token` is cancelled.

    The worker is a daemon thread; an abandoned call finishes (or times out)
    on its own and is responsible for releasing its resources.
    """
    if token.cancelled:
        raise ProbeCancelledError()

    done = threading.Event()
    outcome: dict[str, Any] = {}

    def _worker() -> None:
        try:
            outcome["result"] = func(*args, **kwargs)
        except BaseException as exc:  # re-raised in the caller thread
            outcome["error"] = exc
        finally:
            done.set()

    worker = threading.Thread(target=_worker, name="apiconnector-call", daemon=True)
    worker.start()

    interval = max(0.001, float(poll_interval))
    while not done.wait(interval):
        if token.cancelled:
            logger.debug("abandoning %s after cancellation", getattr(func, "__name__", func))
            raise ProbeCancelledError()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
