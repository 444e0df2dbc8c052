"""Exception types for connectivity runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apiconnector.runner import RunSummary

CANCELLED_MESSAGE = "context cancelled"


class ApiConnectorError(RuntimeError):
    """Base error for apiconnector failures."""


class ProbeCancelledError(ApiConnectorError):
    """Raised when a cancellable call is interrupted by the cancel token."""

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)


class RunCancelledError(ApiConnectorError):
    """Raised when the runner stops before every target was probed."""

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)


class ConnectionFailuresError(ApiConnectorError):
    """Raised after a run in which at least one target failed."""

    def __init__(self, summary: RunSummary) -> None:
        super().__init__(f"{summary.failed} connection failures")
        self.summary = summary


class RequestCreationError(ApiConnectorError):
    """Raised when an HTTP request cannot be built for a target URL."""
