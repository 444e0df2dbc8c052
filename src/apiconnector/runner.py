"""Sequential connectivity run over parsed targets."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Sequence

from rich.console import Console
from rich.text import Text

from apiconnector.cancel import CancelToken
from apiconnector.errors import ConnectionFailuresError, RunCancelledError
from apiconnector.prober import ProbeResult, probe_target
from apiconnector.settings import DEFAULT_SETTINGS, ProbeSettings
from apiconnector.target import Target

logger = logging.getLogger(__name__)

NAME_WIDTH = 20

Prober = Callable[..., ProbeResult]


@dataclass(frozen=True, slots=True)
class RunSummary:
    ok: int
    failed: int

    def to_text(self) -> str:
        return f"Summary: {self.ok} OK, {self.failed} FAIL"


def make_console(*, color: bool = True) -> Console:
    """Console for report output; plain text when color is off or stdout is not a tty."""
    return Console(highlight=False, emoji=False, soft_wrap=True, no_color=not color)


def format_duration(seconds: float) -> str:
    micros = int(seconds * 1_000_000)
    if micros < 1000:
        return f"{micros}µs"
    return f"{micros // 1000}ms"


def format_target_line(target: Target) -> Text:
    if target.ok:
        token, style, detail = "OK", "green", format_duration(target.latency)
    else:
        token, style, detail = "FAIL", "red", target.error
    return Text.assemble(f"{target.name:<{NAME_WIDTH}} ", (token, style), f" ({detail})")


def run_connection_tests(
    targets: Sequence[Target],
    token: CancelToken,
    *,
    console: Console | None = None,
    settings: ProbeSettings = DEFAULT_SETTINGS,
    probe: Prober = probe_target,
) -> RunSummary:
    """Probe `targets` in order, print one line each and a summary.

    Raises `RunCancelledError` as soon as the token is cancelled between
    targets and `ConnectionFailuresError` when any target failed.
    """
    out = console if console is not None else make_console(color=settings.color)
    success = 0
    failure = 0

    for target in targets:
        if token.cancelled:
            logger.debug("run cancelled after %d of %d targets", success + failure, len(targets))
            raise RunCancelledError()

        result = probe(target.url, token, settings=settings)
        target.status = result.status
        target.latency = result.latency
        target.error = result.error
        logger.debug("%s status=%r error=%r", target.name, target.status, target.error)

        if target.ok:
            success += 1
        else:
            failure += 1
        out.print(format_target_line(target))

    summary = RunSummary(ok=success, failed=failure)
    out.print()
    out.print(summary.to_text())

    if summary.failed > 0:
        raise ConnectionFailuresError(summary)
    return summary
