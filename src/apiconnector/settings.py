"""Run settings for connectivity probes."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_POLL_INTERVAL_SECONDS = 0.05
_MIN_TIMEOUT_SECONDS = 0.1


@dataclass(frozen=True, slots=True)
class ProbeSettings:
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    color: bool = True
    verbose: bool = False
    # How often a blocked HTTP GET checks the cancel token.
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS


DEFAULT_SETTINGS = ProbeSettings()


def settings_from_args(args: argparse.Namespace) -> ProbeSettings:
    """Build settings from parsed CLI flags."""
    timeout = getattr(args, "timeout", None)
    if timeout is None:
        timeout = DEFAULT_TIMEOUT_SECONDS
    return ProbeSettings(
        timeout=max(_MIN_TIMEOUT_SECONDS, float(timeout)),
        color=not bool(getattr(args, "no_color", False)),
        verbose=bool(getattr(args, "verbose", False)),
    )
