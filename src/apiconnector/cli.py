"""CLI entrypoint for apiconnector."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.text import Text

from apiconnector.cancel import CancelToken, install_signal_listener
from apiconnector.errors import ConnectionFailuresError, RunCancelledError
from apiconnector.runner import make_console, run_connection_tests
from apiconnector.settings import DEFAULT_TIMEOUT_SECONDS, settings_from_args
from apiconnector.target import parse_target_args

__version__ = "1.0.0"

HEADER = "=== API CONNECTIVITY TEST ==="
SHUTDOWN_MESSAGE = "Received shutdown signal, cancelling..."

USAGE_LINES = (
    "",
    "Usage: apiconnector <service1> <service2> ...",
    "Format: name=http://url[:port]",
    "",
    "Examples:",
    "  apiconnector api=http://localhost:8080/health",
    "  apiconnector db=postgres://localhost:5432",
)


def print_usage(console: Console) -> None:
    console.print(Text("apiconnector - API Connectivity Tester", style="cyan"))
    for line in USAGE_LINES:
        console.print(Text(line))


def _print_shutdown() -> None:
    print(f"\n{SHUTDOWN_MESSAGE}", flush=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apiconnector",
        description="Check that named services answer on TCP and/or HTTP",
    )
    parser.add_argument(
        "services",
        nargs="*",
        metavar="NAME=URL",
        help="Service to probe, e.g. api=http://localhost:8080/health",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="TCP dial and HTTP GET timeout in seconds",
    )
    parser.add_argument("--no-color", action="store_true", dest="no_color", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe steps to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(args)
    console = make_console(color=settings.color)

    if not args.services:
        print_usage(console)
        return 1

    _configure_logging(settings.verbose)

    token = CancelToken()
    restore_signals = install_signal_listener(token, _print_shutdown)
    try:
        console.print()
        console.print(Text(HEADER, style="cyan"))
        console.print()
        targets = parse_target_args(list(args.services))
        run_connection_tests(targets, token, console=console, settings=settings)
    except (ConnectionFailuresError, RunCancelledError) as exc:
        console.print(Text(f"Error: {exc}"))
        return 1
    finally:
        restore_signals()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
