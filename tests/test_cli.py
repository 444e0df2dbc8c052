from __future__ import annotations

import os
import signal
import time

import pytest

import apiconnector.cli as cli_mod
from apiconnector.prober import ProbeResult
from apiconnector.runner import run_connection_tests


def test_no_arguments_prints_usage_without_probing(monkeypatch, capsys) -> None:
    def fail(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise AssertionError("no probes expected")

    monkeypatch.setattr(cli_mod, "run_connection_tests", fail)

    rc = cli_mod.main(["--no-color"])

    assert rc == 1
    out = capsys.readouterr().out
    assert "apiconnector - API Connectivity Tester" in out
    assert "Usage: apiconnector <service1> <service2> ..." in out
    assert "Format: name=http://url[:port]" in out
    assert "API CONNECTIVITY TEST" not in out


def test_closed_port_reports_failure(capsys) -> None:
    rc = cli_mod.main(["--no-color", "--timeout", "2", "svc=http://127.0.0.1:1/"])

    assert rc == 1
    out = capsys.readouterr().out
    assert "=== API CONNECTIVITY TEST ===" in out
    assert f"{'svc':<20} FAIL (HTTP error: " in out
    assert "Summary: 0 OK, 1 FAIL" in out
    assert "Error: 1 connection failures" in out


def test_all_targets_ok_exits_zero(http_base_url: str, capsys) -> None:
    rc = cli_mod.main(
        [
            "--no-color",
            f"health={http_base_url}/health",
            f"missing={http_base_url}/missing",
        ]
    )

    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "=== API CONNECTIVITY TEST ==="
    assert lines[3].startswith(f"{'health':<20} OK (")
    assert lines[4].startswith(f"{'missing':<20} OK (")
    assert lines[-1] == "Summary: 2 OK, 0 FAIL"


def test_argument_without_equals_fails_as_invalid_url(capsys) -> None:
    rc = cli_mod.main(["--no-color", "justaname"])

    assert rc == 1
    out = capsys.readouterr().out
    assert f"{'':<20} FAIL (Invalid URL)" in out
    assert "Summary: 0 OK, 1 FAIL" in out


def test_settings_flow_from_flags(monkeypatch, capsys) -> None:
    seen = {}

    def fake_run(targets, token, *, console, settings):  # type: ignore[no-untyped-def]
        seen["names"] = [t.name for t in targets]
        seen["settings"] = settings
        return None

    monkeypatch.setattr(cli_mod, "run_connection_tests", fake_run)

    rc = cli_mod.main(["--no-color", "--timeout", "0.01", "a=http://a", "b=x=y"])

    assert rc == 0
    assert seen["names"] == ["a", "b"]
    assert seen["settings"].timeout == 0.1
    assert seen["settings"].color is False


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["--version"])
    assert excinfo.value.code == 0
    assert "apiconnector 1.0.0" in capsys.readouterr().out


def test_interrupt_cancels_remaining_targets(monkeypatch, capsys) -> None:
    before = signal.getsignal(signal.SIGINT)
    probed: list[str] = []

    def interrupting_probe(url, token, *, settings):  # type: ignore[no-untyped-def]
        probed.append(url)
        os.kill(os.getpid(), signal.SIGINT)
        deadline = time.monotonic() + 2.0
        while not token.cancelled and time.monotonic() < deadline:
            time.sleep(0.01)
        return ProbeResult(status="OK", latency=0.001, error="")

    def run_with_interrupt(targets, token, *, console, settings):  # type: ignore[no-untyped-def]
        return run_connection_tests(targets, token, console=console, settings=settings, probe=interrupting_probe)

    monkeypatch.setattr(cli_mod, "run_connection_tests", run_with_interrupt)

    rc = cli_mod.main(["--no-color", "first=http://one", "second=http://two"])

    assert rc == 1
    assert probed == ["http://one"]
    out = capsys.readouterr().out
    assert "Received shutdown signal, cancelling..." in out
    assert "Error: context cancelled" in out
    assert "Summary" not in out
    assert signal.getsignal(signal.SIGINT) == before
