"""TCP reachability probe."""

from __future__ import annotations

import socket
from typing import Any, Callable

Connector = Callable[..., Any]


def probe_tcp(
    host: str,
    port: str | int,
    *,
    timeout_seconds: float = 5.0,
    connect: Connector = socket.create_connection,
) -> None:
    """Open and immediately close a TCP connection to `host:port`.

    Raises `OSError` (including `TimeoutError`) when the port is unreachable
    and `ValueError` when `port` is out of range.
    """
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"port out of range: {port_number}")
    conn = connect((host, port_number), timeout=timeout_seconds)
    conn.close()
