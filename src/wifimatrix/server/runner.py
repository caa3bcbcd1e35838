"""Server startup: bind, announce, serve.

The listening socket is bound before uvicorn starts, so a port that is
already taken surfaces as BindFailure before the banner is printed.
"""

from __future__ import annotations

import logging
import socket
import sys
from pathlib import Path

import uvicorn

from wifimatrix.server.app import create_app
from wifimatrix.server.network import resolve_local_ipv4

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

BANNER_RULE = "=" * 50


class BindFailure(Exception):
    """Raised when the OS refuses to bind or listen on the address."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Cannot listen on {host}:{port}: {reason}")


def bind_socket(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> socket.socket:
    """Bind and listen on a TCP socket.

    Raises:
        BindFailure: If the port is in use, not permitted, or the
            address is invalid.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        if sys.platform != "win32":
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise BindFailure(host, port, e.strerror or str(e)) from e
    return sock


def format_banner(port: int, lan_address: str) -> str:
    """Build the startup banner with the local and LAN URLs."""
    return "\n".join([
        "",
        BANNER_RULE,
        "Matrix control panel is running!",
        "-" * len(BANNER_RULE),
        f"Local:   http://localhost:{port}",
        f"Network: http://{lan_address}:{port}",
        BANNER_RULE,
        "",
    ])


def start(
    port: int = DEFAULT_PORT,
    bind_address: str = DEFAULT_HOST,
    asset_root: Path | str | None = None,
    log_level: str = "info",
) -> None:
    """Serve the control panel until interrupted.

    Raises:
        BindFailure: If the listening socket cannot be bound. No retry
            is attempted.
    """
    app = create_app(asset_root)
    sock = bind_socket(bind_address, port)
    logger.info("Listening on %s:%d", bind_address, port)

    print(format_banner(port, resolve_local_ipv4()))

    config = uvicorn.Config(app, host=bind_address, port=port, log_level=log_level.lower())
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Server stopped")
