"""Tests for server startup: binding, banner, and the serve call."""

from __future__ import annotations

import socket
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from wifimatrix.server.runner import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    BindFailure,
    bind_socket,
    format_banner,
    start,
)


class TestBindSocket:
    def test_binds_ephemeral_port(self) -> None:
        sock = bind_socket("127.0.0.1", 0)
        try:
            host, port = sock.getsockname()
            assert host == "127.0.0.1"
            assert port > 0
        finally:
            sock.close()

    def test_second_bind_fails(self) -> None:
        first = bind_socket("127.0.0.1", 0)
        port = first.getsockname()[1]
        try:
            with pytest.raises(BindFailure) as excinfo:
                bind_socket("127.0.0.1", port)
            assert excinfo.value.port == port
            assert excinfo.value.host == "127.0.0.1"
            assert isinstance(excinfo.value.__cause__, OSError)
        finally:
            first.close()

    def test_port_free_again_after_close(self) -> None:
        first = bind_socket("127.0.0.1", 0)
        port = first.getsockname()[1]
        first.close()
        second = bind_socket("127.0.0.1", port)
        second.close()

    def test_invalid_address(self) -> None:
        with pytest.raises(BindFailure):
            bind_socket("256.1.1.1", 0)


class TestFormatBanner:
    def test_contains_both_urls(self) -> None:
        banner = format_banner(3000, "192.168.1.42")
        assert "http://localhost:3000" in banner
        assert "http://192.168.1.42:3000" in banner
        assert "running" in banner

    def test_loopback_fallback(self) -> None:
        banner = format_banner(8080, "127.0.0.1")
        assert "http://127.0.0.1:8080" in banner


class TestStart:
    def test_defaults(self) -> None:
        assert DEFAULT_PORT == 3000
        assert DEFAULT_HOST == "0.0.0.0"

    def test_serves_on_bound_socket(
        self, asset_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        server = MagicMock()
        with patch("wifimatrix.server.runner.uvicorn.Server", return_value=server), \
                patch("wifimatrix.server.runner.resolve_local_ipv4", return_value="10.1.2.3"):
            start(port=0, bind_address="127.0.0.1", asset_root=asset_root)

        server.run.assert_called_once()
        sockets = server.run.call_args.kwargs["sockets"]
        assert len(sockets) == 1
        assert isinstance(sockets[0], socket.socket)
        # Closed once serving returns
        assert sockets[0].fileno() == -1

        out = capsys.readouterr().out
        assert "http://localhost:0" in out
        assert "http://10.1.2.3:0" in out

    def test_bind_failure_is_fatal(
        self, asset_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        taken = bind_socket("127.0.0.1", 0)
        port = taken.getsockname()[1]
        try:
            with patch("wifimatrix.server.runner.uvicorn.Server") as server_cls:
                with pytest.raises(BindFailure):
                    start(port=port, bind_address="127.0.0.1", asset_root=asset_root)
            server_cls.assert_not_called()
            assert "localhost" not in capsys.readouterr().out
        finally:
            taken.close()

    def test_missing_asset_root(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            start(port=0, bind_address="127.0.0.1", asset_root=tmp_path / "gone")

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_accepts_every_configured_level(self, asset_root: Path, level: str) -> None:
        with patch("wifimatrix.server.runner.uvicorn.Server") as server_cls, \
                patch("wifimatrix.server.runner.resolve_local_ipv4", return_value="10.1.2.3"):
            start(port=0, bind_address="127.0.0.1", asset_root=asset_root, log_level=level)
        config = server_cls.call_args.args[0]
        assert config.log_level == level.lower()
