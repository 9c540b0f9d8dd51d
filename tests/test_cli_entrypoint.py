from __future__ import annotations

import importlib
import socket

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("studio_mcp.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_start_prints_configuration() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from studio_mcp.main import app

    result = typer_testing.CliRunner().invoke(app, ["start"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "socket_url" in result.stdout


def test_ping_exits_nonzero_when_peer_is_unreachable(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from studio_mcp import main

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    monkeypatch.setattr(main.settings, "socket_url", f"ws://127.0.0.1:{port}/ws")
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)

    result = typer_testing.CliRunner().invoke(main.app, ["ping", "--message", "hi"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Failed to ping" in result.stdout
