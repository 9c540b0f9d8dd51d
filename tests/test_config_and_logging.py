from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from studio_mcp.config import DEFAULT_SOCKET_URL, Settings
from studio_mcp.telemetry import configure_logging, log_file_path
from studio_mcp.transport import ConnectionMode, StudioSocketClient


def _clear_env(monkeypatch) -> None:
    for name in ("KKSTUDIOSOCKET_URL", "STUDIO_MCP_SOCKET_URL", "STUDIO_MCP_REQUEST_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)

    config = Settings(_env_file=None)

    assert config.socket_url == DEFAULT_SOCKET_URL == "ws://127.0.0.1:8765/ws"
    assert config.request_timeout_ms == 5000
    assert config.connection_mode == "persistent"
    assert config.log_dir is None


def test_settings_read_peer_address_from_environment(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("KKSTUDIOSOCKET_URL", "ws://10.0.0.5:9000/ws")
    monkeypatch.setenv("STUDIO_MCP_REQUEST_TIMEOUT_MS", "2500")

    config = Settings(_env_file=None)

    assert config.socket_url == "ws://10.0.0.5:9000/ws"
    assert config.request_timeout_ms == 2500


def test_client_from_settings(monkeypatch) -> None:
    _clear_env(monkeypatch)
    config = Settings(_env_file=None, socket_url="ws://studio:8765/ws", connection_mode="per_request")

    client = StudioSocketClient.from_settings(config)

    assert client.uri == "ws://studio:8765/ws"
    assert client.mode is ConnectionMode.PER_REQUEST


def test_log_file_is_named_per_day(tmp_path: Path) -> None:
    assert log_file_path(tmp_path, datetime(2026, 3, 9)) == tmp_path / "studio-mcp-20260309.log"


def test_configure_logging_writes_to_daily_file(tmp_path: Path) -> None:
    logger = logging.getLogger("studio_mcp")
    try:
        path = configure_logging("DEBUG", tmp_path / "logs")
        logging.getLogger("studio_mcp.transport").info("connected")
        for handler in logger.handlers:
            handler.flush()

        assert path is not None
        assert path.parent == tmp_path / "logs"
        assert "| INFO | studio_mcp.transport | connected" in path.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
