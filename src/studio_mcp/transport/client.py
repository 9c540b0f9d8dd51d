"""WebSocket client for the KKStudioSocket command channel.

One :class:`StudioSocketClient` owns at most one connection. Every exchange (connect if
needed, send one text message, wait for one text message) runs under a single
``asyncio.Lock`` and a single deadline, so frames from two commands never interleave.
Any fault tears the connection down; the next request starts a fresh handshake.
"""

from __future__ import annotations

import asyncio
import logging
import time
from enum import Enum
from typing import Callable, Protocol, TypeVar

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed, WebSocketException
from websockets.protocol import State

from studio_mcp.protocol import Command
from studio_mcp.transport.errors import (
    ClientClosedError,
    ConnectionClosedError,
    ResponseDecodeError,
    TransportError,
    TransportFailure,
    TransportTimeout,
)
from studio_mcp.transport.redaction import redact_image_payload

T = TypeVar("T")

DEFAULT_TIMEOUT_MS = 5_000


class ConnectionState(str, Enum):
    """Lifecycle states of the client's single connection."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"


class ConnectionMode(str, Enum):
    """How connections are reused between exchanges."""

    PERSISTENT = "persistent"
    PER_REQUEST = "per_request"


class CommandTransport(Protocol):
    """Send one command and return the decoded reply."""

    async def send(self, command: Command, decode: Callable[[str], T], *, timeout_ms: int | None = None) -> T:
        """Run one exchange with the peer."""


class StudioSocketClient:
    """Lock-serialized request/response client for one peer address."""

    def __init__(
        self,
        uri: str,
        *,
        mode: ConnectionMode | str = ConnectionMode.PERSISTENT,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
        close_timeout_seconds: float = 2.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._uri = uri
        self._mode = ConnectionMode(mode)
        self._default_timeout_ms = default_timeout_ms
        self._close_timeout_seconds = close_timeout_seconds
        self._logger = logger or logging.getLogger("studio_mcp.transport")

        self._lock = asyncio.Lock()
        self._ws: ClientConnection | None = None
        self._state = ConnectionState.DISCONNECTED
        self._closed = False

    @classmethod
    def from_settings(cls, settings) -> StudioSocketClient:
        return cls(
            settings.socket_url,
            mode=settings.connection_mode,
            default_timeout_ms=settings.request_timeout_ms,
            close_timeout_seconds=settings.close_timeout_seconds,
        )

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def mode(self) -> ConnectionMode:
        return self._mode

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> StudioSocketClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def send(self, command: Command, decode: Callable[[str], T], *, timeout_ms: int | None = None) -> T:
        """Send ``command`` and return ``decode`` applied to the peer's reply.

        Raises a :class:`TransportError` subclass on timeout, peer close, socket fault
        or an undecodable reply. The connection is discarded in every one of those cases.
        """
        if timeout_ms is None:
            timeout_ms = self._default_timeout_ms

        async with self._lock:
            if self._closed:
                raise ClientClosedError("Studio socket client has been closed")

            started = time.monotonic()
            try:
                raw = await asyncio.wait_for(self._exchange(command), timeout=timeout_ms / 1000)
            except asyncio.TimeoutError as exc:
                self._abort()
                self._logger.error(
                    "request_timeout",
                    extra={"command_type": command.type, "timeout_ms": timeout_ms},
                )
                raise TransportTimeout(timeout_ms, command.type) from exc
            except asyncio.CancelledError:
                self._abort()
                self._logger.warning("request_cancelled", extra={"command_type": command.type})
                raise
            except ConnectionClosed as exc:
                self._abort()
                self._logger.error("connection_closed", extra={"command_type": command.type, "reason": str(exc)})
                raise ConnectionClosedError(f"Connection closed by peer: {exc}") from exc
            except TransportError:
                self._abort()
                self._logger.exception("request_failed", extra={"command_type": command.type})
                raise
            except (OSError, WebSocketException) as exc:
                self._abort()
                self._logger.exception("request_failed", extra={"command_type": command.type})
                raise TransportFailure(f"{type(exc).__name__}: {exc}") from exc

            try:
                response = decode(raw)
            except ValueError as exc:
                await self._close_connection()
                self._logger.error(
                    "response_decode_failed",
                    extra={"command_type": command.type, "error": str(exc)},
                )
                raise ResponseDecodeError(f"Unexpected response to {command.type}: {exc}") from exc

            if self._mode is ConnectionMode.PER_REQUEST:
                await self._close_connection()

            self._logger.debug(
                "request_completed",
                extra={"command_type": command.type, "elapsed_ms": int((time.monotonic() - started) * 1000)},
            )
            return response

    async def aclose(self) -> None:
        """Close the connection and refuse further requests."""
        async with self._lock:
            self._closed = True
            await self._close_connection()

    async def _exchange(self, command: Command) -> str:
        ws = await self._ensure_connection()

        payload = command.to_wire()
        self._logger.info("command_sent: %s", payload, extra={"command_type": command.type})
        await ws.send(payload)

        message = await ws.recv()
        if not isinstance(message, str):
            raise ConnectionClosedError(f"Unexpected binary frame ({len(message)} bytes) from peer")

        if command.carries_image:
            self._logger.info("response_received: %s", redact_image_payload(message))
        else:
            self._logger.info("response_received: %s", message)
        return message

    async def _ensure_connection(self) -> ClientConnection:
        if self._ws is not None and self._ws.state is State.OPEN:
            return self._ws

        self._abort()
        self._state = ConnectionState.CONNECTING
        try:
            self._ws = await connect(
                self._uri,
                open_timeout=None,
                close_timeout=self._close_timeout_seconds,
                max_size=None,
            )
        except Exception:
            self._state = ConnectionState.DISCONNECTED
            self._logger.error("connect_failed", extra={"uri": self._uri})
            raise

        self._state = ConnectionState.OPEN
        self._logger.info("connected", extra={"uri": self._uri, "mode": self._mode.value})
        return self._ws

    def _abort(self) -> None:
        ws, self._ws = self._ws, None
        self._state = ConnectionState.DISCONNECTED
        if ws is None:
            return
        try:
            ws.transport.abort()
        except Exception:  # noqa: BLE001 - the socket is being discarded either way.
            self._logger.debug("abort_failed", exc_info=True)

    async def _close_connection(self) -> None:
        ws, self._ws = self._ws, None
        if ws is None:
            self._state = ConnectionState.DISCONNECTED
            return

        self._state = ConnectionState.CLOSING
        try:
            await ws.close()
        except Exception:  # noqa: BLE001 - teardown only needs to release the socket.
            self._logger.debug("close_failed", exc_info=True)
        finally:
            self._state = ConnectionState.DISCONNECTED
