"""Failure kinds raised by the studio socket transport."""

from __future__ import annotations


class TransportError(RuntimeError):
    """Base class for every failure surfaced by :class:`StudioSocketClient`."""


class TransportTimeout(TransportError):
    """Raised when an exchange does not complete before its deadline."""

    def __init__(self, timeout_ms: int, command_type: str) -> None:
        super().__init__(f"Request timed out after {timeout_ms}ms ({command_type})")
        self.timeout_ms = timeout_ms
        self.command_type = command_type


class ConnectionClosedError(TransportError):
    """Raised when the peer closes the channel or answers with a non-text frame."""


class TransportFailure(TransportError):
    """Raised for any other socket-level fault, including a failed handshake."""


class ResponseDecodeError(TransportError):
    """Raised when a received message is not valid JSON of the expected shape."""


class ClientClosedError(TransportError):
    """Raised when a request is made on a client that has been shut down."""
