"""Socket transport to the KKStudioSocket peer."""

from .client import CommandTransport, ConnectionMode, ConnectionState, StudioSocketClient
from .errors import (
    ClientClosedError,
    ConnectionClosedError,
    ResponseDecodeError,
    TransportError,
    TransportFailure,
    TransportTimeout,
)

__all__ = [
    "ClientClosedError",
    "CommandTransport",
    "ConnectionClosedError",
    "ConnectionMode",
    "ConnectionState",
    "ResponseDecodeError",
    "StudioSocketClient",
    "TransportError",
    "TransportFailure",
    "TransportTimeout",
]
