"""Shared plumbing for tool operations: send, classify the reply, render."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from studio_mcp.protocol import Command, decoder_for
from studio_mcp.protocol.responses import Response
from studio_mcp.transport import CommandTransport, TransportError

R = TypeVar("R", bound=Response)

logger = logging.getLogger("studio_mcp.tools")


def failure(action: str, reason: str) -> str:
    return f"❌ Failed to {action}: {reason}"


def vector(values: Sequence[float] | None, size: int, label: str) -> list[float] | None:
    """Validate an optional numeric vector argument of exactly ``size`` elements."""
    if values is None:
        return None
    items = [float(value) for value in values]
    if len(items) != size:
        raise ValueError(f"{label} must have exactly {size} values, got {len(items)}")
    return items


async def execute(
    transport: CommandTransport,
    command: Command,
    model: type[R],
    *,
    action: str,
    render: Callable[[R], str],
    expected_type: str = "success",
    timeout_ms: int | None = None,
) -> str:
    """Run one exchange and turn the outcome into a user-facing string.

    Transport faults and peer ``error`` replies both come back as a failure rendering;
    nothing raised by the transport escapes this function.
    """
    try:
        response = await transport.send(command, decoder_for(model), timeout_ms=timeout_ms)
    except TransportError as exc:
        logger.warning("operation_failed", extra={"action": action, "error": str(exc)})
        return failure(action, str(exc))

    if response.type == "error":
        logger.info("operation_rejected", extra={"action": action, "reason": response.message})
        return failure(action, response.message or "Unknown error")
    if response.type != expected_type:
        return failure(action, f"Unexpected response type: {response.type}")
    return render(response)
