"""Viewport capture; returns the decoded image alongside a text summary."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass

from studio_mcp.protocol import ScreenshotCommand, ScreenshotResponse, decoder_for
from studio_mcp.tools.base import failure
from studio_mcp.tools.formatting import format_screenshot
from studio_mcp.transport import CommandTransport, TransportError

logger = logging.getLogger("studio_mcp.tools")

ACTION = "take screenshot"


@dataclass(slots=True)
class ScreenshotResult:
    """Rendered outcome of a capture; ``image`` is None whenever it failed."""

    summary: str
    image: bytes | None = None
    format: str = "png"

    @property
    def ok(self) -> bool:
        return self.image is not None


async def screenshot(
    transport: CommandTransport,
    width: int | None = None,
    height: int | None = None,
    transparency: bool | None = None,
    mark: bool | None = None,
    timeout_ms: int | None = None,
) -> ScreenshotResult:
    command = ScreenshotCommand(width=width, height=height, transparency=transparency, mark=mark)
    try:
        response = await transport.send(command, decoder_for(ScreenshotResponse), timeout_ms=timeout_ms)
    except TransportError as exc:
        logger.warning("operation_failed", extra={"action": ACTION, "error": str(exc)})
        return ScreenshotResult(summary=failure(ACTION, str(exc)))

    if response.type != "success":
        return ScreenshotResult(summary=failure(ACTION, response.message or "Unknown error"))
    if response.data is None:
        return ScreenshotResult(summary=f"✅ Screenshot taken successfully! {response.message}")

    try:
        image = base64.b64decode(response.data.image, validate=True)
    except (binascii.Error, ValueError) as exc:
        return ScreenshotResult(summary=failure(ACTION, f"invalid base64 image data ({exc})"))

    return ScreenshotResult(
        summary=format_screenshot(response.data),
        image=image,
        format=response.data.format.lower() or "png",
    )
