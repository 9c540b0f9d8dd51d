"""Viewport camera control."""

from __future__ import annotations

from typing import Sequence

from studio_mcp.protocol import CameraCommand, CameraViewResponse, SuccessResponse
from studio_mcp.tools.base import execute, failure, vector
from studio_mcp.tools.formatting import format_camera_view
from studio_mcp.transport import CommandTransport


async def camera_setview(
    transport: CommandTransport,
    position: Sequence[float] | None = None,
    rotation: Sequence[float] | None = None,
    fov: float | None = None,
) -> str:
    action = "set camera view"
    try:
        command = CameraCommand(
            command="setview",
            pos=vector(position, 3, "position"),
            rot=vector(rotation, 3, "rotation"),
            fov=fov,
        )
    except ValueError as exc:
        return failure(action, str(exc))
    return await execute(
        transport,
        command,
        SuccessResponse,
        action=action,
        render=lambda response: f"✅ Camera view updated successfully! {response.message}",
    )


async def camera_switch(transport: CommandTransport, camera_id: int) -> str:
    return await execute(
        transport,
        CameraCommand(command="switch", camera_id=camera_id),
        SuccessResponse,
        action="switch camera",
        render=lambda response: f"✅ Switched to camera successfully! {response.message}",
    )


async def camera_free(transport: CommandTransport) -> str:
    return await execute(
        transport,
        CameraCommand(command="free"),
        SuccessResponse,
        action="switch to free camera",
        render=lambda response: f"✅ Switched to free camera mode! {response.message}",
    )


async def camera_getview(transport: CommandTransport) -> str:
    return await execute(
        transport,
        CameraCommand(command="getview"),
        CameraViewResponse,
        action="get camera view",
        render=format_camera_view,
    )
