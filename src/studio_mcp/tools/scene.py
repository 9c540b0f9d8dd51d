"""Scene operations: connectivity, hierarchy queries and object edits."""

from __future__ import annotations

import time
from typing import Sequence

from pydantic import ValidationError

from studio_mcp.protocol import (
    AddCommand,
    AddSuccessResponse,
    DeleteCommand,
    HierarchyCommand,
    PingCommand,
    PongResponse,
    SuccessResponse,
    TreeCommand,
    TreeResponse,
    UpdateCommand,
)
from studio_mcp.tools.base import execute, failure, vector
from studio_mcp.tools.formatting import format_scene_tree
from studio_mcp.transport import CommandTransport


async def ping(transport: CommandTransport, message: str = "test") -> str:
    command = PingCommand(message=message, timestamp=int(time.time() * 1000))
    return await execute(
        transport,
        command,
        PongResponse,
        action="ping",
        expected_type="pong",
        render=lambda response: f"✅ Ping successful! Server responded with: {response.message}",
    )


async def tree(transport: CommandTransport, depth: int | None = 1, object_id: int | None = None) -> str:
    def render(response: TreeResponse) -> str:
        if not response.data:
            return "📭 Scene is empty - no objects found"
        return "🌲 Scene Tree:\n" + format_scene_tree(response.data)

    return await execute(
        transport,
        TreeCommand(depth=depth, id=object_id),
        TreeResponse,
        action="get scene tree",
        render=render,
    )


async def _add(transport: CommandTransport, action: str, label: str, **fields) -> str:
    try:
        command = AddCommand(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        return failure(action, f"{field}: {error['msg']}" if field else error["msg"])
    return await execute(
        transport,
        command,
        AddSuccessResponse,
        action=action,
        render=lambda response: f"✅ {label} added successfully! Object ID: {response.object_id}. {response.message}",
    )


async def add_item(
    transport: CommandTransport,
    group: int,
    category: int,
    item_id: int,
    parent_id: int | None = None,
) -> str:
    return await _add(
        transport,
        "add item",
        "Item",
        command="item",
        group=group,
        category=category,
        item_id=item_id,
        parent_id=parent_id,
    )


async def add_light(transport: CommandTransport, light_id: int, parent_id: int | None = None) -> str:
    return await _add(transport, "add light", "Light", command="light", light_id=light_id, parent_id=parent_id)


async def add_character(
    transport: CommandTransport,
    path: str,
    sex: str = "female",
    parent_id: int | None = None,
) -> str:
    if not path.strip():
        return failure("add character", "path must not be empty")
    if sex not in ("male", "female"):
        return failure("add character", f"sex must be 'male' or 'female', got {sex!r}")
    return await _add(
        transport,
        "add character",
        "Character",
        command="character",
        path=path,
        sex=sex,
        parent_id=parent_id,
    )


async def add_folder(transport: CommandTransport, name: str, parent_id: int | None = None) -> str:
    return await _add(transport, "add folder", "Folder", command="folder", name=name, parent_id=parent_id)


async def add_camera(transport: CommandTransport, name: str | None = None, parent_id: int | None = None) -> str:
    return await _add(transport, "add camera", "Camera", command="camera", name=name, parent_id=parent_id)


async def update_transform(
    transport: CommandTransport,
    object_id: int,
    position: Sequence[float] | None = None,
    rotation: Sequence[float] | None = None,
    scale: Sequence[float] | None = None,
) -> str:
    action = "update transform"
    try:
        command = UpdateCommand(
            command="transform",
            id=object_id,
            pos=vector(position, 3, "position"),
            rot=vector(rotation, 3, "rotation"),
            scale=vector(scale, 3, "scale"),
        )
    except ValueError as exc:
        return failure(action, str(exc))
    return await execute(
        transport,
        command,
        SuccessResponse,
        action=action,
        render=lambda response: f"✅ Transform updated successfully! {response.message}",
    )


async def update_color(
    transport: CommandTransport,
    object_id: int,
    color: Sequence[float],
    color_index: int = 0,
    alpha: float | None = None,
) -> str:
    action = "update color"
    try:
        command = UpdateCommand(
            command="color",
            id=object_id,
            color=vector(color, 4, "color"),
            color_index=color_index,
            alpha=alpha,
        )
    except ValueError as exc:
        return failure(action, str(exc))
    return await execute(
        transport,
        command,
        SuccessResponse,
        action=action,
        render=lambda response: f"✅ Color updated successfully! {response.message}",
    )


async def update_visibility(transport: CommandTransport, object_id: int, visible: bool) -> str:
    state = "shown" if visible else "hidden"
    return await execute(
        transport,
        UpdateCommand(command="visibility", id=object_id, visible=visible),
        SuccessResponse,
        action="update visibility",
        render=lambda response: f"✅ Object {object_id} is now {state}. {response.message}",
    )


async def update_light(
    transport: CommandTransport,
    object_id: int,
    color: Sequence[float] | None = None,
    intensity: float | None = None,
    range: float | None = None,
    spot_angle: float | None = None,
    enable: bool | None = None,
) -> str:
    action = "update light"
    try:
        command = UpdateCommand(
            command="light",
            id=object_id,
            color=vector(color, 4, "color"),
            intensity=intensity,
            range=range,
            spot_angle=spot_angle,
            enable=enable,
        )
    except ValueError as exc:
        return failure(action, str(exc))
    return await execute(
        transport,
        command,
        SuccessResponse,
        action=action,
        render=lambda response: f"✅ Light updated successfully! {response.message}",
    )


async def delete(transport: CommandTransport, object_id: int) -> str:
    return await execute(
        transport,
        DeleteCommand(id=object_id),
        SuccessResponse,
        action="delete object",
        render=lambda response: f"✅ Object deleted successfully! {response.message}",
    )


async def hierarchy_attach(transport: CommandTransport, child_id: int, parent_id: int) -> str:
    return await execute(
        transport,
        HierarchyCommand(command="attach", child_id=child_id, parent_id=parent_id),
        SuccessResponse,
        action="attach object",
        render=lambda response: (
            f"✅ Hierarchy updated successfully! Child {child_id} attached to parent {parent_id}. {response.message}"
        ),
    )


async def hierarchy_detach(transport: CommandTransport, child_id: int) -> str:
    return await execute(
        transport,
        HierarchyCommand(command="detach", child_id=child_id),
        SuccessResponse,
        action="detach object",
        render=lambda response: (
            f"✅ Hierarchy updated successfully! Object {child_id} detached from parent. {response.message}"
        ),
    )
