from __future__ import annotations

import asyncio

from studio_mcp.config import Settings
from studio_mcp.server import create_server
from studio_mcp.transport import StudioSocketClient

EXPECTED_TOOLS = {
    "ping",
    "tree",
    "add_item",
    "add_light",
    "add_character",
    "add_folder",
    "add_camera",
    "update_transform",
    "update_color",
    "update_visibility",
    "update_light",
    "hierarchy_attach",
    "hierarchy_detach",
    "delete",
    "camera_setview",
    "camera_switch",
    "camera_free",
    "camera_getview",
    "item_list_groups",
    "item_list_group",
    "item_list_category",
    "item_catalog",
    "screenshot",
}


def test_server_registers_every_operation() -> None:
    config = Settings(_env_file=None, socket_url="ws://127.0.0.1:1/ws")
    server = create_server(config, client=StudioSocketClient(config.socket_url))

    listed = asyncio.run(server.list_tools())

    assert {tool.name for tool in listed} == EXPECTED_TOOLS
    descriptions = {tool.name: tool.description for tool in listed}
    assert descriptions["ping"] == "Test connection to the KKStudioSocket WebSocket server."


def _first_text(result) -> str:
    # Newer FastMCP releases return (content, structured_output).
    if isinstance(result, tuple):
        result = result[0]
    return result[0].text


def test_wrong_length_vector_is_rendered_as_failure() -> None:
    config = Settings(_env_file=None, socket_url="ws://127.0.0.1:1/ws")
    server = create_server(config, client=StudioSocketClient(config.socket_url))

    transform = asyncio.run(server.call_tool("update_transform", {"object_id": 1, "position": [1.0, 2.0]}))
    color = asyncio.run(server.call_tool("update_color", {"object_id": 1, "color": [1.0, 0.0, 0.0]}))

    assert _first_text(transform) == "❌ Failed to update transform: position must have exactly 3 values, got 2"
    assert _first_text(color) == "❌ Failed to update color: color must have exactly 4 values, got 3"
