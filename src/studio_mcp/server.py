"""FastMCP server exposing the studio operations as tools."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator

from mcp.server.fastmcp import FastMCP, Image
from pydantic import Field

from studio_mcp import tools
from studio_mcp.config import Settings, settings as default_settings
from studio_mcp.transport import StudioSocketClient

logger = logging.getLogger("studio_mcp.server")

Vector3 = Annotated[list[float], Field(description="[X, Y, Z]")]
ColorRGBA = Annotated[list[float], Field(description="[R, G, B, A] in 0-1")]


def create_server(
    settings: Settings | None = None,
    client: StudioSocketClient | None = None,
) -> FastMCP:
    """Build the MCP server; the socket client lives as long as the server runs."""
    settings = settings or default_settings
    client = client or StudioSocketClient.from_settings(settings)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        logger.info("server_started", extra={"uri": client.uri, "mode": client.mode.value})
        try:
            yield {}
        finally:
            await client.aclose()
            logger.info("server_stopped")

    mcp = FastMCP(settings.app_name, lifespan=lifespan)

    @mcp.tool()
    async def ping(message: str = "test") -> str:
        """Test connection to the KKStudioSocket WebSocket server."""
        return await tools.ping(client, message)

    @mcp.tool()
    async def tree(
        depth: Annotated[int | None, Field(description="Maximum depth to retrieve")] = 1,
        object_id: Annotated[int | None, Field(description="Object ID to get the subtree of; all roots if omitted")] = None,
    ) -> str:
        """Get the hierarchical structure of objects in the scene."""
        return await tools.tree(client, depth, object_id)

    @mcp.tool()
    async def add_item(group: int, category: int, item_id: int, parent_id: int | None = None) -> str:
        """Add a catalog item to the scene."""
        return await tools.add_item(client, group, category, item_id, parent_id)

    @mcp.tool()
    async def add_light(
        light_id: Annotated[int, Field(description="Light type ID (0=Directional, 1=Point, 2=Spot)")],
        parent_id: int | None = None,
    ) -> str:
        """Add a light to the scene."""
        return await tools.add_light(client, light_id, parent_id)

    @mcp.tool()
    async def add_character(
        path: Annotated[str, Field(description="Character card file path")],
        sex: Annotated[str, Field(description="male or female")] = "female",
        parent_id: int | None = None,
    ) -> str:
        """Load a character card into the scene."""
        return await tools.add_character(client, path, sex, parent_id)

    @mcp.tool()
    async def add_folder(name: str, parent_id: int | None = None) -> str:
        """Create a folder object for grouping."""
        return await tools.add_folder(client, name, parent_id)

    @mcp.tool()
    async def add_camera(name: str | None = None, parent_id: int | None = None) -> str:
        """Create a camera object."""
        return await tools.add_camera(client, name, parent_id)

    @mcp.tool()
    async def update_transform(
        object_id: int,
        position: Vector3 | None = None,
        rotation: Annotated[Vector3 | None, Field(description="Rotation [X, Y, Z] in degrees")] = None,
        scale: Vector3 | None = None,
    ) -> str:
        """Update position, rotation, or scale of an object."""
        return await tools.update_transform(client, object_id, position, rotation, scale)

    @mcp.tool()
    async def update_color(
        object_id: int,
        color: ColorRGBA,
        color_index: Annotated[int, Field(description="Color slot to change")] = 0,
        alpha: float | None = None,
    ) -> str:
        """Change an item's color slot."""
        return await tools.update_color(client, object_id, color, color_index, alpha)

    @mcp.tool()
    async def update_visibility(object_id: int, visible: bool) -> str:
        """Show or hide an object."""
        return await tools.update_visibility(client, object_id, visible)

    @mcp.tool()
    async def update_light(
        object_id: int,
        color: ColorRGBA | None = None,
        intensity: Annotated[float | None, Field(description="0.1-2.0")] = None,
        range: Annotated[float | None, Field(description="Point: 0.1-100, Spot: 0.5-100")] = None,
        spot_angle: Annotated[float | None, Field(description="Spot angle, 1-179 degrees")] = None,
        enable: bool | None = None,
    ) -> str:
        """Change light color, intensity, range, spot angle or enabled state."""
        return await tools.update_light(client, object_id, color, intensity, range, spot_angle, enable)

    @mcp.tool()
    async def hierarchy_attach(child_id: int, parent_id: int) -> str:
        """Parent an object to another object in the scene hierarchy."""
        return await tools.hierarchy_attach(client, child_id, parent_id)

    @mcp.tool()
    async def hierarchy_detach(child_id: int) -> str:
        """Detach an object from its parent (make it a root object)."""
        return await tools.hierarchy_detach(client, child_id)

    @mcp.tool()
    async def delete(object_id: int) -> str:
        """Delete an object from the scene."""
        return await tools.delete(client, object_id)

    @mcp.tool()
    async def camera_setview(
        position: Vector3 | None = None,
        rotation: Annotated[Vector3 | None, Field(description="[pitch, yaw, roll] in degrees")] = None,
        fov: float | None = None,
    ) -> str:
        """Set the camera position, rotation, and field of view."""
        return await tools.camera_setview(client, position, rotation, fov)

    @mcp.tool()
    async def camera_switch(camera_id: int) -> str:
        """Switch the viewport to a specific camera object."""
        return await tools.camera_switch(client, camera_id)

    @mcp.tool()
    async def camera_free() -> str:
        """Return to free camera mode."""
        return await tools.camera_free(client)

    @mcp.tool()
    async def camera_getview() -> str:
        """Retrieve current camera information."""
        return await tools.camera_getview(client)

    @mcp.tool()
    async def item_list_groups() -> str:
        """Get a list of all item groups."""
        return await tools.item_list_groups(client)

    @mcp.tool()
    async def item_list_group(group_id: int) -> str:
        """Get categories within a specific group."""
        return await tools.item_list_group(client, group_id)

    @mcp.tool()
    async def item_list_category(group_id: int, category_id: int) -> str:
        """Get all items within a specific category."""
        return await tools.item_list_category(client, group_id, category_id)

    @mcp.tool()
    async def item_catalog() -> str:
        """Summarize the whole item catalog."""
        return await tools.item_catalog(client, timeout_ms=settings.screenshot_timeout_ms)

    @mcp.tool()
    async def screenshot(
        width: Annotated[int | None, Field(description="Image width in pixels (default: 854)")] = None,
        height: Annotated[int | None, Field(description="Image height in pixels (default: 480)")] = None,
        transparency: bool | None = None,
        mark: Annotated[bool | None, Field(description="Include capture mark overlay")] = None,
    ):
        """Capture the current Studio view as a PNG image."""
        result = await tools.screenshot(
            client,
            width,
            height,
            transparency,
            mark,
            timeout_ms=settings.screenshot_timeout_ms,
        )
        if not result.ok:
            return result.summary
        return [result.summary, Image(data=result.image, format=result.format)]

    return mcp
