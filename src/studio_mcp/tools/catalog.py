"""Browsing the peer's static item catalog."""

from __future__ import annotations

from studio_mcp.protocol import (
    ItemCatalogResponse,
    ItemCategoryDetailResponse,
    ItemCommand,
    ItemGroupDetailResponse,
    ItemGroupsResponse,
)
from studio_mcp.tools.base import execute
from studio_mcp.tools.formatting import (
    format_catalog,
    format_category_detail,
    format_group_detail,
    format_item_groups,
)
from studio_mcp.transport import CommandTransport


async def item_list_groups(transport: CommandTransport) -> str:
    def render(response: ItemGroupsResponse) -> str:
        if not response.data:
            return "📭 No item groups found"
        return format_item_groups(response.data)

    return await execute(
        transport,
        ItemCommand(command="list-groups"),
        ItemGroupsResponse,
        action="get item groups",
        render=render,
    )


async def item_list_group(transport: CommandTransport, group_id: int) -> str:
    def render(response: ItemGroupDetailResponse) -> str:
        if response.data is None or not response.data.categories:
            return f"📭 No categories found in group {group_id}"
        return format_group_detail(response.data)

    return await execute(
        transport,
        ItemCommand(command="list-group", group_id=group_id),
        ItemGroupDetailResponse,
        action="get item categories",
        render=render,
    )


async def item_list_category(transport: CommandTransport, group_id: int, category_id: int) -> str:
    def render(response: ItemCategoryDetailResponse) -> str:
        if response.data is None or not response.data.items:
            return f"📭 No items found in category {category_id} of group {group_id}"
        return format_category_detail(group_id, response.data)

    return await execute(
        transport,
        ItemCommand(command="list-category", group_id=group_id, category_id=category_id),
        ItemCategoryDetailResponse,
        action="get category items",
        render=render,
    )


async def item_catalog(transport: CommandTransport, timeout_ms: int | None = None) -> str:
    def render(response: ItemCatalogResponse) -> str:
        if not response.data:
            return "📭 Item catalog is empty"
        return format_catalog(response.data)

    return await execute(
        transport,
        ItemCommand(command="catalog"),
        ItemCatalogResponse,
        action="get item catalog",
        render=render,
        timeout_ms=timeout_ms,
    )
