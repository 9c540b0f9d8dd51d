"""Human-readable renderings of peer data."""

from __future__ import annotations

from typing import Sequence

from studio_mcp.protocol.responses import (
    CameraViewResponse,
    CatalogGroup,
    ItemCategoryDetail,
    ItemGroup,
    ItemGroupDetail,
    ScreenshotData,
    TreeNode,
)


def format_vector(values: Sequence[float]) -> str:
    return "(" + ", ".join(f"{value:.2f}" for value in values) + ")"


def format_scene_tree(nodes: Sequence[TreeNode], indent: int = 0) -> str:
    pad = " " * (indent * 2)
    lines: list[str] = []
    for node in nodes:
        info = node.object_info
        lines.append(f"{pad}📦 {node.name} (ID: {info.id}, Type: {info.type})")
        if info.transform is not None:
            lines.append(f"{pad}   🎯 Position: {format_vector(info.transform.pos)}")
            lines.append(f"{pad}   🔄 Rotation: {format_vector(info.transform.rot)}")
            lines.append(f"{pad}   📏 Scale: {format_vector(info.transform.scale)}")
        if info.item_detail is not None:
            detail = info.item_detail
            lines.append(
                f"{pad}   📋 Item Detail: Group={detail.group}, Category={detail.category}, ItemId={detail.item_id}"
            )
        if node.children:
            lines.append(f"{pad}   📁 Children ({len(node.children)}):")
            lines.append(format_scene_tree(node.children, indent + 2))
    return "\n".join(lines)


def format_camera_view(view: CameraViewResponse) -> str:
    pos = view.pos or [0.0, 0.0, 0.0]
    rot = view.rot or [0.0, 0.0, 0.0]
    fov = view.fov if view.fov is not None else 35.0
    lines = [
        "📹 Current Camera Information:",
        f"   🎯 Position: {format_vector(pos)}",
        f"   🔄 Rotation: {format_vector(rot)}",
        f"   🔍 Field of View: {fov:.1f}°",
        f"   📷 Mode: {view.mode or 'unknown'}",
    ]
    if view.active_camera_id is not None:
        lines.append(f"   🎬 Active Camera ID: {view.active_camera_id}")
    else:
        lines.append("   🎬 Active Camera: Free Camera")
    return "\n".join(lines)


def format_item_groups(groups: Sequence[ItemGroup]) -> str:
    lines = ["📦 Available Item Groups:"]
    lines.extend(f"   🏷️ Group {group.id}: {group.name} ({group.category_count} categories)" for group in groups)
    return "\n".join(lines)


def format_group_detail(detail: ItemGroupDetail) -> str:
    lines = [f"📁 Categories in Group {detail.id} ({detail.name}):"]
    lines.extend(
        f"   📂 Category {category.id}: {category.name} ({category.item_count} items)"
        for category in detail.categories
    )
    return "\n".join(lines)


def format_category_detail(group_id: int, detail: ItemCategoryDetail) -> str:
    lines = [f"🔧 Items in Group {group_id}, Category {detail.id} ({detail.name}):"]
    for item in detail.items:
        lines.append(f"   🎯 Item {item.id}: {item.name}")
        props = item.properties
        if props is not None:
            lines.append(f"      • Colors: {props.color_slots}, Patterns: {props.pattern_slots}")
            lines.append(f"      • Scale: {props.is_scale}, Anime: {props.is_anime}")
            lines.append(f"      • Glass: {props.is_glass}, Emission: {props.is_emission}")
    return "\n".join(lines)


def format_catalog(groups: Sequence[CatalogGroup]) -> str:
    category_count = sum(len(group.categories) for group in groups)
    item_count = sum(len(category.items) for group in groups for category in group.categories)
    lines = [f"📚 Item Catalog: {len(groups)} groups, {category_count} categories, {item_count} items"]
    for group in groups:
        items_in_group = sum(len(category.items) for category in group.categories)
        lines.append(f"   🏷️ Group {group.id}: {group.name} ({len(group.categories)} categories, {items_in_group} items)")
        for category in group.categories:
            lines.append(f"      📂 Category {category.id}: {category.name} ({len(category.items)} items)")
    return "\n".join(lines)


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_screenshot(data: ScreenshotData) -> str:
    return "\n".join(
        [
            "📸 Screenshot captured successfully!",
            f"   📏 Size: {data.width} x {data.height} pixels",
            f"   📁 Format: {data.format.upper()}",
            f"   💾 File Size: {format_file_size(data.size)}",
            f"   🌈 Transparency: {'Yes' if data.transparency else 'No'}",
            f"   🖼️ Base64 Image Data: {len(data.image)} characters",
        ]
    )
