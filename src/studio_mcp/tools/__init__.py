"""Tool operations: caller arguments in, rendered peer replies out."""

from .camera import camera_free, camera_getview, camera_setview, camera_switch
from .catalog import item_catalog, item_list_category, item_list_group, item_list_groups
from .scene import (
    add_camera,
    add_character,
    add_folder,
    add_item,
    add_light,
    delete,
    hierarchy_attach,
    hierarchy_detach,
    ping,
    tree,
    update_color,
    update_light,
    update_transform,
    update_visibility,
)
from .screenshot import ScreenshotResult, screenshot

__all__ = [
    "ScreenshotResult",
    "add_camera",
    "add_character",
    "add_folder",
    "add_item",
    "add_light",
    "camera_free",
    "camera_getview",
    "camera_setview",
    "camera_switch",
    "delete",
    "hierarchy_attach",
    "hierarchy_detach",
    "item_catalog",
    "item_list_category",
    "item_list_group",
    "item_list_groups",
    "ping",
    "screenshot",
    "tree",
    "update_color",
    "update_light",
    "update_transform",
    "update_visibility",
]
