"""Wire-level command and response types for the KKStudioSocket peer."""

from .commands import (
    AddCommand,
    CameraCommand,
    Command,
    DeleteCommand,
    HierarchyCommand,
    ItemCommand,
    PingCommand,
    ScreenshotCommand,
    TreeCommand,
    UpdateCommand,
)
from .responses import (
    AddSuccessResponse,
    CameraViewResponse,
    ErrorResponse,
    ItemCatalogResponse,
    ItemCategoryDetailResponse,
    ItemGroupDetailResponse,
    ItemGroupsResponse,
    PongResponse,
    Response,
    ScreenshotData,
    ScreenshotResponse,
    SuccessResponse,
    TreeNode,
    TreeResponse,
    decoder_for,
)

__all__ = [
    "AddCommand",
    "AddSuccessResponse",
    "CameraCommand",
    "CameraViewResponse",
    "Command",
    "DeleteCommand",
    "ErrorResponse",
    "HierarchyCommand",
    "ItemCatalogResponse",
    "ItemCategoryDetailResponse",
    "ItemCommand",
    "ItemGroupDetailResponse",
    "ItemGroupsResponse",
    "PingCommand",
    "PongResponse",
    "Response",
    "ScreenshotCommand",
    "ScreenshotData",
    "ScreenshotResponse",
    "SuccessResponse",
    "TreeCommand",
    "TreeNode",
    "TreeResponse",
    "UpdateCommand",
    "decoder_for",
]
