"""Outbound command payloads understood by the KKStudioSocket peer.

Each command is a pydantic model whose field order is the wire order. Fields left as
``None`` are dropped from the serialized JSON so the peer only sees what the operation
actually sets.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

Vector3 = list[float]
ColorRGBA = list[float]


class Command(BaseModel):
    """Base for every outbound command; ``type`` is always present on the wire."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    type: str

    # Commands whose responses embed base64 images get their logs truncated.
    carries_image: ClassVar[bool] = False

    def to_wire(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class PingCommand(Command):
    type: Literal["ping"] = "ping"
    message: str | None = None
    timestamp: int | None = None


class UpdateCommand(Command):
    type: Literal["update"] = "update"
    command: Literal["transform", "color", "visibility", "light"]
    id: int
    pos: Vector3 | None = None
    rot: Vector3 | None = None
    scale: Vector3 | None = None
    color: ColorRGBA | None = None
    color_index: int | None = Field(default=None, alias="colorIndex")
    alpha: float | None = None
    visible: bool | None = None
    intensity: float | None = None
    range: float | None = None
    spot_angle: float | None = Field(default=None, alias="spotAngle")
    enable: bool | None = None


class AddCommand(Command):
    type: Literal["add"] = "add"
    command: Literal["item", "light", "character", "folder", "camera"]
    group: int | None = None
    category: int | None = None
    item_id: int | None = Field(default=None, alias="itemId")
    light_id: int | None = Field(default=None, alias="lightId")
    parent_id: int | None = Field(default=None, alias="parentId")
    path: str | None = None
    sex: Literal["male", "female"] | None = None
    name: str | None = None


class HierarchyCommand(Command):
    type: Literal["hierarchy"] = "hierarchy"
    command: Literal["attach", "detach"]
    child_id: int = Field(alias="childId")
    parent_id: int | None = Field(default=None, alias="parentId")


class DeleteCommand(Command):
    type: Literal["delete"] = "delete"
    id: int


class CameraCommand(Command):
    type: Literal["camera"] = "camera"
    command: Literal["setview", "switch", "free", "getview"]
    pos: Vector3 | None = None
    rot: Vector3 | None = None
    fov: float | None = None
    camera_id: int | None = Field(default=None, alias="cameraId")


class ItemCommand(Command):
    type: Literal["item"] = "item"
    command: Literal["list-groups", "list-group", "list-category", "catalog"]
    group_id: int | None = Field(default=None, alias="groupId")
    category_id: int | None = Field(default=None, alias="categoryId")


class TreeCommand(Command):
    type: Literal["tree"] = "tree"
    depth: int | None = None
    id: int | None = None


class ScreenshotCommand(Command):
    type: Literal["screenshot"] = "screenshot"
    width: int | None = None
    height: int | None = None
    transparency: bool | None = None
    mark: bool | None = None

    carries_image: ClassVar[bool] = True
