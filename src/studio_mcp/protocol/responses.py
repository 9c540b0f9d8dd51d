"""Inbound response shapes and the decoders operations hand to the transport."""

from __future__ import annotations

import json
from typing import Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.type == "success"


class ErrorResponse(Response):
    """Well-formed business failure reported by the peer."""


class PongResponse(Response):
    timestamp: int | None = None


class SuccessResponse(Response):
    pass


class AddSuccessResponse(Response):
    object_id: int | None = Field(default=None, alias="objectId")


class Transform(BaseModel):
    pos: list[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])
    rot: list[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])
    scale: list[float] = Field(default_factory=lambda: [1.0, 1.0, 1.0])


class ItemDetail(BaseModel):
    group: int
    category: int
    item_id: int = Field(alias="itemId")


class ObjectInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    transform: Transform | None = None
    item_detail: ItemDetail | None = Field(default=None, alias="itemDetail")


class TreeNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    object_info: ObjectInfo = Field(alias="objectInfo")
    children: list[TreeNode] = Field(default_factory=list)


class TreeResponse(Response):
    data: list[TreeNode] = Field(default_factory=list)


class ItemGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    category_count: int = Field(default=0, alias="categoryCount")


class ItemCategory(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    item_count: int = Field(default=0, alias="itemCount")


class ItemGroupDetail(BaseModel):
    id: int
    name: str
    categories: list[ItemCategory] = Field(default_factory=list)


class ItemProperties(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_anime: bool = Field(default=False, alias="isAnime")
    is_scale: bool = Field(default=False, alias="isScale")
    has_color: bool = Field(default=False, alias="hasColor")
    color_slots: int = Field(default=0, alias="colorSlots")
    has_pattern: bool = Field(default=False, alias="hasPattern")
    pattern_slots: int = Field(default=0, alias="patternSlots")
    is_emission: bool = Field(default=False, alias="isEmission")
    is_glass: bool = Field(default=False, alias="isGlass")
    bones: int = 0
    child_root: str = Field(default="", alias="childRoot")


class Item(BaseModel):
    id: int
    name: str
    properties: ItemProperties | None = None


class ItemCategoryDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    group_id: int | None = Field(default=None, alias="groupId")
    items: list[Item] = Field(default_factory=list)


class ItemCommandResponse(Response):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    command: str | None = None
    group_id: int | None = Field(default=None, alias="groupId")
    category_id: int | None = Field(default=None, alias="categoryId")


class ItemGroupsResponse(ItemCommandResponse):
    data: list[ItemGroup] = Field(default_factory=list)


class ItemGroupDetailResponse(ItemCommandResponse):
    data: ItemGroupDetail | None = None


class ItemCategoryDetailResponse(ItemCommandResponse):
    data: ItemCategoryDetail | None = None


class CatalogItemFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    asset_bundle: str = Field(default="", alias="assetBundle")
    manifest: str = ""


class CatalogItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    type: str = ""
    group_id: int | None = Field(default=None, alias="groupId")
    category_id: int | None = Field(default=None, alias="categoryId")
    properties: ItemProperties | None = None
    file: CatalogItemFile | None = None


class CatalogCategory(BaseModel):
    id: int
    name: str
    type: str = ""
    items: list[CatalogItem] = Field(default_factory=list)


class CatalogGroup(BaseModel):
    id: int
    name: str
    type: str = ""
    categories: list[CatalogCategory] = Field(default_factory=list)


class ItemCatalogResponse(ItemCommandResponse):
    data: list[CatalogGroup] = Field(default_factory=list)


class ScreenshotData(BaseModel):
    image: str
    width: int = 0
    height: int = 0
    format: str = "png"
    transparency: bool = False
    size: int = 0


class ScreenshotResponse(Response):
    data: ScreenshotData | None = None


class CameraViewResponse(Response):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    pos: list[float] | None = None
    rot: list[float] | None = None
    fov: float | None = None
    mode: str | None = None
    active_camera_id: int | None = Field(default=None, alias="activeCameraId")


ResponseT = TypeVar("ResponseT", bound=Response)


def decoder_for(model: type[ResponseT]) -> Callable[[str], ResponseT | ErrorResponse]:
    """Build a decoder for ``model`` that also recognises peer ``error`` replies.

    Raises ``ValueError`` (including pydantic's ``ValidationError``) when the text is not
    a JSON object or does not fit the expected shape.
    """

    def decode(raw: str) -> ResponseT | ErrorResponse:
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        if payload.get("type") == "error":
            return ErrorResponse.model_validate(payload)
        return model.model_validate(payload)

    decode.__name__ = f"decode_{model.__name__}"
    return decode
