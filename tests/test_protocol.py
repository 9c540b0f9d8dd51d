from __future__ import annotations

import json

import pytest

from studio_mcp.protocol import (
    AddCommand,
    CameraViewResponse,
    ErrorResponse,
    ItemCommand,
    PingCommand,
    TreeCommand,
    TreeResponse,
    UpdateCommand,
    decoder_for,
)


def test_unset_fields_are_omitted_from_wire_payload() -> None:
    command = UpdateCommand(command="transform", id=7, pos=[1.5, -2.0, 3.25])
    wire = command.to_wire()
    payload = json.loads(wire)

    assert list(payload) == ["type", "command", "id", "pos"]
    assert payload["pos"] == pytest.approx([1.5, -2.0, 3.25])
    assert "\n" in wire


def test_wire_uses_declared_names_in_declaration_order() -> None:
    add = json.loads(AddCommand(command="item", group=0, category=1, item_id=12, parent_id=3).to_wire())
    item = json.loads(ItemCommand(command="list-category", group_id=2, category_id=5).to_wire())
    light = json.loads(UpdateCommand(command="light", id=9, color=[1, 0.5, 0, 1], spot_angle=45).to_wire())

    assert list(add) == ["type", "command", "group", "category", "itemId", "parentId"]
    assert item == {"type": "item", "command": "list-category", "groupId": 2, "categoryId": 5}
    assert list(light) == ["type", "command", "id", "color", "spotAngle"]


def test_commands_with_only_discriminators() -> None:
    assert json.loads(TreeCommand().to_wire()) == {"type": "tree"}
    assert json.loads(ItemCommand(command="list-groups").to_wire()) == {"type": "item", "command": "list-groups"}
    assert json.loads(PingCommand(message="hi", timestamp=1000).to_wire()) == {
        "type": "ping",
        "message": "hi",
        "timestamp": 1000,
    }


def test_decoder_recognises_error_replies() -> None:
    decode = decoder_for(TreeResponse)
    response = decode('{"type": "error", "message": "Object 5 not found"}')

    assert isinstance(response, ErrorResponse)
    assert response.message == "Object 5 not found"


def test_decoder_parses_nested_tree() -> None:
    raw = json.dumps(
        {
            "type": "success",
            "message": "ok",
            "data": [
                {
                    "name": "Folder",
                    "objectInfo": {
                        "id": 1,
                        "type": "folder",
                        "transform": {"pos": [0, 1, 2], "rot": [0, 0, 0], "scale": [1, 1, 1]},
                    },
                    "children": [
                        {
                            "name": "Chair",
                            "objectInfo": {
                                "id": 2,
                                "type": "item",
                                "transform": {"pos": [0, 0, 0], "rot": [0, 90, 0], "scale": [1, 1, 1]},
                                "itemDetail": {"group": 0, "category": 3, "itemId": 17},
                            },
                            "children": [],
                        }
                    ],
                }
            ],
        }
    )

    response = decoder_for(TreeResponse)(raw)

    assert response.is_success
    chair = response.data[0].children[0]
    assert chair.object_info.item_detail.item_id == 17
    assert chair.object_info.transform.rot == [0, 90, 0]


def test_decoder_rejects_malformed_payloads() -> None:
    decode = decoder_for(CameraViewResponse)

    with pytest.raises(ValueError):
        decode("not json")
    with pytest.raises(ValueError):
        decode("[1, 2, 3]")
    with pytest.raises(ValueError):
        decode('{"message": "missing type"}')
