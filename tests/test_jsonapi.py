import json
from dataclasses import dataclass
from typing import ClassVar, Optional

import pytest

from terrakube.jsonapi import (
    attr,
    decode_resource,
    encode_resource,
    marshal_payload,
    relation,
    unmarshal_many_payload,
    unmarshal_payload,
)


@dataclass
class Child:
    jsonapi_type: ClassVar[str] = "child"
    id: str = ""
    name: str = attr("name", "")


@dataclass
class Parent:
    jsonapi_type: ClassVar[str] = "parent"
    id: str = ""
    title: str = attr("title", "")
    enabled: bool = attr("enabled", False)
    note: Optional[str] = attr("note")
    child: Optional[Child] = relation("child")


def test_encode_resource_basic_fields():
    node = encode_resource(Parent(id="p-1", title="hello", enabled=True))
    assert node["type"] == "parent"
    assert node["id"] == "p-1"
    assert node["attributes"]["title"] == "hello"
    assert node["attributes"]["enabled"] is True


def test_encode_resource_omits_empty_id_and_nil_relation():
    node = encode_resource(Parent(title="x"))
    assert "id" not in node
    assert "relationships" not in node


def test_encode_keeps_false_and_none_attributes():
    node = encode_resource(Parent(id="p-1"))
    assert node["attributes"]["enabled"] is False
    assert node["attributes"]["note"] is None


def test_encode_relationship_identifier():
    node = encode_resource(Parent(id="p-1", child=Child(id="c-1", name="kid")))
    assert node["relationships"]["child"]["data"] == {"type": "child", "id": "c-1"}


def test_marshal_payload_includes_related_resource():
    doc = json.loads(marshal_payload(Parent(id="p-1", child=Child(id="c-1", name="kid"))))
    assert doc["data"]["type"] == "parent"
    assert doc["included"] == [{"type": "child", "id": "c-1", "attributes": {"name": "kid"}}]


def test_round_trip_single():
    original = Parent(id="p-1", title="t", enabled=True, note="n", child=Child(id="c-1", name="kid"))
    assert unmarshal_payload(Parent, marshal_payload(original)) == original


def test_round_trip_many():
    items = [Parent(id="p-1", title="a"), Parent(id="p-2", title="b", enabled=True)]
    body = json.dumps({"data": [encode_resource(p) for p in items]})
    assert unmarshal_many_payload(Parent, body) == items


def test_decode_resource_round_trip():
    original = Parent(id="p-9", title="z", note=None)
    assert decode_resource(Parent, encode_resource(original)) == original


def test_decode_missing_and_null_attributes_keep_defaults():
    parent = decode_resource(Parent, {"type": "parent", "id": "p-1", "attributes": {"title": None}})
    assert parent == Parent(id="p-1")


def test_relation_without_included_has_only_id():
    body = json.dumps(
        {"data": {"type": "parent", "id": "p-1", "relationships": {"child": {"data": {"type": "child", "id": "c-7"}}}}}
    )
    assert unmarshal_payload(Parent, body).child == Child(id="c-7")


def test_type_mismatch_raises():
    with pytest.raises(ValueError):
        decode_resource(Parent, {"type": "child", "id": "c-1"})


def test_unmarshal_payload_rejects_collection():
    with pytest.raises(ValueError):
        unmarshal_payload(Parent, json.dumps({"data": []}))


def test_unmarshal_many_rejects_single():
    with pytest.raises(ValueError):
        unmarshal_many_payload(Parent, json.dumps({"data": {"type": "parent", "id": "p-1"}}))


def test_unmarshal_many_empty():
    assert unmarshal_many_payload(Parent, json.dumps({"data": []})) == []