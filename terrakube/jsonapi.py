"""Minimal JSON:API encoding and decoding for dataclass models.

A model is a dataclass with a ``jsonapi_type`` class variable, an ``id``
field holding the primary key, and fields declared with :func:`attr` or
:func:`relation`.
"""

from __future__ import annotations

import inspect
import json
import re
from dataclasses import field, fields
from typing import Any, Iterator, get_args

_META_KEY = "jsonapi"
_ATTR = "attr"
_RELATION = "relation"
_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*")


def attr(name: str, default: Any = None) -> Any:
    """Declare a dataclass field stored as JSON:API attribute ``name``."""
    return field(default=default, metadata={_META_KEY: (_ATTR, name)})


def relation(name: str) -> Any:
    """Declare a to-one relationship field named ``name``; omitted when None."""
    return field(default=None, metadata={_META_KEY: (_RELATION, name)})


def _tagged_fields(model: Any) -> Iterator[tuple[Any, str, str]]:
    for f in fields(model):
        tag = f.metadata.get(_META_KEY)
        if tag:
            yield f, tag[0], tag[1]


def _identifier(resource: Any) -> dict[str, Any]:
    return {"type": resource.jsonapi_type, "id": resource.id}


def _encode(resource: Any, included: list[dict[str, Any]] | None) -> dict[str, Any]:
    node: dict[str, Any] = {"type": resource.jsonapi_type}
    if resource.id:
        node["id"] = resource.id
    attributes: dict[str, Any] = {}
    relationships: dict[str, Any] = {}
    for f, kind, name in _tagged_fields(resource):
        value = getattr(resource, f.name)
        if kind == _ATTR:
            attributes[name] = value
        elif value is not None:
            ident = _identifier(value)
            relationships[name] = {"data": ident}
            if included is not None and not any(
                n.get("type") == ident["type"] and n.get("id") == ident["id"] for n in included
            ):
                included.append(_encode(value, included))
    if attributes:
        node["attributes"] = attributes
    if relationships:
        node["relationships"] = relationships
    return node


def encode_resource(resource: Any) -> dict[str, Any]:
    """Return the JSON:API resource object for ``resource``."""
    return _encode(resource, None)


def _lookup(namespace: Any, dotted: str) -> Any:
    target = namespace
    for part in dotted.split("."):
        target = getattr(target, part, None)
        if target is None:
            return None
    return target


def _relation_class(owner: Any, declared: Any) -> Any:
    """Find the model class named by a relation field's annotation."""
    if not isinstance(declared, str):
        candidates = [a for a in get_args(declared) if a is not type(None)] or [declared]
        for candidate in candidates:
            if hasattr(candidate, "jsonapi_type"):
                return candidate
        raise TypeError(f"cannot resolve relation type {declared!r}")
    module = inspect.getmodule(owner)
    for name in _NAME_RE.findall(declared):
        if name in ("None", "Optional", "typing.Optional"):
            continue
        candidate = _lookup(module, name) if module is not None else None
        if candidate is not None and hasattr(candidate, "jsonapi_type"):
            return candidate
    raise TypeError(f"cannot resolve relation type {declared!r}")


def _decode(cls: Any, node: Any, included: dict[tuple[Any, Any], dict[str, Any]]) -> Any:
    if not isinstance(node, dict):
        raise ValueError("resource object must be a JSON object")
    expected = cls.jsonapi_type
    if node.get("type") != expected:
        raise ValueError(f"resource type {node.get('type')!r} does not match {expected!r}")
    raw_id = node.get("id")
    kwargs: dict[str, Any] = {"id": "" if raw_id is None else str(raw_id)}
    attributes = node.get("attributes") or {}
    relationships = node.get("relationships") or {}
    for f, kind, name in _tagged_fields(cls):
        if kind == _ATTR:
            value = attributes.get(name)
            if value is not None:
                kwargs[f.name] = value
            continue
        data = (relationships.get(name) or {}).get("data")
        if not isinstance(data, dict):
            continue
        target = included.get((data.get("type"), data.get("id")), data)
        kwargs[f.name] = _decode(_relation_class(cls, f.type), target, included)
    return cls(**kwargs)


def decode_resource(cls: Any, data: dict[str, Any]) -> Any:
    """Build an instance of ``cls`` from a JSON:API resource object."""
    return _decode(cls, data, {})


def marshal_payload(resource: Any) -> bytes:
    """Serialise ``resource`` as a JSON:API document."""
    included: list[dict[str, Any]] = []
    document: dict[str, Any] = {"data": _encode(resource, included)}
    if included:
        document["included"] = included
    return json.dumps(document).encode("utf-8")


def _load(body: bytes | str) -> tuple[Any, dict[tuple[Any, Any], dict[str, Any]]]:
    document = json.loads(body)
    if not isinstance(document, dict):
        raise ValueError("JSON:API document must be a JSON object")
    index = {
        (node.get("type"), node.get("id")): node
        for node in document.get("included") or []
        if isinstance(node, dict)
    }
    return document.get("data"), index


def unmarshal_payload(cls: Any, body: bytes | str) -> Any:
    """Decode a single-resource JSON:API document into ``cls``."""
    data, included = _load(body)
    if not isinstance(data, dict):
        raise ValueError("expected a single resource in document data")
    return _decode(cls, data, included)


def unmarshal_many_payload(cls: Any, body: bytes | str) -> list[Any]:
    """Decode a resource-collection JSON:API document into a list of ``cls``."""
    data, included = _load(body)
    if not isinstance(data, list):
        raise ValueError("expected a resource collection in document data")
    return [_decode(cls, node, included) for node in data]