"""Conversion of decoded schema mappings into schema nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import (
    ArraySchema,
    ObjectSchema,
    PrimitiveKind,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
    UnknownSchema,
)

_PRIMITIVE_KINDS = {kind.value: kind for kind in PrimitiveKind}


class SchemaError(Exception):
    """Raised when a schema fragment does not have the expected shape."""


def parse_schema_node(node: Any, *, location: str = "#") -> SchemaNode:
    """Parse one decoded JSON-Schema fragment into an immutable schema node."""
    if not isinstance(node, Mapping):
        raise SchemaError(f"Schema node at {location} must be a mapping.")

    ref = node.get("$ref")
    if ref is not None:
        if not isinstance(ref, str):
            raise SchemaError(f"Schema reference at {location} must be a string.")
        return ReferenceSchema(ref=ref)

    node_types = _json_schema_types(node)
    if "object" in node_types or (not node_types and "properties" in node):
        return _parse_object(node, location)
    if not node_types:
        return UnknownSchema()

    node_type = node_types[0]
    if node_type == "array":
        return _parse_array(node, location)
    kind = _PRIMITIVE_KINDS.get(node_type)
    if kind is None:
        return UnknownSchema(type_tag=node_type)
    schema_format = node.get("format")
    return PrimitiveSchema(
        kind=kind,
        format=schema_format if isinstance(schema_format, str) else None,
    )


def parse_schema_definitions(definitions: Any) -> dict[str, SchemaNode]:
    """Parse a `components/schemas` or `definitions` mapping."""
    if not isinstance(definitions, Mapping):
        raise SchemaError("Schema definitions must be a mapping of names to schemas.")
    return {
        str(key): parse_schema_node(value, location=f"#/definitions/{key}")
        for key, value in definitions.items()
    }


def _json_schema_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        return tuple(value for value in node_type if isinstance(value, str) and value != "null")
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _parse_object(node: Mapping[str, Any], location: str) -> ObjectSchema:
    properties = node.get("properties")
    if properties is None:
        return ObjectSchema()
    if not isinstance(properties, Mapping):
        raise SchemaError(f"Schema properties at {location} must be a mapping.")
    parsed = tuple(
        (str(name), parse_schema_node(child, location=f"{location}/properties/{name}"))
        for name, child in properties.items()
    )
    return ObjectSchema(properties=parsed, required=_parse_required(node.get("required"), location))


def _parse_required(value: Any, location: str) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaError(f"Schema required list at {location} must be a list of names.")
    return frozenset(str(item) for item in value)


def _parse_array(node: Mapping[str, Any], location: str) -> ArraySchema:
    items = node.get("items")
    if items is None:
        return ArraySchema(items=UnknownSchema())
    return ArraySchema(items=parse_schema_node(items, location=f"{location}/items"))
