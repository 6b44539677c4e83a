"""Structural signatures for schema nodes."""

from __future__ import annotations

import hashlib
import json
from typing import Any

from schema_dto_generator.schema_modeling.schema_models import (
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
)


def signature_of(node: SchemaNode) -> str:
    """Return an order-independent structural signature for a schema node.

    Object properties are sorted by name and carry the signature of their
    nested schema, so two objects declaring the same properties in a
    different order hash identically.
    """
    return _digest(_canonical_form(node))


def _canonical_form(node: SchemaNode) -> list[Any]:
    if isinstance(node, ObjectSchema):
        return [
            "object",
            [[name, signature_of(child)] for name, child in sorted(node.properties, key=_by_name)],
            sorted(node.required),
        ]
    if isinstance(node, ArraySchema):
        return ["array", signature_of(node.items)]
    if isinstance(node, PrimitiveSchema):
        return ["primitive", node.kind.value, node.format]
    if isinstance(node, ReferenceSchema):
        return ["reference", node.ref]
    return ["unknown", node.type_tag]


def _by_name(entry: tuple[str, SchemaNode]) -> str:
    return entry[0]


def _digest(canonical: list[Any]) -> str:
    encoded = json.dumps(canonical, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()
