"""Schema inference from example payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_models import (
    ArraySchema,
    ObjectSchema,
    PrimitiveKind,
    PrimitiveSchema,
    SchemaNode,
    UnknownSchema,
)


def infer_schema(example: Any) -> SchemaNode:
    """Derive a schema node from an example value by structural induction.

    Keys with non-null example values are marked required. Lists are typed
    from their first element only; an empty list has no item signal and
    yields unknown items.
    """
    if isinstance(example, Mapping):
        return ObjectSchema(
            properties=tuple((str(key), infer_schema(value)) for key, value in example.items()),
            required=frozenset(str(key) for key, value in example.items() if value is not None),
        )
    if isinstance(example, list):
        if not example:
            return ArraySchema(items=UnknownSchema())
        return ArraySchema(items=infer_schema(example[0]))
    # bool is a subclass of int and must be matched first.
    if isinstance(example, bool):
        return PrimitiveSchema(kind=PrimitiveKind.BOOLEAN)
    if isinstance(example, int):
        return PrimitiveSchema(kind=PrimitiveKind.INTEGER)
    if isinstance(example, float):
        return PrimitiveSchema(kind=PrimitiveKind.NUMBER)
    return PrimitiveSchema(kind=PrimitiveKind.STRING)
