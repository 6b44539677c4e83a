"""Schema modeling exports."""

from .schema_inference import infer_schema
from .schema_models import (
    ArraySchema,
    ObjectSchema,
    PrimitiveKind,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
    UnknownSchema,
)
from .schema_parsing import SchemaError, parse_schema_definitions, parse_schema_node

__all__ = [
    "ArraySchema",
    "ObjectSchema",
    "PrimitiveKind",
    "PrimitiveSchema",
    "ReferenceSchema",
    "SchemaNode",
    "UnknownSchema",
    "SchemaError",
    "infer_schema",
    "parse_schema_definitions",
    "parse_schema_node",
]
