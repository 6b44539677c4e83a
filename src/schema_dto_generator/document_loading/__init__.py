"""Document loading exports."""

from .document_models import DefinitionOrigin, SchemaSource
from .document_reader import (
    INFERRED_DEFINITION_KEY,
    DocumentError,
    build_schema_source,
    decode_document,
    default_policy_for,
    find_response_example,
    load_schema_source,
)

__all__ = [
    "DefinitionOrigin",
    "SchemaSource",
    "INFERRED_DEFINITION_KEY",
    "DocumentError",
    "build_schema_source",
    "decode_document",
    "default_policy_for",
    "find_response_example",
    "load_schema_source",
]
