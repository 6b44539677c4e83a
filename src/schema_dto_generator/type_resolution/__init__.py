"""Type resolution exports."""

from .naming_service import field_name, snake_case, type_name, uniquify
from .resolution_context import (
    DEFAULT_INLINE_THRESHOLD,
    DefinitionRegistry,
    RegistryEntry,
    ResolutionContext,
)
from .resolution_models import (
    FieldDefinition,
    ListType,
    MapType,
    NamedRecordType,
    PrimitiveType,
    PrimitiveTypeKind,
    RecordDefinition,
    ResolutionPolicy,
    ResolvedTypeGraph,
    TypeReference,
    UnknownType,
)
from .signature_hasher import signature_of
from .type_resolver import resolve
from .worklist_driver import resolve_type_graph

__all__ = [
    "DEFAULT_INLINE_THRESHOLD",
    "DefinitionRegistry",
    "FieldDefinition",
    "ListType",
    "MapType",
    "NamedRecordType",
    "PrimitiveType",
    "PrimitiveTypeKind",
    "RecordDefinition",
    "RegistryEntry",
    "ResolutionContext",
    "ResolutionPolicy",
    "ResolvedTypeGraph",
    "TypeReference",
    "UnknownType",
    "field_name",
    "resolve",
    "resolve_type_graph",
    "signature_of",
    "snake_case",
    "type_name",
    "uniquify",
]
