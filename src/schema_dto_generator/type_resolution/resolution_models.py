"""Type resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResolutionPolicy(str, Enum):
    """How nested object schemas become record types during one run."""

    INLINE = "inline"
    PROMOTE = "promote"


class PrimitiveTypeKind(str, Enum):
    """Resolved scalar kinds."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE_TIME = "date-time"


@dataclass(frozen=True)
class PrimitiveType:
    """Resolved scalar type."""

    kind: PrimitiveTypeKind


@dataclass(frozen=True)
class NamedRecordType:
    """Reference to a registered record definition."""

    name: str


@dataclass(frozen=True)
class ListType:
    """Homogeneous list of the item type."""

    item: TypeReference


@dataclass(frozen=True)
class MapType:
    """Opaque string-keyed container without modeled structure."""


@dataclass(frozen=True)
class UnknownType:
    """Type that could not be resolved."""


TypeReference = PrimitiveType | NamedRecordType | ListType | MapType | UnknownType


@dataclass(frozen=True)
class FieldDefinition:
    """One resolved record field."""

    property_name: str
    identifier: str
    type_ref: TypeReference
    required: bool
    wire_key: str | None = None


@dataclass(frozen=True)
class RecordDefinition:
    """Finalized record type ready for rendering.

    `scope` names the shared record whose output unit hosts an inlined
    record; shared records carry no scope.
    """

    name: str
    fields: tuple[FieldDefinition, ...]
    signature: str
    scope: str | None = None

    @property
    def is_inline(self) -> bool:
        """Return True for records rendered local to their host."""
        return self.scope is not None


@dataclass(frozen=True)
class ResolvedTypeGraph:
    """Outcome of one worklist run."""

    records: tuple[RecordDefinition, ...]
    passes: int

    def record_names(self) -> tuple[str, ...]:
        """Return record names in discovery order."""
        return tuple(record.name for record in self.records)

    def get(self, name: str) -> RecordDefinition:
        """Return the record registered under the given type name."""
        for record in self.records:
            if record.name == name:
                return record
        raise KeyError(name)
