"""Schema modeling entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveKind(str, Enum):
    """Scalar schema kinds."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ObjectSchema:
    """Object schema with ordered property declarations."""

    properties: tuple[tuple[str, SchemaNode], ...] = ()
    required: frozenset[str] = frozenset()

    @property
    def has_properties(self) -> bool:
        """Return True when at least one property is declared."""
        return bool(self.properties)


@dataclass(frozen=True)
class ArraySchema:
    """Array schema with a single item schema."""

    items: SchemaNode


@dataclass(frozen=True)
class PrimitiveSchema:
    """Scalar schema, optionally carrying a format such as `date-time`."""

    kind: PrimitiveKind
    format: str | None = None


@dataclass(frozen=True)
class ReferenceSchema:
    """Same-document `$ref` pointer."""

    ref: str

    @property
    def target_key(self) -> str:
        """Return the final path segment of the reference."""
        return self.ref.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class UnknownSchema:
    """Schema without a resolvable type."""

    type_tag: str | None = None


SchemaNode = ObjectSchema | ArraySchema | PrimitiveSchema | ReferenceSchema | UnknownSchema
