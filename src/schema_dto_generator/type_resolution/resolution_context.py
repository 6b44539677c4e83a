"""Per-run resolution state."""

from __future__ import annotations

from dataclasses import dataclass

from schema_dto_generator.schema_modeling.schema_models import ObjectSchema, SchemaNode

from .naming_service import type_name, uniquify
from .resolution_models import RecordDefinition, ResolutionPolicy
from .signature_hasher import signature_of

DEFAULT_INLINE_THRESHOLD = 3
POSITIONAL_NAME_PREFIX = "InlineRecord"


@dataclass(frozen=True)
class RegistryEntry:
    """Discovered schema waiting to be, or already, materialized as a record."""

    key: str
    type_name: str
    schema: SchemaNode
    signature: str
    scope: str | None = None

    @property
    def host(self) -> str:
        """Return the shared record whose output unit contains this entry."""
        return self.scope or self.type_name


class DefinitionRegistry:
    """Registry of record definitions discovered during one run.

    Keys are either top-level schema keys or synthesized type names. Every
    key moves from pending to processed exactly once.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._declared_names: dict[str, str] = {}
        self._names_by_signature: dict[str, str] = {}
        self._records: dict[str, RecordDefinition] = {}
        self._processed: set[str] = set()
        self._in_progress: set[str] = set()
        self._taken: set[str] = set()
        self._positional_counter = 0

    def seed(self, key: str, schema: SchemaNode) -> str:
        """Register a top-level definition and return its canonical type name."""
        signature = signature_of(schema)
        dedupable = isinstance(schema, ObjectSchema) and schema.has_properties
        if dedupable:
            canonical = self._names_by_signature.get(signature)
            if canonical is not None:
                self._declared_names[key] = canonical
                self._taken.add(key)
                return canonical
        name = uniquify(type_name(key), self._taken)
        self._add(RegistryEntry(key=key, type_name=name, schema=schema, signature=signature))
        self._declared_names[key] = name
        if dedupable:
            self._names_by_signature[signature] = name
        return name

    def register_promoted(self, hint: str | None, schema: SchemaNode, signature: str) -> str:
        """Register a shared record for a not-yet-seen signature."""
        name = uniquify(self._candidate_name(hint), self._taken)
        self._add(RegistryEntry(key=name, type_name=name, schema=schema, signature=signature))
        self._names_by_signature[signature] = name
        return name

    def register_inline(
        self,
        hint: str | None,
        schema: SchemaNode,
        signature: str,
        *,
        enclosing: RegistryEntry | None,
    ) -> str:
        """Register an anonymous record scoped to the enclosing record's host."""
        qualifier = enclosing.type_name if enclosing else None
        name = uniquify(self._candidate_name(hint), self._taken, qualifier=qualifier)
        self._add(
            RegistryEntry(
                key=name,
                type_name=name,
                schema=schema,
                signature=signature,
                scope=enclosing.host if enclosing else None,
            )
        )
        return name

    def canonical_name(self, signature: str) -> str | None:
        """Return the shared type name registered for a signature."""
        return self._names_by_signature.get(signature)

    def lookup_reference(self, key: str) -> str | None:
        """Return the type name bound to a declared schema key, if any.

        Names synthesized for nested objects are not reference targets.
        """
        return self._declared_names.get(key)

    def has_entry(self, key: str) -> bool:
        """Return True when the key owns a record rather than aliasing one."""
        return key in self._entries

    def entry(self, key: str) -> RegistryEntry:
        """Return the entry registered under a key."""
        return self._entries[key]

    def pending_keys(self) -> tuple[str, ...]:
        """Return discovered keys that are not processed yet, in discovery order."""
        return tuple(key for key in self._entries if key not in self._processed)

    def is_in_progress(self, key: str) -> bool:
        """Return True while the key's record is being materialized."""
        return key in self._in_progress

    def begin(self, key: str) -> RegistryEntry:
        """Mark a pending key as in progress and return its entry."""
        if key in self._processed:
            raise ValueError(f"Schema key already processed: {key}")
        self._in_progress.add(key)
        return self._entries[key]

    def complete(self, key: str, record: RecordDefinition) -> None:
        """Store the materialized record and move the key to processed."""
        self._in_progress.discard(key)
        self._records[key] = record
        self._processed.add(key)

    def record_for(self, key: str) -> RecordDefinition | None:
        """Return the materialized record for a key."""
        return self._records.get(key)

    def records(self) -> tuple[RecordDefinition, ...]:
        """Return materialized records in first-discovery order."""
        return tuple(self._records[key] for key in self._entries if key in self._records)

    def _candidate_name(self, hint: str | None) -> str:
        if hint:
            return type_name(hint)
        self._positional_counter += 1
        return f"{POSITIONAL_NAME_PREFIX}{self._positional_counter}"

    def _add(self, entry: RegistryEntry) -> None:
        self._entries[entry.key] = entry
        self._taken.update((entry.key, entry.type_name))


class ResolutionContext:
    """State for one generation run, threaded through every resolver call."""

    def __init__(
        self,
        *,
        policy: ResolutionPolicy = ResolutionPolicy.PROMOTE,
        inline_threshold: int = DEFAULT_INLINE_THRESHOLD,
    ) -> None:
        if isinstance(inline_threshold, bool) or inline_threshold < 0:
            raise ValueError("inline_threshold must be a non-negative integer.")
        self.policy = policy
        self.inline_threshold = inline_threshold
        self.registry = DefinitionRegistry()
