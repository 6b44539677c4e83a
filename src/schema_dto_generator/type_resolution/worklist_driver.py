"""Fixpoint driver materializing discovered record definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from schema_dto_generator.schema_modeling.schema_models import ObjectSchema, SchemaNode

from .naming_service import field_name, uniquify
from .resolution_context import RegistryEntry, ResolutionContext
from .resolution_models import FieldDefinition, RecordDefinition, ResolvedTypeGraph
from .type_resolver import resolve

_LOGGER = logging.getLogger(__name__)


def resolve_type_graph(
    definitions: Mapping[str, SchemaNode], context: ResolutionContext
) -> ResolvedTypeGraph:
    """Resolve top-level definitions and every record they discover.

    Each pass materializes the keys pending at its start; promotion during a
    pass appends keys for the next one. The loop stops after a pass that
    leaves nothing unprocessed.
    """
    registry = context.registry
    for key, schema in definitions.items():
        name = registry.seed(key, schema)
        if not registry.has_entry(key):
            _LOGGER.info("Definition %s has the same shape as %s; reusing it.", key, name)

    passes = 0
    while True:
        batch = registry.pending_keys()
        if not batch:
            break
        passes += 1
        _LOGGER.debug("Resolution pass %d over %d pending definitions.", passes, len(batch))
        for key in batch:
            entry = registry.begin(key)
            registry.complete(key, _materialize(entry, context))

    records = registry.records()
    _LOGGER.info("Resolved %d record definitions in %d passes.", len(records), passes)
    return ResolvedTypeGraph(records=records, passes=passes)


def _materialize(entry: RegistryEntry, context: ResolutionContext) -> RecordDefinition:
    schema = entry.schema
    fields: list[FieldDefinition] = []
    identifiers: set[str] = set()
    if isinstance(schema, ObjectSchema):
        for property_name, property_schema in schema.properties:
            identifier = uniquify(field_name(property_name), identifiers)
            identifiers.add(identifier)
            fields.append(
                FieldDefinition(
                    property_name=property_name,
                    identifier=identifier,
                    type_ref=resolve(property_schema, context, property_name, enclosing=entry),
                    required=property_name in schema.required,
                    wire_key=property_name if identifier != property_name else None,
                )
            )
    return RecordDefinition(
        name=entry.type_name,
        fields=tuple(fields),
        signature=entry.signature,
        scope=entry.scope,
    )
