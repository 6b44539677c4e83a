"""Recursive schema-to-type resolution."""

from __future__ import annotations

import logging

from schema_dto_generator.schema_modeling.schema_models import (
    ArraySchema,
    ObjectSchema,
    PrimitiveKind,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
)

from .resolution_context import RegistryEntry, ResolutionContext
from .resolution_models import (
    ListType,
    MapType,
    NamedRecordType,
    PrimitiveType,
    PrimitiveTypeKind,
    ResolutionPolicy,
    TypeReference,
    UnknownType,
)
from .signature_hasher import signature_of

_LOGGER = logging.getLogger(__name__)

_DATE_FORMATS = frozenset({"date", "date-time"})
_PRIMITIVE_TYPE_KINDS = {
    PrimitiveKind.STRING: PrimitiveTypeKind.STRING,
    PrimitiveKind.INTEGER: PrimitiveTypeKind.INTEGER,
    PrimitiveKind.NUMBER: PrimitiveTypeKind.NUMBER,
    PrimitiveKind.BOOLEAN: PrimitiveTypeKind.BOOLEAN,
}


def resolve(
    node: SchemaNode,
    context: ResolutionContext,
    property_name_hint: str | None = None,
    policy: ResolutionPolicy | None = None,
    *,
    enclosing: RegistryEntry | None = None,
) -> TypeReference:
    """Resolve a schema node to a type reference.

    Nested object schemas may register new pending records in the context.
    Unresolvable leaves degrade to `UnknownType` instead of failing.
    """
    active_policy = policy or context.policy
    if isinstance(node, ReferenceSchema):
        return _resolve_reference(node, context)
    if isinstance(node, ObjectSchema):
        return _resolve_object(node, context, property_name_hint, active_policy, enclosing)
    if isinstance(node, ArraySchema):
        item_type = resolve(
            node.items, context, property_name_hint, active_policy, enclosing=enclosing
        )
        return ListType(item=item_type)
    if isinstance(node, PrimitiveSchema):
        return _resolve_primitive(node)
    return UnknownType()


def _resolve_reference(node: ReferenceSchema, context: ResolutionContext) -> TypeReference:
    key = node.target_key
    name = context.registry.lookup_reference(key)
    if name is None:
        _LOGGER.debug("Unresolved schema reference %s; using unknown type.", node.ref)
        return UnknownType()
    if context.registry.is_in_progress(key):
        _LOGGER.debug("Forward reference to %s while it is being materialized.", name)
    return NamedRecordType(name=name)


def _resolve_object(
    node: ObjectSchema,
    context: ResolutionContext,
    property_name_hint: str | None,
    policy: ResolutionPolicy,
    enclosing: RegistryEntry | None,
) -> TypeReference:
    if not node.has_properties:
        return MapType()

    if policy is ResolutionPolicy.INLINE:
        if len(node.properties) > context.inline_threshold:
            return MapType()
        name = context.registry.register_inline(
            property_name_hint, node, signature_of(node), enclosing=enclosing
        )
        _LOGGER.debug("Inlined nested record %s.", name)
        return NamedRecordType(name=name)

    signature = signature_of(node)
    existing = context.registry.canonical_name(signature)
    if existing is not None:
        return NamedRecordType(name=existing)
    name = context.registry.register_promoted(property_name_hint, node, signature)
    _LOGGER.debug("Promoted nested record %s.", name)
    return NamedRecordType(name=name)


def _resolve_primitive(node: PrimitiveSchema) -> TypeReference:
    if node.kind is PrimitiveKind.STRING and node.format in _DATE_FORMATS:
        return PrimitiveType(kind=PrimitiveTypeKind.DATE_TIME)
    return PrimitiveType(kind=_PRIMITIVE_TYPE_KINDS[node.kind])
