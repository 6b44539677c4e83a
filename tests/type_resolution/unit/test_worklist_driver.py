"""Worklist driver tests."""

from __future__ import annotations

import pytest
from schema_dto_generator.schema_modeling.schema_inference import infer_schema
from schema_dto_generator.schema_modeling.schema_parsing import parse_schema_definitions
from schema_dto_generator.type_resolution.resolution_context import ResolutionContext
from schema_dto_generator.type_resolution.resolution_models import (
    FieldDefinition,
    ListType,
    MapType,
    NamedRecordType,
    PrimitiveType,
    PrimitiveTypeKind,
    ResolutionPolicy,
    UnknownType,
)
from schema_dto_generator.type_resolution.worklist_driver import resolve_type_graph

_CITY = {"type": "object", "properties": {"city": {"type": "string"}}}


def _resolve(definitions: dict, **context_options):
    context = ResolutionContext(**context_options)
    return resolve_type_graph(parse_schema_definitions(definitions), context)


def test_object_definition_becomes_record_with_camel_case_fields() -> None:
    graph = _resolve(
        {
            "X": {
                "type": "object",
                "properties": {"id": {"type": "integer"}, "user_name": {"type": "string"}},
                "required": ["id"],
            }
        }
    )

    assert graph.record_names() == ("X",)
    assert graph.passes == 1
    assert graph.get("X").fields == (
        FieldDefinition(
            property_name="id",
            identifier="id",
            type_ref=PrimitiveType(kind=PrimitiveTypeKind.INTEGER),
            required=True,
        ),
        FieldDefinition(
            property_name="user_name",
            identifier="userName",
            type_ref=PrimitiveType(kind=PrimitiveTypeKind.STRING),
            required=False,
            wire_key="user_name",
        ),
    )


def test_identical_nested_shapes_share_one_promoted_record() -> None:
    graph = _resolve(
        {"Person": {"type": "object", "properties": {"home": _CITY, "office": _CITY}}}
    )

    assert graph.record_names() == ("Person", "Home")
    person = graph.get("Person")
    assert [field.type_ref for field in person.fields] == [
        NamedRecordType(name="Home"),
        NamedRecordType(name="Home"),
    ]
    assert not graph.get("Home").is_inline


def test_sibling_references_share_the_referenced_record() -> None:
    graph = _resolve(
        {
            "Address": _CITY,
            "Person": {
                "type": "object",
                "properties": {
                    "home": {"$ref": "#/definitions/Address"},
                    "office": {"$ref": "#/definitions/Address"},
                },
            },
        }
    )

    assert graph.record_names() == ("Address", "Person")
    assert {field.type_ref for field in graph.get("Person").fields} == {
        NamedRecordType(name="Address")
    }


def test_nested_shape_matching_top_level_definition_reuses_it() -> None:
    graph = _resolve(
        {
            "Address": _CITY,
            "Person": {"type": "object", "properties": {"home": _CITY}},
        }
    )

    assert graph.record_names() == ("Address", "Person")
    assert graph.get("Person").fields[0].type_ref == NamedRecordType(name="Address")


def test_identical_top_level_definitions_alias_the_first() -> None:
    graph = _resolve(
        {
            "Address": _CITY,
            "Location": _CITY,
            "Person": {
                "type": "object",
                "properties": {"where": {"$ref": "#/definitions/Location"}},
            },
        }
    )

    assert graph.record_names() == ("Address", "Person")
    assert graph.get("Person").fields[0].type_ref == NamedRecordType(name="Address")


def test_records_have_one_definition_per_distinct_shape() -> None:
    shapes = [
        {"type": "object", "properties": {f"p{index}": {"type": "string"}}}
        for index in range(3)
    ]
    properties = {f"n{index}": shapes[index % 3] for index in range(7)}

    graph = _resolve({"Root": {"type": "object", "properties": properties}})

    assert len(graph.records) == 4
    assert len({record.signature for record in graph.records}) == 4
    assert len(set(graph.record_names())) == 4


def test_resolution_is_idempotent_across_fresh_contexts() -> None:
    definitions = {
        "Order": {
            "type": "object",
            "properties": {
                "items": {"type": "array", "items": _CITY},
                "shipping": _CITY,
                "placed_at": {"type": "string", "format": "date-time"},
            },
            "required": ["items"],
        }
    }

    assert _resolve(definitions) == _resolve(definitions)


def test_nested_chain_needs_one_pass_per_level() -> None:
    leaf = {"type": "object", "properties": {"x": {"type": "integer"}}}
    graph = _resolve(
        {
            "Root": {
                "type": "object",
                "properties": {
                    "a": {
                        "type": "object",
                        "properties": {
                            "b": {"type": "object", "properties": {"c": leaf}},
                        },
                    }
                },
            }
        }
    )

    assert graph.record_names() == ("Root", "A", "B", "C")
    assert graph.passes == 4
    assert graph.passes <= len(graph.records)


def test_self_reference_resolves_to_own_record() -> None:
    graph = _resolve(
        {
            "Node": {
                "type": "object",
                "properties": {
                    "value": {"type": "integer"},
                    "children": {"type": "array", "items": {"$ref": "#/definitions/Node"}},
                },
            }
        }
    )

    assert graph.record_names() == ("Node",)
    assert graph.passes == 1
    assert graph.get("Node").fields[1].type_ref == ListType(item=NamedRecordType(name="Node"))


def test_mutual_references_terminate() -> None:
    graph = _resolve(
        {
            "Author": {
                "type": "object",
                "properties": {"books": {"type": "array", "items": {"$ref": "#/definitions/Book"}}},
            },
            "Book": {
                "type": "object",
                "properties": {"author": {"$ref": "#/definitions/Author"}},
            },
        }
    )

    assert graph.record_names() == ("Author", "Book")
    assert graph.get("Book").fields[0].type_ref == NamedRecordType(name="Author")


def test_colliding_names_with_different_shapes_are_uniquified() -> None:
    graph = _resolve(
        {
            "Item": {"type": "object", "properties": {"id": {"type": "integer"}}},
            "Order": {
                "type": "object",
                "properties": {
                    "item": {"type": "object", "properties": {"sku": {"type": "string"}}}
                },
            },
        }
    )

    assert graph.record_names() == ("Item", "Order", "Item2")
    assert graph.get("Order").fields[0].type_ref == NamedRecordType(name="Item2")


def test_definition_keys_sanitizing_to_same_name_are_uniquified() -> None:
    graph = _resolve(
        {
            "user-info": {"type": "object", "properties": {"id": {"type": "integer"}}},
            "user_info": {"type": "object", "properties": {"name": {"type": "string"}}},
        }
    )

    assert graph.record_names() == ("UserInfo", "UserInfo2")


def test_non_object_definitions_become_empty_records() -> None:
    graph = _resolve({"Status": {"type": "string"}})

    assert graph.record_names() == ("Status",)
    assert graph.get("Status").fields == ()


def test_inline_policy_scopes_small_objects_to_host() -> None:
    example = {
        "id": 1,
        "user": {"name": "ada"},
        "tags": [{"label": "vip"}],
        "meta": {"a": 1, "b": 2, "c": 3, "d": 4},
    }
    context = ResolutionContext(policy=ResolutionPolicy.INLINE, inline_threshold=3)

    graph = resolve_type_graph({"Inferred": infer_schema(example)}, context)

    assert graph.record_names() == ("Inferred", "User", "Tags")
    assert graph.passes == 2
    assert graph.get("User").scope == "Inferred"
    assert graph.get("Tags").scope == "Inferred"
    assert graph.get("Inferred").scope is None
    field_types = {field.identifier: field.type_ref for field in graph.get("Inferred").fields}
    assert field_types["meta"] == MapType()
    assert field_types["tags"] == ListType(item=NamedRecordType(name="Tags"))


def test_inline_records_are_not_deduplicated_and_take_host_qualifier() -> None:
    user = {"type": "object", "properties": {"id": {"type": "integer"}}}
    graph = _resolve(
        {
            "A": {"type": "object", "properties": {"user": user}},
            "B": {"type": "object", "properties": {"user": user, "note": {"type": "string"}}},
        },
        policy=ResolutionPolicy.INLINE,
    )

    assert graph.record_names() == ("A", "B", "User", "BUser")
    assert graph.get("User").scope == "A"
    assert graph.get("BUser").scope == "B"


def test_nested_inline_records_share_the_outermost_host() -> None:
    graph = _resolve(
        {
            "Order": {
                "type": "object",
                "properties": {
                    "customer": {
                        "type": "object",
                        "properties": {"address": _CITY},
                    }
                },
            }
        },
        policy=ResolutionPolicy.INLINE,
    )

    assert graph.record_names() == ("Order", "Customer", "Address")
    assert graph.get("Address").scope == "Order"


@pytest.mark.parametrize("policy", list(ResolutionPolicy))
def test_every_named_reference_points_at_a_record(policy: ResolutionPolicy) -> None:
    graph = _resolve(
        {
            "Pet": {
                "type": "object",
                "properties": {
                    "owner": {"$ref": "#/definitions/Owner"},
                    "tags": {"type": "array", "items": _CITY},
                    "missing": {"$ref": "#/definitions/Nowhere"},
                },
            },
            "Owner": {"type": "object", "properties": {"home": _CITY}},
        },
        policy=policy,
    )

    names = set(graph.record_names())
    for record in graph.records:
        for field in record.fields:
            type_ref = field.type_ref
            while isinstance(type_ref, ListType):
                type_ref = type_ref.item
            if isinstance(type_ref, NamedRecordType):
                assert type_ref.name in names


def test_field_identifiers_are_unique_within_a_record() -> None:
    graph = _resolve(
        {
            "User": {
                "type": "object",
                "properties": {"user_name": {"type": "string"}, "userName": {"type": "string"}},
            }
        }
    )

    fields = graph.get("User").fields
    assert [field.identifier for field in fields] == ["userName", "userName2"]
    assert [field.wire_key for field in fields] == ["user_name", "userName"]


@pytest.mark.parametrize("reference_first", [True, False])
def test_references_only_target_declared_definitions(reference_first: bool) -> None:
    properties = {"home": _CITY, "other": {"$ref": "#/definitions/Home"}}
    if reference_first:
        properties = {"other": properties["other"], "home": properties["home"]}

    graph = _resolve({"Person": {"type": "object", "properties": properties}})

    field_types = {field.identifier: field.type_ref for field in graph.get("Person").fields}
    assert field_types["home"] == NamedRecordType(name="Home")
    assert field_types["other"] == UnknownType()


def test_punctuated_property_names_become_valid_identifiers() -> None:
    graph = _resolve(
        {"X": {"type": "object", "properties": {"x-rate": {"type": "integer"}}}}
    )

    (field,) = graph.get("X").fields
    assert field.identifier == "xRate"
    assert field.wire_key == "x-rate"
