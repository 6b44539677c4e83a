"""Dart `json_serializable` DTO rendering service."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence

from schema_dto_generator.configuration.runtime_settings import (
    DEFAULT_CLASS_SUFFIX,
    DEFAULT_FILE_SUFFIX,
)
from schema_dto_generator.type_resolution.naming_service import snake_case, uniquify
from schema_dto_generator.type_resolution.resolution_models import (
    FieldDefinition,
    ListType,
    MapType,
    NamedRecordType,
    PrimitiveType,
    PrimitiveTypeKind,
    RecordDefinition,
    TypeReference,
)

from .render_models import RenderedUnit

_ANNOTATION_IMPORT = "import 'package:json_annotation/json_annotation.dart';"
_DART_PRIMITIVES = {
    PrimitiveTypeKind.STRING: "String",
    PrimitiveTypeKind.INTEGER: "int",
    PrimitiveTypeKind.NUMBER: "double",
    PrimitiveTypeKind.BOOLEAN: "bool",
    PrimitiveTypeKind.DATE_TIME: "DateTime",
}
_DART_MAP = "Map<String, dynamic>"
_DART_DYNAMIC = "dynamic"


def dto_class_name(record_name: str, class_suffix: str = DEFAULT_CLASS_SUFFIX) -> str:
    """Return the Dart class name for a record."""
    return f"{record_name}{class_suffix}"


def dto_file_name(record_name: str, file_suffix: str = DEFAULT_FILE_SUFFIX) -> str:
    """Return the Dart file name hosting a shared record."""
    return f"{snake_case(record_name)}{file_suffix}.dart"


def render_dart_type(type_ref: TypeReference, class_suffix: str = DEFAULT_CLASS_SUFFIX) -> str:
    """Render a resolved type reference as a Dart type expression."""
    if isinstance(type_ref, PrimitiveType):
        return _DART_PRIMITIVES[type_ref.kind]
    if isinstance(type_ref, NamedRecordType):
        return dto_class_name(type_ref.name, class_suffix)
    if isinstance(type_ref, ListType):
        return f"List<{render_dart_type(type_ref.item, class_suffix)}>"
    if isinstance(type_ref, MapType):
        return _DART_MAP
    return _DART_DYNAMIC


def render_output_units(
    records: Sequence[RecordDefinition],
    *,
    class_suffix: str = DEFAULT_CLASS_SUFFIX,
    file_suffix: str = DEFAULT_FILE_SUFFIX,
) -> tuple[RenderedUnit, ...]:
    """Group records into one Dart file per shared record and render them.

    Inlined records are appended to the file of the shared record that
    hosts them; references to records hosted elsewhere become imports.
    Record names that snake-case to the same file stem get numbered stems.
    """
    host_by_name = {record.name: record.scope or record.name for record in records}
    inlined_by_host: dict[str, list[RecordDefinition]] = defaultdict(list)
    for record in records:
        if record.scope is not None:
            inlined_by_host[record.scope].append(record)
    file_names = _assign_file_names(
        [record.name for record in records if record.scope is None], file_suffix
    )

    units: list[RenderedUnit] = []
    for record in records:
        if record.scope is not None:
            continue
        members = (record, *inlined_by_host[record.name])
        imported_hosts = sorted(
            {
                host_by_name.get(name, name)
                for member in members
                for name in _referenced_names(member)
                if host_by_name.get(name, name) != record.name
            }
        )
        file_name = file_names[record.name]
        units.append(
            RenderedUnit(
                file_name=file_name,
                record_names=tuple(member.name for member in members),
                source=_render_unit_source(
                    file_name=file_name,
                    members=members,
                    imports=[
                        file_names.get(host) or dto_file_name(host, file_suffix)
                        for host in imported_hosts
                    ],
                    class_suffix=class_suffix,
                ),
            )
        )
    return tuple(units)


def render_record_class(record: RecordDefinition, class_suffix: str = DEFAULT_CLASS_SUFFIX) -> str:
    """Render one record as an annotated Dart class."""
    class_name = dto_class_name(record.name, class_suffix)
    lines = ["@JsonSerializable(explicitToJson: true)", f"class {class_name} {{"]
    for field in record.fields:
        if field.wire_key is not None:
            lines.append(f'  @JsonKey(name: "{_escape(field.wire_key)}")')
        lines.append(f"  final {_field_type(field, class_suffix)} {field.identifier};")
    if record.fields:
        lines.append("")
    lines.append(f"  {_constructor(class_name, record.fields)}")
    lines.append("")
    lines.append(
        f"  factory {class_name}.fromJson(Map<String, dynamic> json) =>"
        f" _${class_name}FromJson(json);"
    )
    lines.append(f"  Map<String, dynamic> toJson() => _${class_name}ToJson(this);")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render_unit_source(
    *,
    file_name: str,
    members: Sequence[RecordDefinition],
    imports: Sequence[str],
    class_suffix: str,
) -> str:
    header = [_ANNOTATION_IMPORT]
    header.extend(f"import '{path}';" for path in imports)
    header.append("")
    header.append(f"part '{file_name.removesuffix('.dart')}.g.dart';")
    classes = [render_record_class(member, class_suffix) for member in members]
    return "\n".join(header) + "\n\n" + "\n".join(classes)


def _assign_file_names(host_names: Sequence[str], file_suffix: str) -> dict[str, str]:
    stems: set[str] = set()
    file_names: dict[str, str] = {}
    for name in host_names:
        stem = uniquify(snake_case(name), stems)
        stems.add(stem)
        file_names[name] = f"{stem}{file_suffix}.dart"
    return file_names


def _field_type(field: FieldDefinition, class_suffix: str) -> str:
    dart_type = render_dart_type(field.type_ref, class_suffix)
    if field.required or dart_type == _DART_DYNAMIC:
        return dart_type
    return f"{dart_type}?"


def _constructor(class_name: str, fields: Sequence[FieldDefinition]) -> str:
    if not fields:
        return f"{class_name}();"
    parameters = ", ".join(
        f"required this.{field.identifier}" if field.required else f"this.{field.identifier}"
        for field in fields
    )
    return f"{class_name}({{{parameters}}});"


def _referenced_names(record: RecordDefinition) -> Iterator[str]:
    for field in record.fields:
        type_ref: TypeReference = field.type_ref
        while isinstance(type_ref, ListType):
            type_ref = type_ref.item
        if isinstance(type_ref, NamedRecordType):
            yield type_ref.name


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
