"""Schema document loading and normalization service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_dto_generator.schema_modeling import (
    SchemaError,
    infer_schema,
    parse_schema_definitions,
)
from schema_dto_generator.type_resolution.resolution_models import ResolutionPolicy

from .document_models import DefinitionOrigin, SchemaSource

INFERRED_DEFINITION_KEY = "Inferred"
_JSON_MEDIA_TYPE = "application/json"

_LOGGER = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when no schema definitions can be obtained from a document."""


def load_schema_source(document_path: Path | str) -> SchemaSource:
    """Read, decode and normalize one OpenAPI/JSON-Schema or example document."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"Schema document not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read schema document {path}: {exc}") from exc
    parsed = decode_document(text, json_input=is_json_document(path))
    return build_schema_source(parsed, path=path)


def is_json_document(path: Path) -> bool:
    """Return True for inputs decoded as JSON rather than YAML."""
    return path.suffix.lower() == ".json"


def default_policy_for(path: Path) -> ResolutionPolicy:
    """JSON inputs inline small nested objects; other inputs promote them."""
    return ResolutionPolicy.INLINE if is_json_document(path) else ResolutionPolicy.PROMOTE


def decode_document(text: str, *, json_input: bool) -> Any:
    """Decode document text into plain Python containers."""
    try:
        if json_input:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentError(f"Error parsing schema document: {exc}") from exc


def build_schema_source(parsed: Any, *, path: Path) -> SchemaSource:
    """Obtain top-level definitions from a decoded document.

    Declared `components/schemas` or `definitions` win. Without them an
    example response found under `paths` is inferred, and a document
    without `paths` is treated as an example payload itself.
    """
    policy = default_policy_for(path)

    if isinstance(parsed, list):
        if not parsed:
            raise DocumentError("Input document is an empty list. Nothing to infer.")
        _LOGGER.info("Input document is a list. Inferring schema from first element.")
        return _inferred_source(parsed[0], path, DefinitionOrigin.LIST_ELEMENT, policy)

    if not isinstance(parsed, Mapping):
        raise DocumentError("Unexpected document format; expected a mapping or a list.")

    declared = _declared_definitions(parsed)
    if declared is not None:
        try:
            definitions = parse_schema_definitions(declared)
        except SchemaError as exc:
            raise DocumentError(str(exc)) from exc
        if not definitions:
            raise DocumentError("Schema document declares no schema definitions.")
        return SchemaSource(
            path=path,
            definitions=definitions,
            origin=DefinitionOrigin.DECLARED,
            default_policy=policy,
        )

    if "paths" in parsed:
        example = find_response_example(parsed["paths"])
        if example is None:
            raise DocumentError("No schemas could be inferred from the document.")
        _LOGGER.info("No global schemas found. Inferred schema from example response.")
        return _inferred_source(example, path, DefinitionOrigin.RESPONSE_EXAMPLE, policy)

    _LOGGER.info("No global schemas or paths found. Inferring schema from entire document.")
    return _inferred_source(parsed, path, DefinitionOrigin.WHOLE_DOCUMENT, policy)


def find_response_example(paths: Any) -> Any | None:
    """Return the first JSON response example declared under `paths`."""
    if not isinstance(paths, Mapping):
        return None
    for path_item in paths.values():
        if not isinstance(path_item, Mapping):
            continue
        for operation in path_item.values():
            example = _operation_example(operation)
            if example is not None:
                return example
    return None


def _operation_example(operation: Any) -> Any | None:
    if not isinstance(operation, Mapping):
        return None
    responses = operation.get("responses")
    if not isinstance(responses, Mapping):
        return None
    for response in responses.values():
        if not isinstance(response, Mapping):
            continue
        content = response.get("content")
        if not isinstance(content, Mapping):
            continue
        media = content.get(_JSON_MEDIA_TYPE)
        if not isinstance(media, Mapping):
            continue
        if "example" in media:
            return media["example"]
        schema_part = media.get("schema")
        if isinstance(schema_part, Mapping) and "example" in schema_part:
            return schema_part["example"]
    return None


def _declared_definitions(document: Mapping[str, Any]) -> Any | None:
    components = document.get("components")
    if isinstance(components, Mapping) and components.get("schemas") is not None:
        return components["schemas"]
    return document.get("definitions")


def _inferred_source(
    example: Any, path: Path, origin: DefinitionOrigin, policy: ResolutionPolicy
) -> SchemaSource:
    return SchemaSource(
        path=path,
        definitions={INFERRED_DEFINITION_KEY: infer_schema(example)},
        origin=origin,
        default_policy=policy,
    )
