"""Document loading entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from schema_dto_generator.schema_modeling.schema_models import SchemaNode
from schema_dto_generator.type_resolution.resolution_models import ResolutionPolicy


class DefinitionOrigin(str, Enum):
    """Strategy that produced the top-level definitions."""

    DECLARED = "declared"
    RESPONSE_EXAMPLE = "response_example"
    LIST_ELEMENT = "list_element"
    WHOLE_DOCUMENT = "whole_document"


@dataclass(frozen=True)
class SchemaSource:
    """Normalized input document ready for type resolution."""

    path: Path
    definitions: Mapping[str, SchemaNode]
    origin: DefinitionOrigin
    default_policy: ResolutionPolicy
