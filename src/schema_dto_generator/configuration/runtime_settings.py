"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from schema_dto_generator.type_resolution.resolution_context import DEFAULT_INLINE_THRESHOLD
from schema_dto_generator.type_resolution.resolution_models import ResolutionPolicy

DEFAULT_CLASS_SUFFIX = "ResponseDto"
DEFAULT_FILE_SUFFIX = "_response_dto"


@dataclass(frozen=True)
class ResolutionSettings:
    """Nested-object resolution settings.

    A `policy` of None selects the policy from the input file type.
    """

    policy: ResolutionPolicy | None = None
    inline_threshold: int = DEFAULT_INLINE_THRESHOLD


@dataclass(frozen=True)
class OutputSettings:
    """Generated source naming and placement."""

    directory: Path | None = None
    class_suffix: str = DEFAULT_CLASS_SUFFIX
    file_suffix: str = DEFAULT_FILE_SUFFIX


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level configuration aggregate."""

    path: Path | None = None
    resolution: ResolutionSettings = field(default_factory=ResolutionSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
