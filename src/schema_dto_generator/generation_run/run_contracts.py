"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_dto_generator.configuration.runtime_settings import GeneratorSettings
from schema_dto_generator.document_loading.document_models import SchemaSource
from schema_dto_generator.type_resolution.resolution_models import ResolutionPolicy


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating DTOs from one document."""

    input_path: str
    config_path: str | None = None
    output_dir: str | None = None
    policy: ResolutionPolicy | None = None
    inline_threshold: int | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    input_path: Path
    output_dir: Path
    policy: ResolutionPolicy
    record_names: tuple[str, ...]
    file_names: tuple[str, ...]
    written_paths: tuple[Path, ...]
    dry_run: bool


@dataclass(frozen=True)
class GenerationArtifacts:
    """Loaded domain artifacts required during a generation run."""

    settings: GeneratorSettings
    source: SchemaSource
