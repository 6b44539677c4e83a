"""Generation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_dto_generator.configuration import ConfigurationError, load_generator_settings
from schema_dto_generator.dart_rendering import (
    RenderError,
    render_output_units,
    write_output_units,
)
from schema_dto_generator.document_loading import DocumentError, load_schema_source
from schema_dto_generator.type_resolution import (
    ResolutionContext,
    ResolutionPolicy,
    resolve_type_graph,
)

from .run_contracts import GenerationArtifacts, GenerationOutcome, GenerationRequest

DEFAULT_OUTPUT_DIRNAME = "gen"

_LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_dto_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Resolve one schema document into Dart DTO sources and write them.

    Every call builds its own resolution context, so batch runs over several
    documents never share type names or signatures.
    """
    artifacts = _load_generation_artifacts(request.config_path, request.input_path)
    settings = artifacts.settings
    policy = _select_policy(request, artifacts)
    inline_threshold = (
        request.inline_threshold
        if request.inline_threshold is not None
        else settings.resolution.inline_threshold
    )
    try:
        context = ResolutionContext(policy=policy, inline_threshold=inline_threshold)
    except ValueError as exc:
        raise GenerationError(str(exc)) from exc

    _LOGGER.info(
        "Resolving %d definitions from %s with %s policy.",
        len(artifacts.source.definitions),
        artifacts.source.path,
        policy.value,
    )
    graph = resolve_type_graph(artifacts.source.definitions, context)
    units = render_output_units(
        graph.records,
        class_suffix=settings.output.class_suffix,
        file_suffix=settings.output.file_suffix,
    )

    output_dir = _resolve_output_dir(request, artifacts)
    written_paths: tuple[Path, ...] = ()
    if not request.dry_run:
        try:
            written_paths = write_output_units(units, output_dir)
        except RenderError as exc:
            raise GenerationError(str(exc)) from exc

    return GenerationOutcome(
        input_path=artifacts.source.path.resolve(),
        output_dir=output_dir.resolve(),
        policy=policy,
        record_names=graph.record_names(),
        file_names=tuple(unit.file_name for unit in units),
        written_paths=written_paths,
        dry_run=request.dry_run,
    )


def _load_generation_artifacts(config_path: str | None, input_path: str) -> GenerationArtifacts:
    try:
        settings = load_generator_settings(config_path)
        source = load_schema_source(input_path)
    except (ConfigurationError, DocumentError, OSError) as exc:
        raise GenerationError(str(exc)) from exc
    return GenerationArtifacts(settings=settings, source=source)


def _select_policy(request: GenerationRequest, artifacts: GenerationArtifacts) -> ResolutionPolicy:
    return (
        request.policy
        or artifacts.settings.resolution.policy
        or artifacts.source.default_policy
    )


def _resolve_output_dir(request: GenerationRequest, artifacts: GenerationArtifacts) -> Path:
    if request.output_dir:
        return Path(request.output_dir)
    if artifacts.settings.output.directory is not None:
        return artifacts.settings.output.directory
    return artifacts.source.path.resolve().parent / DEFAULT_OUTPUT_DIRNAME
