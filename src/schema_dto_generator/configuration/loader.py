"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_dto_generator.type_resolution.resolution_models import ResolutionPolicy

from .runtime_settings import (
    DEFAULT_CLASS_SUFFIX,
    DEFAULT_FILE_SUFFIX,
    GeneratorSettings,
    OutputSettings,
    ResolutionSettings,
)

_AUTO_POLICY = "auto"
_IDENTIFIER_PART = re.compile(r"^[A-Za-z0-9_]*$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_generator_settings(config_path: Path | str | None = None) -> GeneratorSettings:
    """Load and validate the generator configuration file, or return defaults."""
    if config_path is None:
        return GeneratorSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    resolution = _parse_resolution_section(parsed.get("resolution"))
    output = _parse_output_section(parsed.get("output"), path.parent)
    return GeneratorSettings(path=path, resolution=resolution, output=output)


def parse_policy(value: Any, field_name: str = "resolution.policy") -> ResolutionPolicy | None:
    """Parse a policy name; `auto` selects the policy from the input file type."""
    if value is None:
        return None
    name = _require_non_empty_string(value, field_name).lower()
    if name == _AUTO_POLICY:
        return None
    try:
        return ResolutionPolicy(name)
    except ValueError as exc:
        choices = ", ".join([_AUTO_POLICY, *(policy.value for policy in ResolutionPolicy)])
        raise ConfigurationError(f"{field_name} must be one of: {choices}.") from exc


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    section = _optional_mapping(value, "resolution")
    policy = parse_policy(section.get("policy"))
    inline_threshold = _require_non_negative_int(
        section.get("inline_threshold", ResolutionSettings().inline_threshold),
        "resolution.inline_threshold",
    )
    return ResolutionSettings(policy=policy, inline_threshold=inline_threshold)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory_value = _optional_string(section.get("directory"), "output.directory")
    directory = _resolve_path(base_path, directory_value) if directory_value else None
    class_suffix = _identifier_part(
        section.get("class_suffix", DEFAULT_CLASS_SUFFIX), "output.class_suffix"
    )
    file_suffix = _identifier_part(
        section.get("file_suffix", DEFAULT_FILE_SUFFIX), "output.file_suffix"
    )
    return OutputSettings(directory=directory, class_suffix=class_suffix, file_suffix=file_suffix)


def _identifier_part(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not _IDENTIFIER_PART.fullmatch(stripped):
        raise ConfigurationError(f"{field_name} may only contain letters, digits and underscores.")
    return stripped


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
