"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_dto_generator.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from schema_dto_generator.configuration.loader import load_generator_settings
from schema_dto_generator.configuration.runtime_settings import GeneratorSettings


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Generator configuration template" in scaffold
    assert "resolution:" in scaffold
    assert "policy:" in scaffold
    assert "inline_threshold:" in scaffold
    assert "output:" in scaffold
    assert "# directory:" in scaffold
    assert "class_suffix:" in scaffold
    assert "file_suffix:" in scaffold


def test_written_scaffold_loads_as_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "dto-generator.yaml"

    written_path = write_placeholder_configuration(output_path)
    settings = load_generator_settings(written_path)

    assert written_path == output_path.resolve()
    assert settings.resolution == GeneratorSettings().resolution
    assert settings.output == GeneratorSettings().output


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "dto-generator.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
