"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "dto-generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration template for schema-dto-generator.
# Every setting is optional; remove a line to keep its default.

resolution:
  # How nested object schemas become classes: auto, inline or promote.
  # auto inlines small nested objects for .json inputs and promotes them
  # to shared DTO files for every other input.
  policy: "auto"
  # Nested objects with more properties than this become Map<String, dynamic>
  # under the inline policy.
  inline_threshold: 3

output:
  # Defaults to a gen/ directory next to the input document.
  # directory: "gen"
  class_suffix: "ResponseDto"
  file_suffix: "_response_dto"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
