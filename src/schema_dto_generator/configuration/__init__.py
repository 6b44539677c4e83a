"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_generator_settings, parse_policy
from .runtime_settings import GeneratorSettings, OutputSettings, ResolutionSettings

__all__ = [
    "GeneratorSettings",
    "OutputSettings",
    "ResolutionSettings",
    "ConfigurationError",
    "load_generator_settings",
    "parse_policy",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
