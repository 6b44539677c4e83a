"""Dart rendering exports."""

from .dto_renderer import (
    dto_class_name,
    dto_file_name,
    render_dart_type,
    render_output_units,
    render_record_class,
)
from .dto_writer import RenderError, write_output_units
from .render_models import RenderedUnit

__all__ = [
    "RenderedUnit",
    "RenderError",
    "dto_class_name",
    "dto_file_name",
    "render_dart_type",
    "render_output_units",
    "render_record_class",
    "write_output_units",
]
