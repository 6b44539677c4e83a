"""Generated source file writer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .render_models import RenderedUnit

_LOGGER = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when generated sources cannot be written."""


def write_output_units(units: Sequence[RenderedUnit], output_dir: Path | str) -> tuple[Path, ...]:
    """Write rendered units into the output directory and return their paths."""
    destination = Path(output_dir)
    written: list[Path] = []
    try:
        destination.mkdir(parents=True, exist_ok=True)
        for unit in units:
            output_path = destination / unit.file_name
            output_path.write_text(unit.source, encoding="utf-8")
            _LOGGER.info("Generated: %s", output_path)
            written.append(output_path.resolve())
    except OSError as exc:
        raise RenderError(f"Failed to write generated sources to {destination}: {exc}") from exc
    return tuple(written)
