"""Dart rendering entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedUnit:
    """One generated Dart source file."""

    file_name: str
    record_names: tuple[str, ...]
    source: str

    @property
    def host_name(self) -> str:
        """Return the shared record that owns this file."""
        return self.record_names[0]
