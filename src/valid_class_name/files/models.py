"""Typed models for resolved style files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ResolvedFile:
    """Absolute file path with its nanosecond modification time."""

    path: str
    mtime_ns: int
