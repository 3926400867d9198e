"""Fixed-length cache keys over everything a registry build depends on."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Sequence

from valid_class_name.config import UtilityOption, serialize_utility_option
from valid_class_name.files.models import ResolvedFile

_FIELD_SEPARATOR = b"\x00"
_SECTION_SEPARATOR = b"\x1e"


def create_cache_key(
    resolved_files: Iterable[ResolvedFile],
    allowlist: Sequence[str],
    blocklist: Sequence[str],
    utility_option: UtilityOption,
    cwd: str,
) -> str:
    """Return a SHA-256 hex digest; input order is significant."""
    digest = hashlib.sha256()
    digest.update(_section(b"files"))
    for resolved in resolved_files:
        digest.update(_field(resolved.path))
        digest.update(_field(str(resolved.mtime_ns)))
    digest.update(_section(b"allowlist"))
    for pattern in allowlist:
        digest.update(_field(pattern))
    digest.update(_section(b"blocklist"))
    for pattern in blocklist:
        digest.update(_field(pattern))
    digest.update(_section(b"utility"))
    digest.update(_field(serialize_utility_option(utility_option)))
    digest.update(_section(b"cwd"))
    digest.update(_field(cwd))
    return digest.hexdigest()


def _section(name: bytes) -> bytes:
    return _SECTION_SEPARATOR + name + _SECTION_SEPARATOR


def _field(value: str) -> bytes:
    # Length-prefixed so adjacent fields cannot be re-split into the same bytes.
    encoded = value.encode("utf-8", errors="surrogateescape")
    return str(len(encoded)).encode("ascii") + _FIELD_SEPARATOR + encoded
