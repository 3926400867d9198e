"""Single-slot registry cache and the end-to-end registry lookup."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from valid_class_name.config import RuleOptions, UtilityOption
from valid_class_name.files import FileResolverCache
from valid_class_name.logging import get_logger
from valid_class_name.registry.builder import ClassRegistry, build_class_registry_from_files
from valid_class_name.registry.cache_key import create_cache_key
from valid_class_name.utility import UtilityValidator, create_utility_validator

ValidatorFactory = Callable[[UtilityOption, str], UtilityValidator | None]

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CacheEntry:
    """The live registry and the key it was built for."""

    key: str
    registry: ClassRegistry
    built_at: float


class RegistryCache:
    """Holds at most one registry; a different key replaces it."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        """Return the live entry, if any."""
        return self._entry

    def get(self, key: str) -> ClassRegistry | None:
        """Return the stored registry when key matches."""
        entry = self._entry
        if entry is None or entry.key != key:
            return None
        return entry.registry

    def get_or_build(self, key: str, build: Callable[[], ClassRegistry]) -> ClassRegistry:
        """Return the cached registry for key, building and storing it on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached
        registry = build()
        previous = self._entry
        self._entry = CacheEntry(key=key, registry=registry, built_at=self._clock())
        if (
            previous is not None
            and previous.registry.utility_validator is not registry.utility_validator
        ):
            previous.registry.close()
        return registry

    def reset(self) -> None:
        """Forget the stored registry and release its validator."""
        previous = self._entry
        self._entry = None
        if previous is not None:
            previous.registry.close()


def get_class_registry(
    options: RuleOptions,
    cwd: str | Path,
    cache: RegistryCache,
    file_cache: FileResolverCache,
    validator_factory: ValidatorFactory = create_utility_validator,
) -> ClassRegistry:
    """Resolve style files, then reuse or rebuild the registry for the current inputs."""
    working_dir = str(Path(cwd).resolve())
    allowlist = options.validation.allowlist
    blocklist = options.validation.blocklist
    utility_option = options.sources.utility
    resolved_files = file_cache.get_or_resolve(options.sources.style_globs, working_dir)
    key = create_cache_key(resolved_files, allowlist, blocklist, utility_option, working_dir)

    def build() -> ClassRegistry:
        LOGGER.debug("Building class registry for %d style file(s)", len(resolved_files))
        validator = validator_factory(utility_option, working_dir)
        return build_class_registry_from_files(
            resolved_files,
            allowlist,
            blocklist,
            validator,
            working_dir,
        )

    return cache.get_or_build(key, build)
