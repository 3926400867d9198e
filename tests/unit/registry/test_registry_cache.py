from __future__ import annotations

import os
from pathlib import Path

from valid_class_name.config import RuleOptions, SourcesOptions, UtilityOption, ValidationOptions
from valid_class_name.files import FileResolverCache
from valid_class_name.registry import ClassRegistry, RegistryCache, get_class_registry


class ClosingValidator:
    def __init__(self) -> None:
        self.closed = False

    def is_valid_class_name(self, class_name: str) -> bool:
        return class_name == "flex"

    def close(self) -> None:
        self.closed = True


def test_same_key_returns_cached_registry() -> None:
    cache = RegistryCache(clock=lambda: 10.0)
    builds: list[int] = []

    def build() -> ClassRegistry:
        builds.append(1)
        return ClassRegistry({"btn"}, (), (), None)

    first = cache.get_or_build("key-a", build)
    second = cache.get_or_build("key-a", build)

    assert first is second
    assert len(builds) == 1
    assert cache.entry is not None
    assert cache.entry.key == "key-a"
    assert cache.entry.built_at == 10.0


def test_different_key_replaces_entry_and_closes_previous_validator() -> None:
    cache = RegistryCache()
    old_validator = ClosingValidator()
    new_validator = ClosingValidator()

    first = cache.get_or_build("key-a", lambda: ClassRegistry((), (), (), old_validator))
    second = cache.get_or_build("key-b", lambda: ClassRegistry((), (), (), new_validator))

    assert first is not second
    assert cache.get("key-a") is None
    assert cache.get("key-b") is second
    assert old_validator.closed is True
    assert new_validator.closed is False


def test_shared_validator_is_not_closed_on_replacement() -> None:
    cache = RegistryCache()
    validator = ClosingValidator()

    cache.get_or_build("key-a", lambda: ClassRegistry((), (), (), validator))
    cache.get_or_build("key-b", lambda: ClassRegistry({"x"}, (), (), validator))

    assert validator.closed is False


def test_reset_clears_entry_and_releases_validator() -> None:
    cache = RegistryCache()
    validator = ClosingValidator()
    cache.get_or_build("key-a", lambda: ClassRegistry((), (), (), validator))

    cache.reset()

    assert cache.entry is None
    assert cache.get("key-a") is None
    assert validator.closed is True
    cache.reset()


def _options(style_globs: tuple[str, ...], utility: UtilityOption = None) -> RuleOptions:
    return RuleOptions(
        sources=SourcesOptions(style_globs=style_globs, utility=utility),
        validation=ValidationOptions(allowlist=("js-*",), blocklist=("banned",)),
    )


def test_get_class_registry_builds_once_for_unchanged_inputs(tmp_path: Path) -> None:
    (tmp_path / "styles.css").write_text(".btn { color: red; }\n", encoding="utf-8")
    factory_calls: list[tuple[UtilityOption, str]] = []

    def factory(option: UtilityOption, cwd: str) -> ClosingValidator | None:
        factory_calls.append((option, cwd))
        return ClosingValidator()

    cache = RegistryCache()
    options = _options(("*.css",), utility=True)

    first = get_class_registry(
        options, tmp_path, cache, FileResolverCache(), validator_factory=factory
    )
    second = get_class_registry(
        options, tmp_path, cache, FileResolverCache(), validator_factory=factory
    )

    assert first is second
    assert factory_calls == [(True, str(tmp_path.resolve()))]
    assert first.is_valid("btn") is True
    assert first.is_valid("flex") is True
    assert first.is_valid("js-toggle") is True
    assert first.is_valid("banned") is False


def test_get_class_registry_rebuilds_when_style_file_changes(tmp_path: Path) -> None:
    style = tmp_path / "styles.css"
    style.write_text(".btn {}\n", encoding="utf-8")
    cache = RegistryCache()
    options = _options(("*.css",))

    first = get_class_registry(options, tmp_path, cache, FileResolverCache())
    style.write_text(".card {}\n", encoding="utf-8")
    stat = style.stat()
    os.utime(style, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))
    second = get_class_registry(options, tmp_path, cache, FileResolverCache())

    assert first is not second
    assert second.is_valid("card") is True
    assert second.is_valid("btn") is False


def test_get_class_registry_without_utility_skips_factory(tmp_path: Path) -> None:
    def factory(option: UtilityOption, cwd: str) -> None:
        assert option is None
        return None

    registry = get_class_registry(
        _options(()), tmp_path, RegistryCache(), FileResolverCache(), validator_factory=factory
    )

    assert registry.utility_validator is None
    assert registry.get_all_classes() == set()
