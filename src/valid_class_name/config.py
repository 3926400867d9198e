"""Rule options parsing and optional project config file loading."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_FILE_NAME = "valid_class_name.toml"


@dataclass(slots=True, frozen=True)
class UtilitySettings:
    """Explicit utility-framework settings."""

    config_path: str | None = None
    include_plugin_classes: bool | None = None

    def to_public_dict(self) -> dict[str, object]:
        """Return only the fields that were set, using the option names."""
        payload: dict[str, object] = {}
        if self.config_path is not None:
            payload["configPath"] = self.config_path
        if self.include_plugin_classes is not None:
            payload["includePluginClasses"] = self.include_plugin_classes
        return payload


UtilityOption = bool | UtilitySettings | None


@dataclass(slots=True, frozen=True)
class SourcesOptions:
    """Where valid class names come from."""

    style_globs: tuple[str, ...] = ()
    utility: UtilityOption = None


@dataclass(slots=True, frozen=True)
class ValidationOptions:
    """User-declared allow/block/ignore rules.

    ``object_style_attributes`` names attributes whose object-literal values,
    not keys, hold class strings. Hosts pass it to
    ``extract_attribute_class_strings``.
    """

    allowlist: tuple[str, ...] = ()
    blocklist: tuple[str, ...] = ()
    ignore_patterns: tuple[str, ...] = ()
    object_style_attributes: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class RuleOptions:
    """Fully parsed options."""

    sources: SourcesOptions = field(default_factory=SourcesOptions)
    validation: ValidationOptions = field(default_factory=ValidationOptions)

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable options snapshot."""
        return {
            "sources": {
                "styleGlobs": list(self.sources.style_globs),
                "utility": serialize_utility_option(self.sources.utility),
            },
            "validation": {
                "allowlist": list(self.validation.allowlist),
                "blocklist": list(self.validation.blocklist),
                "ignorePatterns": list(self.validation.ignore_patterns),
                "objectStyleAttributes": list(self.validation.object_style_attributes),
            },
        }


def serialize_utility_option(option: UtilityOption) -> str:
    """Serialize the utility option so unset, disabled and enabled stay distinct."""
    if option is None:
        return "undefined"
    if isinstance(option, bool):
        return json.dumps(option)
    return json.dumps(option.to_public_dict(), sort_keys=True, separators=(",", ":"))


def parse_options(payload: Mapping[str, object]) -> RuleOptions:
    """Build RuleOptions from a mapping shaped like the rule options."""
    if not isinstance(payload, Mapping):
        raise ValueError("Options must be a table.")
    sources_payload = _get_table(payload, "sources")
    validation_payload = _get_table(payload, "validation")

    style_globs: tuple[str, ...] = ()
    if "styleGlobs" in sources_payload:
        style_globs = _tuple_of_strings(sources_payload["styleGlobs"], "sources", "styleGlobs")

    utility: UtilityOption = None
    if "utility" in sources_payload:
        utility = _parse_utility(sources_payload["utility"])

    return RuleOptions(
        sources=SourcesOptions(style_globs=style_globs, utility=utility),
        validation=ValidationOptions(
            allowlist=_optional_strings(validation_payload, "allowlist"),
            blocklist=_optional_strings(validation_payload, "blocklist"),
            ignore_patterns=_optional_strings(validation_payload, "ignorePatterns"),
            object_style_attributes=_optional_strings(validation_payload, "objectStyleAttributes"),
        ),
    )


def load_config_file(cwd: Path) -> dict[str, object]:
    """Load optional valid_class_name.toml from the working directory."""
    config_path = cwd / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def load_options(cwd: Path) -> RuleOptions:
    """Load effective options for a working directory; defaults when no file exists."""
    return parse_options(load_config_file(cwd.resolve()))


def _parse_utility(value: object) -> UtilityOption:
    if isinstance(value, bool):
        return value
    if not isinstance(value, Mapping):
        raise ValueError("Config field 'sources.utility' must be a boolean or a table.")
    config_path = value.get("configPath")
    if config_path is not None and not isinstance(config_path, str):
        raise ValueError("Config field 'sources.utility.configPath' must be a string.")
    include_plugin_classes = value.get("includePluginClasses")
    if include_plugin_classes is not None and not isinstance(include_plugin_classes, bool):
        raise ValueError("Config field 'sources.utility.includePluginClasses' must be a boolean.")
    return UtilitySettings(
        config_path=config_path,
        include_plugin_classes=include_plugin_classes,
    )


def _get_table(payload: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, Mapping):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_strings(payload: Mapping[str, object], field_name: str) -> tuple[str, ...]:
    if field_name not in payload:
        return ()
    return _tuple_of_strings(payload[field_name], "validation", field_name)


def _tuple_of_strings(value: object, section: str, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        raise ValueError(f"Config field '{section}.{field_name}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field_name}' must contain only strings.")
        output.append(item)
    return tuple(output)
