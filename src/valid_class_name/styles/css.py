"""Class selector extraction from CSS and SCSS text using tinycss2."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

import tinycss2
from tinycss2 import ast

from valid_class_name.logging import get_logger, warn

_SCSS_IMPORT_KEYWORDS = {"import", "use", "forward"}
_SCSS_BUILTIN_PREFIX = "sass:"
_PARENT_REFERENCE = "&"

LOGGER = get_logger(__name__)


def extract_class_names_from_css(css_text: str, source: str = "<css>") -> set[str]:
    """Return every class name used in a selector of the stylesheet."""
    class_names: set[str] = set()
    nodes = tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True)
    _report_parse_errors(nodes, source)
    _walk_rules(nodes, parent_tails=(), output=class_names)
    return class_names


def extract_class_names_from_scss(
    scss_text: str,
    file_path: str | None = None,
    cwd: str | None = None,
) -> set[str]:
    """Return class names from SCSS, following resolvable local imports."""
    visited: set[str] = set()
    if file_path is not None:
        visited.add(os.path.abspath(file_path))
    return _extract_scss(scss_text, file_path, cwd, visited)


def _extract_scss(
    scss_text: str,
    file_path: str | None,
    cwd: str | None,
    visited: set[str],
) -> set[str]:
    source = file_path or "<scss>"
    stripped = strip_scss_line_comments(scss_text)
    nodes = tinycss2.parse_stylesheet(stripped, skip_comments=True, skip_whitespace=True)
    _report_parse_errors(nodes, source)
    class_names: set[str] = set()
    _walk_rules(nodes, parent_tails=(), output=class_names)

    for target in _scss_import_targets(nodes):
        resolved = _resolve_scss_import(target, file_path, cwd)
        if resolved is None or resolved in visited:
            continue
        visited.add(resolved)
        try:
            imported_text = Path(resolved).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            warn(LOGGER, f'Failed to read SCSS import "{resolved}"', error)
            continue
        class_names |= _extract_scss(imported_text, resolved, cwd, visited)
    return class_names


def strip_scss_line_comments(text: str) -> str:
    """Blank out // comments outside strings while preserving offsets."""
    chars = list(text)
    length = len(text)
    index = 0
    quote: str | None = None
    while index < length:
        char = text[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote or char == "\n":
                quote = None
            index += 1
            continue
        if char in ("'", '"'):
            quote = char
            index += 1
            continue
        if text.startswith("/*", index):
            end = text.find("*/", index + 2)
            index = length if end == -1 else end + 2
            continue
        if text.startswith("//", index) and not _follows_url_scheme(text, index):
            while index < length and text[index] != "\n":
                chars[index] = " "
                index += 1
            continue
        index += 1
    return "".join(chars)


def _follows_url_scheme(text: str, index: int) -> bool:
    return index > 0 and text[index - 1] == ":"


def _report_parse_errors(nodes: Sequence[ast.Node], source: str) -> None:
    errors = [node for node in nodes if node.type == "error"]
    if not errors:
        return
    first = errors[0]
    warn(
        LOGGER,
        f'Skipped {len(errors)} unparsable rule(s) in "{source}" '
        f"(first at line {first.source_line}: {first.message})",
    )


def _walk_rules(
    nodes: Iterable[ast.Node],
    parent_tails: tuple[str, ...],
    output: set[str],
) -> None:
    for node in nodes:
        if node.type == "qualified-rule":
            classes, tails = _selector_classes(node.prelude, parent_tails)
            output.update(classes)
            children = tinycss2.parse_blocks_contents(
                node.content, skip_comments=True, skip_whitespace=True
            )
            _walk_rules(children, parent_tails=tails, output=output)
            continue
        if node.type == "at-rule" and node.content is not None:
            children = tinycss2.parse_blocks_contents(
                node.content, skip_comments=True, skip_whitespace=True
            )
            _walk_rules(children, parent_tails=parent_tails, output=output)


def _selector_classes(
    prelude: Sequence[ast.Node],
    parent_tails: tuple[str, ...],
) -> tuple[set[str], tuple[str, ...]]:
    """Collect class names in a selector list and the classes ending each selector."""
    classes: set[str] = set()
    tails: list[str] = []
    for selector in _split_selector_list(prelude):
        trailing: list[str] = []
        index = 0
        while index < len(selector):
            token = selector[index]
            following = selector[index + 1] if index + 1 < len(selector) else None
            if token.type == "function":
                inner, _ = _selector_classes(token.arguments, parent_tails)
                classes |= inner
                trailing = []
                index += 1
                continue
            if token.type == "literal" and following is not None and following.type == "ident":
                if token.value == ".":
                    classes.add(following.value)
                    trailing = [following.value]
                    index += 2
                    continue
                if token.value == _PARENT_REFERENCE and parent_tails:
                    trailing = [f"{tail}{following.value}" for tail in parent_tails]
                    classes.update(trailing)
                    index += 2
                    continue
            trailing = []
            index += 1
        tails.extend(trailing)
    return classes, tuple(dict.fromkeys(tails))


def _split_selector_list(prelude: Sequence[ast.Node]) -> list[list[ast.Node]]:
    selectors: list[list[ast.Node]] = [[]]
    for token in prelude:
        if token.type == "comment":
            continue
        if token.type == "literal" and token.value == ",":
            selectors.append([])
            continue
        selectors[-1].append(token)
    return [trimmed for trimmed in map(_strip_whitespace, selectors) if trimmed]


def _strip_whitespace(selector: list[ast.Node]) -> list[ast.Node]:
    # Only interior whitespace is a descendant combinator.
    start = 0
    end = len(selector)
    while start < end and selector[start].type == "whitespace":
        start += 1
    while end > start and selector[end - 1].type == "whitespace":
        end -= 1
    return selector[start:end]


def _scss_import_targets(nodes: Iterable[ast.Node]) -> list[str]:
    targets: list[str] = []
    for node in nodes:
        if node.type != "at-rule" or node.lower_at_keyword not in _SCSS_IMPORT_KEYWORDS:
            continue
        for token in node.prelude:
            if token.type == "string" and not token.value.startswith(_SCSS_BUILTIN_PREFIX):
                targets.append(token.value)
    return targets


def _resolve_scss_import(target: str, file_path: str | None, cwd: str | None) -> str | None:
    if "://" in target or target.startswith("//"):
        return None
    bases: list[Path] = []
    if file_path is not None:
        bases.append(Path(file_path).resolve().parent)
    if cwd is not None:
        bases.append(Path(cwd).resolve())
    relative = Path(target)
    stem = relative.name
    for base in bases:
        directory = (base / relative).parent
        candidates = [
            directory / stem,
            directory / f"{stem}.scss",
            directory / f"_{stem}.scss",
            directory / f"{stem}.css",
            directory / f"_{stem}.css",
            directory / stem / "_index.scss",
            directory / stem / "index.scss",
        ]
        for candidate in candidates:
            if candidate.is_file():
                return str(candidate.resolve())
    return None
