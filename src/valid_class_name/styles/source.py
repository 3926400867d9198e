"""Reading style files into one flattened class-name set."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from valid_class_name.files.models import ResolvedFile
from valid_class_name.logging import get_logger, warn
from valid_class_name.styles.css import (
    extract_class_names_from_css,
    extract_class_names_from_scss,
)

StyleExtractor = Callable[[str, str, str | None], set[str]]

_SCSS_EXTENSIONS = (".scss",)

LOGGER = get_logger(__name__)


def extract_style_classes(file_text: str, file_path: str, cwd: str | None = None) -> set[str]:
    """Extract class names from one style file, choosing the dialect by extension."""
    if file_path.lower().endswith(_SCSS_EXTENSIONS):
        return extract_class_names_from_scss(file_text, file_path, cwd)
    return extract_class_names_from_css(file_text, source=file_path)


def read_style_classes(
    resolved_files: Iterable[ResolvedFile],
    cwd: str | None = None,
    extractor: StyleExtractor = extract_style_classes,
) -> set[str]:
    """Merge class names from every readable file; failures contribute nothing."""
    class_names: set[str] = set()
    for resolved in resolved_files:
        try:
            text = Path(resolved.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            warn(LOGGER, f'Failed to read style file "{resolved.path}"', error)
            continue
        class_names |= extractor(text, resolved.path, cwd)
    return class_names
