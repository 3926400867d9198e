from __future__ import annotations

import logging
from pathlib import Path

import pytest

from valid_class_name.files import ResolvedFile
from valid_class_name.styles import extract_style_classes, read_style_classes


def _resolved(path: Path) -> ResolvedFile:
    return ResolvedFile(path=str(path), mtime_ns=0)


def test_dialect_is_chosen_by_extension() -> None:
    text = ".a { &-b { } } // .c { }"

    assert extract_style_classes(text, "x.scss") == {"a", "a-b"}
    assert extract_style_classes(text, "x.SCSS") == {"a", "a-b"}
    assert "c" in extract_style_classes(text, "x.css")


def test_read_style_classes_merges_every_file(tmp_path: Path) -> None:
    css = tmp_path / "a.css"
    css.write_text(".one { }\n", encoding="utf-8")
    scss = tmp_path / "b.scss"
    scss.write_text(".two { &-x { } }\n", encoding="utf-8")

    classes = read_style_classes([_resolved(css), _resolved(scss)], cwd=str(tmp_path))

    assert classes == {"one", "two", "two-x"}


def test_unreadable_files_contribute_nothing(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    good = tmp_path / "good.css"
    good.write_text(".good { }\n", encoding="utf-8")
    binary = tmp_path / "binary.css"
    binary.write_bytes(b"\xff\xfe\x00bad")
    missing = tmp_path / "deleted.css"

    with caplog.at_level(logging.WARNING, logger="valid_class_name"):
        classes = read_style_classes([_resolved(missing), _resolved(binary), _resolved(good)])

    assert classes == {"good"}
    messages = [record.getMessage() for record in caplog.records]
    assert any("deleted.css" in message for message in messages)
    assert any("binary.css" in message for message in messages)


def test_custom_extractor_receives_text_path_and_cwd(tmp_path: Path) -> None:
    style = tmp_path / "theme.css"
    style.write_text("anything", encoding="utf-8")
    seen: list[tuple[str, str, str | None]] = []

    def extractor(text: str, path: str, cwd: str | None) -> set[str]:
        seen.append((text, path, cwd))
        return {"from-extractor"}

    classes = read_style_classes([_resolved(style)], cwd="/project", extractor=extractor)

    assert classes == {"from-extractor"}
    assert seen == [("anything", str(style), "/project")]
