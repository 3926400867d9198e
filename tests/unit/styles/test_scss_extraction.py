from __future__ import annotations

from pathlib import Path

from valid_class_name.styles import extract_class_names_from_scss
from valid_class_name.styles.css import strip_scss_line_comments


def test_nested_parent_suffixes_are_expanded() -> None:
    scss = """
    .block {
      &__element { }
      &--modifier { }
      &.is-open { }
      .child { &-part { } }
    }
    """

    assert extract_class_names_from_scss(scss) == {
        "block",
        "block__element",
        "block--modifier",
        "is-open",
        "child",
        "child-part",
    }


def test_parent_suffix_applies_to_each_selector_in_list() -> None:
    scss = ".a, .b { &-x { } }"

    assert extract_class_names_from_scss(scss) == {"a", "b", "a-x", "b-x"}


def test_line_comments_are_stripped() -> None:
    scss = """
    // .commented { }
    .real { background: url(http://example.com/a.png); } // trailing .note
    """

    assert extract_class_names_from_scss(scss) == {"real"}


def test_strip_line_comments_preserves_strings_and_offsets() -> None:
    text = '.a { content: "//keep"; } // drop\n.b {}'
    stripped = strip_scss_line_comments(text)

    assert len(stripped) == len(text)
    assert '"//keep"' in stripped
    assert "drop" not in stripped
    assert stripped.endswith(".b {}")


def test_imports_are_followed_relative_to_file(tmp_path: Path) -> None:
    partials = tmp_path / "styles" / "partials"
    partials.mkdir(parents=True)
    (partials / "_buttons.scss").write_text(".btn-primary { }\n", encoding="utf-8")
    (partials / "cards.css").write_text(".card { }\n", encoding="utf-8")
    main = tmp_path / "styles" / "main.scss"
    main.write_text(
        '@use "sass:math";\n@import "partials/buttons";\n@forward "partials/cards";\n.layout { }\n',
        encoding="utf-8",
    )

    classes = extract_class_names_from_scss(
        main.read_text(encoding="utf-8"),
        file_path=str(main),
        cwd=str(tmp_path),
    )

    assert classes == {"layout", "btn-primary", "card"}


def test_imports_fall_back_to_cwd_and_index_files(tmp_path: Path) -> None:
    theme = tmp_path / "theme"
    theme.mkdir()
    (theme / "_index.scss").write_text(".theme-root { }\n", encoding="utf-8")
    nested = tmp_path / "src" / "app.scss"
    nested.parent.mkdir()
    nested.write_text('@use "theme";\n', encoding="utf-8")

    classes = extract_class_names_from_scss(
        nested.read_text(encoding="utf-8"),
        file_path=str(nested),
        cwd=str(tmp_path),
    )

    assert classes == {"theme-root"}


def test_import_cycles_terminate(tmp_path: Path) -> None:
    (tmp_path / "_a.scss").write_text('@import "b";\n.from-a { }\n', encoding="utf-8")
    (tmp_path / "_b.scss").write_text('@import "a";\n.from-b { }\n', encoding="utf-8")
    entry = tmp_path / "entry.scss"
    entry.write_text('@import "a";\n', encoding="utf-8")

    classes = extract_class_names_from_scss(
        entry.read_text(encoding="utf-8"),
        file_path=str(entry),
        cwd=str(tmp_path),
    )

    assert classes == {"from-a", "from-b"}


def test_unresolvable_imports_are_skipped(tmp_path: Path) -> None:
    entry = tmp_path / "entry.scss"
    scss = '@import "missing";\n@import "https://cdn.example.com/x.css";\n.ok { }\n'

    assert extract_class_names_from_scss(scss, file_path=str(entry)) == {"ok"}


def test_whitespace_around_selectors_keeps_parent_tails() -> None:
    scss = ".card {\n  &-title { color: red; }\n}\n  .a ,\n  .b\n{\n  &__x { }\n}\n"

    assert extract_class_names_from_scss(scss) == {"card", "card-title", "a", "b", "a__x", "b__x"}


def test_descendant_selector_tail_is_last_compound() -> None:
    scss = ".list .item {\n  &--active { }\n}\n"

    assert extract_class_names_from_scss(scss) == {"list", "item", "item--active"}
