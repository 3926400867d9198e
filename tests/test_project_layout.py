from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/valid_class_name/cli.py",
        "src/valid_class_name/config.py",
        "src/valid_class_name/variants.py",
        "src/valid_class_name/validation.py",
        "src/valid_class_name/patterns/__init__.py",
        "src/valid_class_name/files/__init__.py",
        "src/valid_class_name/styles/__init__.py",
        "src/valid_class_name/utility/__init__.py",
        "src/valid_class_name/registry/__init__.py",
        "src/valid_class_name/extract/__init__.py",
        "src/valid_class_name/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
