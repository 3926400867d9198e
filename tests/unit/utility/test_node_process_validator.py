from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from valid_class_name.utility import NodeProcessValidator, UtilityValidatorError

HELPER = """
import json
import sys
from pathlib import Path

log = Path(__file__).with_suffix(".log")
valid = {"flex", "hover:flex", "md:grid"}
print(json.dumps({"ready": True, "version": "v4"}), flush=True)
for line in sys.stdin:
    request = json.loads(line)
    with log.open("a", encoding="utf-8") as handle:
        handle.write(request["className"] + "\\n")
    if request["className"] == "crash":
        sys.exit(3)
    print(json.dumps({"id": request["id"], "valid": request["className"] in valid}), flush=True)
"""


def _helper(tmp_path: Path, source: str = HELPER) -> Path:
    script = tmp_path / "helper.py"
    script.write_text(source, encoding="utf-8")
    return script


def test_validator_answers_and_memoizes(tmp_path: Path) -> None:
    script = _helper(tmp_path)

    with NodeProcessValidator([sys.executable, str(script)], cwd=str(tmp_path)) as validator:
        assert validator.version == "v4"
        assert validator.is_valid_class_name("flex") is True
        assert validator.is_valid_class_name("hover:flex") is True
        assert validator.is_valid_class_name("bogus") is False
        assert validator.is_valid_class_name("flex") is True

    requested = script.with_suffix(".log").read_text(encoding="utf-8").splitlines()
    assert requested == ["flex", "hover:flex", "bogus"]


def test_helper_crash_degrades_to_false(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    script = _helper(tmp_path)
    validator = NodeProcessValidator([sys.executable, str(script)], cwd=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="valid_class_name"):
        assert validator.is_valid_class_name("flex") is True
        assert validator.is_valid_class_name("crash") is False
        assert validator.is_valid_class_name("md:grid") is False

    assert validator.is_valid_class_name("flex") is True
    assert any("exited unexpectedly" in record.getMessage() for record in caplog.records)
    validator.close()


def test_handshake_error_raises(tmp_path: Path) -> None:
    script = _helper(
        tmp_path,
        "import json\nprint(json.dumps({'error': 'Cannot find module'}), flush=True)\n",
    )

    with pytest.raises(UtilityValidatorError, match="Cannot find module"):
        NodeProcessValidator([sys.executable, str(script)], cwd=str(tmp_path))


def test_helper_exiting_before_handshake_raises(tmp_path: Path) -> None:
    script = _helper(tmp_path, "import sys\nsys.exit(1)\n")

    with pytest.raises(UtilityValidatorError, match="before becoming ready"):
        NodeProcessValidator([sys.executable, str(script)], cwd=str(tmp_path))


def test_unexpected_handshake_raises(tmp_path: Path) -> None:
    script = _helper(tmp_path, "print('{\"hello\": 1}', flush=True)\n")

    with pytest.raises(UtilityValidatorError, match="unexpected handshake"):
        NodeProcessValidator([sys.executable, str(script)], cwd=str(tmp_path))


def test_missing_executable_raises(tmp_path: Path) -> None:
    missing = tmp_path / "no-such-binary"

    with pytest.raises(UtilityValidatorError, match="Failed to start"):
        NodeProcessValidator([str(missing)], cwd=str(tmp_path))
