from __future__ import annotations

import json

import pytest

from tabboard.utils.io_utils import MISSING, UndecodableFile, read_json, write_json


def test_read_missing_file(tmp_path) -> None:
    assert read_json(str(tmp_path / "absent.json")) is MISSING


def test_read_json_null_is_not_missing(tmp_path) -> None:
    path = tmp_path / "null.json"
    path.write_text("null", encoding="utf-8")

    assert read_json(str(path)) is None


@pytest.mark.parametrize(
    "content,reason",
    [(b"{oops", "invalid JSON at line 1"), (b"\xff\xfe", "not UTF-8")],
)
def test_read_undecodable(tmp_path, content: bytes, reason: str) -> None:
    path = tmp_path / "bad.json"
    path.write_bytes(content)

    with pytest.raises(UndecodableFile) as exc_info:
        read_json(str(path))
    assert exc_info.value.reason.startswith(reason)
    assert exc_info.value.path == str(path)


def test_read_directory_is_an_os_error(tmp_path) -> None:
    with pytest.raises(OSError):
        read_json(str(tmp_path))


def test_write_creates_parent_and_indents(tmp_path) -> None:
    path = tmp_path / "nested" / "doc.json"

    write_json(str(path), {"a": [1, "é"]})

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "a": [')
    assert "é" in text
    assert json.loads(text) == {"a": [1, "é"]}
    assert [p.name for p in path.parent.iterdir()] == ["doc.json"]
