"""IO utilities for the JSON document file.

Provides:
- ``read_json(path)``: parse a JSON file, telling "absent" and "undecodable"
  apart from real I/O faults.
- ``write_json(path, data)``: atomic, pretty-printed rewrite of a JSON file.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class UndecodableFile(ValueError):
    """File exists but its bytes are not UTF-8 JSON."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def read_json(path: str) -> Any:
    """Return the parsed content of ``path``.

    Returns ``MISSING`` when the file does not exist and raises
    ``UndecodableFile`` when its content is not UTF-8 JSON. Every other
    failure surfaces as the ``OSError`` raised by the read.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return MISSING
    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise UndecodableFile(path, f"not UTF-8 ({e.reason})") from e
    except json.JSONDecodeError as e:
        raise UndecodableFile(path, f"invalid JSON at line {e.lineno} column {e.colno}") from e


def write_json(path: str, data: Any, *, indent: int = 2) -> None:
    """Replace ``path`` with ``data`` serialized as indented JSON.

    The content goes to a temp file in the same directory first and is then
    moved over the target, so readers never see a half-written file.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data, ensure_ascii=False, indent=indent) + "\n"
    fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, target)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)
