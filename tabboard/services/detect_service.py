"""Keyword detector for chat input.

Looks for the first dictionary term contained in the text (case-insensitive,
in dictionary order) and returns the canned reply for it. For the ``tab`` and
``set`` terms the first integer in the text is reported as ``numberOfTabs``.
Stateless; nothing here touches the document store.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DICTIONARY: Dict[str, str] = {
    "table": "Here is the table in the preview!",
    "text": "Here is the text in the preview!",
    "graph": "Here is the graph in the preview!",
    "tab": "Here are the tabs in the footer!",
    "set": "successfully set!",
    "new": "successfully set in a new tab!",
}

NUMBERED_KEYS = {"tab", "set"}

_FIRST_INT = re.compile(r"[0-9]+")
_LINE_BREAK = re.compile(r"\r?\n")


def extract_first_number(text: str) -> Optional[int]:
    m = _FIRST_INT.search(text)
    return int(m.group(0)) if m else None


def utc_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def detect_keyword(text: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Return ``{key, value, timestamp, maindata[, numberOfTabs]}`` for ``text``.

    ``maindata`` is the text without its first line. ``key`` is ``None`` when
    no dictionary term matches (and ``value`` is omitted).
    """
    timestamp = utc_timestamp(now)
    maindata = "\n".join(_LINE_BREAK.split(text)[1:])

    lowered = text.lower()
    for key, value in DICTIONARY.items():
        if key not in lowered:
            continue
        result: Dict[str, Any] = {"key": key, "value": value, "timestamp": timestamp, "maindata": maindata}
        if key in NUMBERED_KEYS:
            num = extract_first_number(text)
            # zero counts as "no number"
            if num:
                result["numberOfTabs"] = num
        return result

    return {"key": None, "timestamp": timestamp, "maindata": maindata}
