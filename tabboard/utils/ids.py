"""Component ID generation.

IDs look like ``cmp_0001695400000-3f2a9c0d1e2b4a5f``: a millisecond clock
prefix keeps them roughly creation-ordered, the random suffix keeps them
apart within one millisecond.
"""

from __future__ import annotations

import time
import uuid
from typing import Container

COMPONENT_PREFIX = "cmp"


def new_component_id(taken: Container[str] = ()) -> str:
    """Return a component ID not already present in ``taken``."""
    while True:
        cid = f"{COMPONENT_PREFIX}_{time.time_ns() // 1_000_000:013d}-{uuid.uuid4().hex[:16]}"
        if cid not in taken:
            return cid
