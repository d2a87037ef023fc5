"""DocumentStore: JSON-backed persistence for the tab/component document.

The whole ``State`` is read on every ``load()`` and rewritten on every
``save()``; nothing is cached between calls, so the backing file stays the
single source of truth.

- load(): missing file, undecodable content, or a top level without a
  ``tabs`` list and ``activeTabKey`` string -> default document. Entries
  inside ``tabs`` are read leniently; ones that still cannot be used, and
  other I/O errors, raise PersistenceFault.
- save(state): atomic, pretty-printed rewrite of the whole document.
- transaction(): holds the per-document lock across a read-modify-write.
"""

from __future__ import annotations

import contextlib
import logging
import os
import threading
from typing import Iterator

from pydantic import ValidationError

from tabboard.errors import PersistenceFault
from tabboard.schemas import State, default_state
from tabboard.utils.io_utils import MISSING, UndecodableFile, read_json, write_json

logger = logging.getLogger(__name__)


def _has_document_shape(raw: object) -> bool:
    return (
        isinstance(raw, dict)
        and isinstance(raw.get("tabs"), list)
        and isinstance(raw.get("activeTabKey"), str)
    )


class DocumentStore:
    def __init__(self, path: str, *, home_key: str = "home", serialize: bool = True):
        self.path = os.path.abspath(path)
        self.home_key = home_key
        self.serialize = serialize
        self._lock = threading.RLock()

    def default(self) -> State:
        return default_state(self.home_key)

    def load(self) -> State:
        try:
            raw = read_json(self.path)
        except UndecodableFile as e:
            logger.warning("State file %s is unreadable (%s); using default document", self.path, e.reason)
            return self.default()
        except OSError as e:
            logger.error("Failed to read state file %s: %s", self.path, e)
            raise PersistenceFault(f"failed to read state: {e}", path=self.path) from e

        if raw is MISSING or raw is None:
            return self.default()
        if not _has_document_shape(raw):
            logger.warning("State file %s lacks a tabs list or activeTabKey string; using default document", self.path)
            return self.default()
        try:
            return State.model_validate(raw)
        except ValidationError as e:
            # Top-level shape is fine, so the file holds user data: refuse to reset it
            logger.error("State file %s has %d unusable entries: %s", self.path, e.error_count(), e)
            raise PersistenceFault(f"failed to read state: unusable tab entries in {self.path}", path=self.path) from e

    def save(self, state: State) -> None:
        try:
            write_json(self.path, state.to_json())
        except OSError as e:
            logger.error("Failed to write state file %s: %s", self.path, e)
            raise PersistenceFault(f"failed to write state: {e}", path=self.path) from e

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Serialize a load -> transform -> save cycle against other threads."""
        if not self.serialize:
            yield
            return
        with self._lock:
            yield
