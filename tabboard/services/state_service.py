"""StateService: read-modify-write wrapper around the document transforms.

Each operation loads the full document from the DocumentStore, applies one
pure transform from ``mutations``, saves the whole document back and returns
the slice the caller asked for. Mutations run inside ``store.transaction()``
so two requests cannot interleave between load and save.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple, TypeVar

from tabboard.schemas import Component, State, Tab
from tabboard.services import mutations
from tabboard.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def _mutate(self, op: str, transform: Callable[[State], Tuple[State, T]]) -> T:
        with self.store.transaction():
            state = self.store.load()
            new_state, result = transform(state)
            self.store.save(new_state)
        logger.info("Applied %s", op)
        return result

    def get_state(self) -> State:
        return self.store.load()

    def add_component(self, key: str, type_: str, data: Any) -> Tab:
        return self._mutate(
            f"add_component key={key!r} type={type_!r}",
            lambda s: mutations.add_component(s, key, type_, data),
        )

    def update_component(self, component_id: str, key: str, data: Any) -> Component:
        return self._mutate(
            f"update_component id={component_id!r} key={key!r}",
            lambda s: mutations.update_component(s, component_id, key, data),
        )

    def clear_components(self, key: str) -> None:
        self._mutate(f"clear_components key={key!r}", lambda s: mutations.clear_components(s, key))

    def merge_into(self, key: str) -> State:
        return self._mutate(f"merge_into key={key!r}", lambda s: mutations.merge_into(s, key))

    def set_active_tab(self, key: str) -> None:
        self._mutate(f"set_active_tab key={key!r}", lambda s: mutations.set_active_tab(s, key))
