"""Pure transforms over the tab/component document.

Every function takes a ``State`` and returns ``(new_state, projection)``
without touching the input, so callers decide when (and whether) to
persist. Tab and component lookups are first-match over the ordered lists.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from tabboard.errors import NotFound
from tabboard.schemas import Component, State, Tab
from tabboard.utils.ids import new_component_id

IdFactory = Callable[[set], str]


def add_component(
    state: State,
    key: str,
    type_: str,
    data: Any,
    *,
    id_factory: IdFactory = new_component_id,
) -> Tuple[State, Tab]:
    """Append a component to tab ``key``, creating the tab if it is unseen."""
    new = state.model_copy(deep=True)
    tab = new.find_tab(key)
    if tab is None:
        tab = Tab(key=key)
        new.tabs.append(tab)
    component_id = id_factory(new.component_ids())
    tab.components.append(Component(id=component_id, type=type_, data=data))
    return new, tab


def update_component(state: State, component_id: str, key: str, data: Any) -> Tuple[State, Component]:
    """Replace the ``data`` of one component; the lookup is scoped to tab ``key``."""
    new = state.model_copy(deep=True)
    tab = new.find_tab(key)
    if tab is None:
        raise NotFound("Tab not found")
    component = tab.find_component(component_id)
    if component is None:
        raise NotFound("Component not found")
    component.data = data
    return new, component


def clear_components(state: State, key: str) -> Tuple[State, None]:
    new = state.model_copy(deep=True)
    tab = new.find_tab(key)
    if tab is None:
        raise NotFound("Tab not found")
    tab.components = []
    return new, None


def merge_into(state: State, key: str) -> Tuple[State, State]:
    """Move every component of the home tab (``tabs[0]``) into tab ``key``.

    The target is created with a copy of home's components when missing,
    otherwise home's components are appended to it. Home is always emptied
    afterwards, including when ``key`` names home itself.
    """
    new = state.model_copy(deep=True)
    if not new.tabs:
        # No home to drain; only make sure the target exists.
        if new.find_tab(key) is None:
            new.tabs.append(Tab(key=key))
        return new, new

    home = new.tabs[0]
    moved = [c.model_copy(deep=True) for c in home.components]
    target: Optional[Tab] = new.find_tab(key)
    if target is None:
        new.tabs.append(Tab(key=key, components=moved))
    else:
        target.components.extend(moved)
    home.components = []
    return new, new


def set_active_tab(state: State, key: str) -> Tuple[State, None]:
    """Point ``activeTabKey`` at ``key``; the tab does not have to exist."""
    new = state.model_copy(deep=True)
    new.active_tab_key = key
    return new, None
