"""Request/response schemas for the document model and API endpoints.

Holds Pydantic models for the persisted document (State, Tab, Component),
the payloads accepted by /components, /merge, /activeTab, /api/question and
/api/detect, and the structured output of the classifier.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Component(BaseModel):
    # Files written by older clients may lack fields or carry extra ones
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    type: Optional[str] = None
    # Opaque JSON payload, never interpreted by the store
    data: Any = None


class Tab(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: Optional[str] = None
    components: List[Component] = Field(default_factory=list)

    def find_component(self, component_id: str) -> Optional[Component]:
        for component in self.components:
            if component.id == component_id:
                return component
        return None


class State(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    tabs: List[Tab]
    active_tab_key: str = Field(alias="activeTabKey")

    def find_tab(self, key: str) -> Optional[Tab]:
        """Return the first tab with ``key``; keys should never repeat."""
        for tab in self.tabs:
            if tab.key == key:
                return tab
        return None

    def component_ids(self) -> set[str]:
        return {c.id for tab in self.tabs for c in tab.components if c.id is not None}

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def default_state(home_key: str = "home") -> State:
    return State(tabs=[Tab(key=home_key)], active_tab_key=home_key)


# -------- Request payloads --------

class AddComponentPayload(BaseModel):
    key: StrictStr
    type: StrictStr
    data: Any = None


class UpdateComponentPayload(BaseModel):
    key: StrictStr
    data: Any = None


class KeyPayload(BaseModel):
    key: StrictStr


class QuestionPayload(BaseModel):
    question: StrictStr = Field(min_length=1)


# -------- Classifier output --------

class DistancePoint(BaseModel):
    """One date/distance pair pulled out of free-form text."""

    date: str = Field(description="Calendar date of the measurement, ISO formatted when possible")
    distance: float = Field(description="Distance value for that date")


class Classification(BaseModel):
    """Classify input as table, graph, or text and extract date-distance pairs."""

    type: Literal["table", "graph", "text"] = Field(description="One of table, graph, or text")
    data: List[DistancePoint] = Field(default_factory=list)
