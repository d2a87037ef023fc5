from __future__ import annotations

from typing import Any, List

import pytest
from langchain_core.runnables import RunnableLambda

from tabboard import create_app
from tabboard.config import Config
from tabboard.schemas import Classification, DistancePoint
from tabboard.services.document_store import DocumentStore
from tabboard.services.llm_service import LLMService
from tabboard.services.state_service import StateService


class FakeChatModel:
    """Stands in for the Gemini chat model; replies with a canned value."""

    def __init__(self, reply: Any) -> None:
        self.reply = reply
        self.calls: List[Any] = []
        self.schemas: List[type] = []

    def with_structured_output(self, schema: type) -> RunnableLambda:
        self.schemas.append(schema)

        def _respond(prompt_value: Any) -> Any:
            self.calls.append(prompt_value.to_messages())
            if isinstance(self.reply, Exception):
                raise self.reply
            return self.reply

        return RunnableLambda(_respond)


@pytest.fixture
def cfg(tmp_path):
    class TestConfig(Config):
        DATA_DIR = str(tmp_path)
        STATE_PATH = str(tmp_path / "db" / "state.json")
        LOG_LEVEL = "DEBUG"
        TABBOARD_ENV = "test"

    return TestConfig


@pytest.fixture
def store(cfg) -> DocumentStore:
    return DocumentStore(cfg.STATE_PATH, home_key=cfg.HOME_TAB_KEY)


@pytest.fixture
def service(store) -> StateService:
    return StateService(store)


@pytest.fixture
def graph_reply() -> Classification:
    return Classification(
        type="graph",
        data=[
            DistancePoint(date="2021-03-12", distance=3),
            DistancePoint(date="2024-04-11", distance=4),
        ],
    )


@pytest.fixture
def fake_llm(graph_reply) -> FakeChatModel:
    return FakeChatModel(graph_reply)


@pytest.fixture
def llm_service(cfg, fake_llm) -> LLMService:
    return LLMService(cfg, llm=fake_llm)


@pytest.fixture
def app(cfg, llm_service):
    app = create_app(cfg, llm_service=llm_service)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_fake_llm():
    return FakeChatModel
