"""LLMService: structured classification of chat questions.

Provides a single chain that classifies a free-form question as
table / graph / text and extracts date-distance pairs, returning a
``Classification``. Any failure of the model call, or a reply that does not
match the schema, is raised as ``UpstreamFailure``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from tabboard.config import Config
from tabboard.errors import UpstreamFailure
from tabboard.schemas import Classification

load_dotenv()  # This loads the .env file

from prompts.classify_template import TEMPLATE_CLASSIFY

logger = logging.getLogger(__name__)


class LLMService:
    def __init__(self, cfg: Config = Config, llm: Optional[Any] = None):
        self.cfg = cfg
        # Choose the model from config (default gemini-2.5-flash)
        self.model_name = getattr(cfg, "LLM_MODEL", "gemini-2.5-flash")
        if llm is None:
            try:
                llm = ChatGoogleGenerativeAI(
                    model=self.model_name,
                    temperature=getattr(cfg, "LLM_TEMPERATURE", 0),
                )
            except Exception as e:
                # Missing or invalid GOOGLE_API_KEY is reported at construction
                logger.exception("Could not set up chat model %s", self.model_name)
                raise UpstreamFailure("Failed to process the question") from e
        self.llm = llm
        prompt = ChatPromptTemplate.from_messages(
            [
                ("system", TEMPLATE_CLASSIFY),
                ("human", "{question}"),
            ]
        )
        self.chain = prompt | self.llm.with_structured_output(Classification)

    def classify_and_extract(self, question: str) -> Classification:
        try:
            result = self.chain.invoke({"question": question})
        except Exception as e:
            logger.exception("Classification call to %s failed", self.model_name)
            raise UpstreamFailure("Failed to process the question") from e

        if isinstance(result, dict):
            try:
                result = Classification.model_validate(result)
            except ValueError as e:
                raise UpstreamFailure("Failed to process the question") from e
        if not isinstance(result, Classification):
            logger.error("Model %s returned no structured classification: %r", self.model_name, result)
            raise UpstreamFailure("Failed to process the question")
        return result
