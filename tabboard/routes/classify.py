"""Classification routes: POST /api/question, POST /api/detect

/api/question asks the LLM to classify a question and extract date-distance
pairs. /api/detect runs the keyword detector over free text.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from tabboard.routes import parse_payload
from tabboard.schemas import QuestionPayload
from tabboard.services.detect_service import detect_keyword, utc_timestamp
from tabboard.services.llm_service import LLMService


classify_bp = Blueprint("classify", __name__)


def _resp_error(message: str, status: int = 400, **extra: Any):
    return jsonify({"error": message, **extra}), status


def _llm_service() -> LLMService:
    # Built on first use so the app starts without model credentials
    svc = current_app.extensions.get("tabboard.llm")
    if svc is None:
        svc = LLMService(current_app.config["TABBOARD_CONFIG"])
        current_app.extensions["tabboard.llm"] = svc
    return svc


@classify_bp.route("/api/question", methods=["POST"])
def question():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    if not payload.get("question"):
        return _resp_error("Question is required")
    body = parse_payload(QuestionPayload)
    result = _llm_service().classify_and_extract(body.question)
    return jsonify(result.model_dump(mode="json"))


@classify_bp.route("/api/detect", methods=["POST"])
def detect():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    text = payload.get("text")
    if not isinstance(text, str):
        return _resp_error("Missing 'text' field", timestamp=utc_timestamp())
    return jsonify(detect_keyword(text))
