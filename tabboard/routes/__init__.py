"""Route blueprints package for API endpoints.

Blueprints per route group: state (read, merge, active tab), components
(add, update, clear), classify (question classification and keyword
detection) and docs. Shared helpers for request parsing live here.
"""

from __future__ import annotations

from typing import Type, TypeVar

from flask import current_app, request
from pydantic import BaseModel, ValidationError

from tabboard.errors import InvalidInput

M = TypeVar("M", bound=BaseModel)


def parse_payload(model: Type[M]) -> M:
    """Validate the JSON request body against ``model`` or raise InvalidInput."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidInput("Request body must be a JSON object.")
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise InvalidInput(f"Missing or invalid field(s): {', '.join(fields)}") from e


def state_service():
    return current_app.extensions["tabboard.state"]
