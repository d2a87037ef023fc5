"""Components routes: POST /components, PUT /components/<id>, DELETE /components

- POST adds a component to a tab (creating the tab if missing) and returns the tab.
- PUT replaces a component's data inside the named tab and returns the component.
- DELETE ?key= empties a tab.
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from tabboard.errors import InvalidInput
from tabboard.routes import parse_payload, state_service
from tabboard.schemas import AddComponentPayload, UpdateComponentPayload


components_bp = Blueprint("components", __name__)


@components_bp.route("/components", methods=["POST"])
def add_component():
    payload = parse_payload(AddComponentPayload)
    tab = state_service().add_component(payload.key, payload.type, payload.data)
    return jsonify(tab.model_dump(mode="json")), 201


@components_bp.route("/components/<component_id>", methods=["PUT"])
def update_component(component_id: str):
    payload = parse_payload(UpdateComponentPayload)
    component = state_service().update_component(component_id, payload.key, payload.data)
    return jsonify(component.model_dump(mode="json"))


@components_bp.route("/components", methods=["DELETE"])
def clear_components():
    key = request.args.get("key")
    if key is None:
        raise InvalidInput("Missing 'key' query parameter.")
    state_service().clear_components(key)
    return "", 204
