"""State routes: GET /state, POST /merge, POST /activeTab

Read the whole document, drain the home tab into a named tab, and switch
the active tab key.
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from tabboard.routes import parse_payload, state_service
from tabboard.schemas import KeyPayload


state_bp = Blueprint("state", __name__)


@state_bp.get("/state")
def get_state():
    return jsonify(state_service().get_state().to_json())


@state_bp.route("/merge", methods=["POST"])
def merge():
    payload = parse_payload(KeyPayload)
    state = state_service().merge_into(payload.key)
    return jsonify(state.to_json())


@state_bp.route("/activeTab", methods=["POST"])
def set_active_tab():
    payload = parse_payload(KeyPayload)
    state_service().set_active_tab(payload.key)
    return "", 200
