"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
configure logging, enable CORS, build the document store and state service
once, and register route blueprints and the error handler.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from tabboard.config import Config, ensure_data_dirs
from tabboard.errors import TabboardError
from tabboard.routes.classify import classify_bp
from tabboard.routes.components import components_bp
from tabboard.routes.docs import docs_bp
from tabboard.routes.state import state_bp
from tabboard.services.document_store import DocumentStore
from tabboard.services.state_service import StateService

# Load .env for local dev if available
load_dotenv()

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def create_app(cfg: Any = Config, llm_service: Optional[Any] = None) -> Flask:
    _configure_logging(cfg.LOG_LEVEL)

    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)
    app.config["TABBOARD_CONFIG"] = cfg
    ensure_data_dirs(cfg)
    # Allow all origins for local development
    CORS(
        app,
        resources={r"/*": {"origins": cfg.CORS_ORIGINS}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    store = DocumentStore(cfg.STATE_PATH, home_key=cfg.HOME_TAB_KEY, serialize=cfg.SERIALIZE_MUTATIONS)
    app.extensions["tabboard.state"] = StateService(store)
    if llm_service is not None:
        app.extensions["tabboard.llm"] = llm_service
    logger.info("Document store at %s (serialized mutations: %s)", store.path, store.serialize)

    # Blueprints
    app.register_blueprint(state_bp)
    app.register_blueprint(components_bp)
    app.register_blueprint(classify_bp)
    app.register_blueprint(docs_bp)

    @app.errorhandler(TabboardError)
    def handle_tabboard_error(err: TabboardError):
        if err.status_code >= 500:
            logger.error("%s: %s", type(err).__name__, err.message)
        return jsonify({"error": err.message}), err.status_code

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
