"""Docs routes: GET /docs (Swagger UI) and /openapi.yaml

Serves the OpenAPI description of the tab/component API (docs/openapi.yaml
at the repository root unless ``Config.OPENAPI_PATH`` points elsewhere) and
a Swagger UI page that renders it.
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, current_app, url_for


docs_bp = Blueprint("docs", __name__)

SWAGGER_CDN = "https://unpkg.com/swagger-ui-dist@5"


def _openapi_path() -> str:
    cfg = current_app.config["TABBOARD_CONFIG"]
    configured = getattr(cfg, "OPENAPI_PATH", None)
    if configured:
        return configured
    # tabboard/routes/docs.py → up two dirs to repo root
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    return os.path.join(root, "docs", "openapi.yaml")


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    path = _openapi_path()
    if not os.path.exists(path):
        return Response("openapi.yaml not found", status=404)
    with open(path, "rb") as f:
        return Response(f.read(), mimetype="text/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    spec_url = url_for("docs.openapi_yaml")
    html = f"""
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>tabboard API</title>
    <link rel="stylesheet" href="{SWAGGER_CDN}/swagger-ui.css" />
  </head>
  <body style="margin: 0">
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_CDN}/swagger-ui-bundle.js"></script>
    <script>
      window.onload = () => {{
        window.ui = SwaggerUIBundle({{ url: '{spec_url}', dom_id: '#swagger-ui', docExpansion: 'list' }});
      }};
    </script>
  </body>
</html>
    """.strip()
    return Response(html, mimetype="text/html")
