"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=tabboard.main:app flask run --reload
- python -m tabboard.main
"""

from __future__ import annotations

from tabboard import create_app
from tabboard.config import Config

app = create_app()

if __name__ == "__main__":
    # Threaded so the document lock is what keeps mutations ordered
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.TABBOARD_ENV == "dev", threaded=True)
