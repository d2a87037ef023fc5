"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the state file location, LLM settings
and server options. This keeps the rest of the codebase decoupled from
direct env access.
"""

from __future__ import annotations

import os


def _env_flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no", "off", ""}


class Config:
    # Base
    TABBOARD_ENV = os.getenv("TABBOARD_ENV", "dev")
    DATA_DIR = os.getenv("TABBOARD_DATA_DIR", os.path.abspath(os.path.join(os.getcwd(), "data")))

    # Document store
    STATE_PATH = os.getenv("TABBOARD_STATE_PATH", os.path.join(DATA_DIR, "state.json"))
    HOME_TAB_KEY = os.getenv("TABBOARD_HOME_TAB", "home")
    # Hold a per-document lock across load -> transform -> save
    SERIALIZE_MUTATIONS = _env_flag("TABBOARD_SERIALIZE_MUTATIONS")

    # Gemini chat model via langchain-google-genai
    LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0"))

    # Server
    CORS_ORIGINS = os.getenv("TABBOARD_CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("TABBOARD_LOG_LEVEL", "INFO")
    OPENAPI_PATH = os.getenv("TABBOARD_OPENAPI_PATH") or None
    HOST = os.getenv("TABBOARD_HOST", "127.0.0.1")
    PORT = int(os.getenv("TABBOARD_PORT", "4000"))


def ensure_data_dirs(cfg: Config = Config) -> None:
    """Ensure the directory holding the state file exists."""
    for p in [cfg.DATA_DIR, os.path.dirname(os.path.abspath(cfg.STATE_PATH))]:
        os.makedirs(p, exist_ok=True)
