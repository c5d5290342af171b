"""
Configuration loading for the trading bot client.

Values come from three places, in increasing priority: built-in defaults,
an optional ``config.yaml`` next to ``main.py`` and the process environment
(``.env`` is loaded first if present).
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

# config.yaml key -> variable de entorno
_ENV_KEYS = {
    "api_base_url": "API_BASE_URL",
    "db_path": "DB_PATH",
    "api_timeout_sec": "API_TIMEOUT_SEC",
    "state_poll_interval_sec": "STATE_POLL_INTERVAL_SEC",
    "streamlit_port": "STREAMLIT_PORT",
    "streamlit_app": "STREAMLIT_APP",
}


class Settings(BaseModel):
    api_base_url: str = "http://localhost:8000"
    db_path: str = "./data/session.db"
    api_timeout_sec: Optional[float] = None
    state_poll_interval_sec: float = 10.0
    streamlit_port: int = 8501
    streamlit_app: str = os.path.join(PROJECT_ROOT, "streamlit_app", "dashboard.py")


def load_config(path: str | None = None) -> Dict[str, Any]:
    """Load application configuration from ``config.yaml``.

    :param path: Alternative file to read instead of the project default.
    :returns: A dictionary representing the configuration. Missing files
        quietly yield an empty dictionary.
    """
    config_path = path or os.path.join(PROJECT_ROOT, "config.yaml")
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


def get_settings(path: str | None = None) -> Settings:
    """Merge ``config.yaml`` and the environment into a :class:`Settings`."""
    values: Dict[str, Any] = {k: v for k, v in load_config(path).items() if k in _ENV_KEYS}
    for key, env_name in _ENV_KEYS.items():
        env_value = os.getenv(env_name)
        if env_value not in (None, ""):
            values[key] = env_value
    return Settings(**values)
