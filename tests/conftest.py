# tests/conftest.py
import os
from unittest.mock import MagicMock, patch

import pytest
import requests

os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(__file__), ".logs"))

from repositories.session_repository import SessionRepository
from services.api_service import ApiService
from services.bot_service import BotService

BASE_URL = "http://bot.test:8000"


def make_response(payload=None, status=200):
    """Fake requests response returning the given JSON."""
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    resp.json.return_value = payload if payload is not None else {}
    return resp


def make_raw_response(content: bytes, status=200):
    """Real requests.Response carrying the given raw body."""
    resp = requests.Response()
    resp.status_code = status
    resp._content = content
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def session(tmp_path):
    return SessionRepository(db_path=str(tmp_path / "session.db"))


@pytest.fixture
def api(session):
    return ApiService(session, base_url=BASE_URL, timeout=5)


@pytest.fixture
def service(api):
    return BotService(api)


@pytest.fixture
def mock_post():
    with patch("services.api_service.requests.post") as post:
        post.return_value = make_response({})
        yield post
