# services/api_service.py
from __future__ import annotations
from typing import Any, Optional

import requests

from repositories.session_repository import SessionRepository
from utils.config import get_settings
from utils.logger import logger_manager, log_function, mask_secrets

logger = logger_manager.setup_logger(__name__)

# endpoints que NO deben llevar cabecera Authorization
PUBLIC_ENDPOINTS = frozenset({"login", "register"})

def is_public(endpoint: str) -> bool:
    return endpoint.strip("/") in PUBLIC_ENDPOINTS

class ApiService:
    """
    Generic backend client: every call is a POST with a JSON body.

    - Sends ``Authorization: Token <token>`` except on login/register, and only
      when the SessionRepository holds a token.
    - Returns the decoded JSON as is, whatever the status code. Backend
      rejections arrive as JSON with ``detail`` and are checked by the caller.
    - Transport errors (``requests.RequestException``) and undecodable bodies
      (``requests.JSONDecodeError``) propagate.
    """

    def __init__(
        self,
        session: SessionRepository,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.session = session
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_sec

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def build_headers(self, endpoint: str) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if not is_public(endpoint):
            token = self.session.read()
            if token:
                headers["Authorization"] = f"Token {token}"
        return headers

    @log_function
    def post(self, endpoint: str, body: Optional[dict[str, Any]] = None) -> Any:
        url = self.url_for(endpoint)
        headers = self.build_headers(endpoint)
        payload = body or {}
        logger.debug(f"POST {url} body={mask_secrets(payload)} auth={'Authorization' in headers}")

        r = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        if not r.ok:
            logger.warning(f"POST {endpoint} devolvió HTTP {r.status_code}")
        return r.json()
