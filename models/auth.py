"""
Responses of the authentication and acknowledgement endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from models.api_model import ApiModel


class AuthResponse(ApiModel):
    token: Optional[str] = None

    @property
    def ok(self) -> bool:
        return bool(self.token)


class Ack(ApiModel):
    """Generic acknowledgement; ``raw`` keeps the whole body for display."""

    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, raw: Any) -> "Ack":
        body = raw if isinstance(raw, dict) else {}
        return cls(detail=body.get("detail"), raw=body)
