"""
Base class for records decoded from backend JSON.

The backend payloads are loosely shaped: fields can be missing, ``null`` or
accompanied by extra keys. ``ApiModel`` drops ``null`` values before
validation so every field falls back to its declared default.

A rejected call still comes back as JSON, carrying a ``detail`` string
instead of the expected fields; ``ok`` is false in that case.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    detail: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        if data is None:
            return {}
        return data

    @field_validator("detail", mode="before")
    @classmethod
    def _detail_as_text(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v or None
        return str(v)

    @classmethod
    def from_json(cls, raw: Any):
        """Build the record from a decoded JSON body; non-dict bodies yield defaults."""
        return cls.model_validate(raw if isinstance(raw, dict) else {})

    @property
    def ok(self) -> bool:
        return self.detail is None
