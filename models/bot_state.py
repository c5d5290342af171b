"""
Snapshot of the bot configuration and run state as reported by ``/state/``.
"""

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from enums.risk_level import RiskLevel
from models.api_model import ApiModel


class BotState(ApiModel):
    bot_running: bool = False
    asset: str = "BTC / USDT"
    risk_level: RiskLevel = RiskLevel.MEDIUM
    buy_rsi: float = 45
    sell_rsi: float = 55
    candle_limit: int = 30
    username: str = "BV"

    @model_validator(mode="before")
    @classmethod
    def _falsy_to_default(cls, data: Any) -> Any:
        # empty strings and zeros fall back to the screen defaults
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if key != "bot_running" and not value:
                continue
            if key == "risk_level":
                value = value.value if isinstance(value, RiskLevel) else str(value).upper()
                if value not in RiskLevel.__members__:
                    continue
            cleaned[key] = value
        return cleaned
