"""
Trade history as returned by ``/history/`` plus the summary shown on the
history screen.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator

from enums.risk_level import TradeAction
from models.api_model import ApiModel


class TradeHistoryEntry(ApiModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    time: str = ""
    action: Optional[TradeAction] = None
    price: float = 0.0
    quantity: float = 0.0
    profit_loss: Optional[float] = None
    event_type: str = ""

    @field_validator("action", mode="before")
    @classmethod
    def _upper_action(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @property
    def is_profit(self) -> bool:
        return (self.profit_loss or 0.0) >= 0


class HistoryResponse(ApiModel):
    history: List[TradeHistoryEntry] = Field(default_factory=list)


class HistorySummary(ApiModel):
    total_trades: int = 0
    net_pnl: float = 0.0
