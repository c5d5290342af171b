"""
Market data returned by ``/market-data/`` and the candles derived from it.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from enums.metric_labels import UNCLASSIFIED_MARK
from models.api_model import ApiModel


class MarketSnapshot(ApiModel):
    # most recent price last
    prices: List[float] = Field(default_factory=list)

    @property
    def current_price(self) -> Optional[float]:
        return self.prices[-1] if self.prices else None

    @property
    def current_price_label(self) -> str:
        price = self.current_price
        return f"{price:.2f}" if price is not None else UNCLASSIFIED_MARK


class Candle(BaseModel):
    open: float
    close: float
    high: float
    low: float

    @property
    def is_bull(self) -> bool:
        return self.close >= self.open
