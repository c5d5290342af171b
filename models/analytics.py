"""
Bundle returned by ``/analytics/``.

Each series is a list of single-metric points that pair with time by index.
Every nested record defaults to empty, so a partial or failed response still
produces a renderable bundle.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from models.api_model import ApiModel


class RoiData(ApiModel):
    roi_percent: Optional[float] = None


class PricePoint(ApiModel):
    price: Optional[float] = None


class RsiPoint(ApiModel):
    rsi: Optional[float] = None


class PnlPoint(ApiModel):
    pnl: Optional[float] = None


class RsiThresholds(ApiModel):
    buy: Optional[float] = None
    sell: Optional[float] = None


class PriceSeries(ApiModel):
    data: List[PricePoint] = Field(default_factory=list)

    def values(self) -> List[float]:
        return [p.price for p in self.data if p.price is not None]


class RsiSeries(ApiModel):
    data: List[RsiPoint] = Field(default_factory=list)
    thresholds: RsiThresholds = Field(default_factory=RsiThresholds)

    def values(self) -> List[float]:
        return [p.rsi for p in self.data if p.rsi is not None]


class PnlSeries(ApiModel):
    data: List[PnlPoint] = Field(default_factory=list)

    def values(self) -> List[float]:
        return [p.pnl for p in self.data if p.pnl is not None]


class NextPrice(ApiModel):
    estimated_price: Optional[float] = None


class NextRsi(ApiModel):
    estimated_rsi: Optional[float] = None


class AnalyticsBundle(ApiModel):
    roi: RoiData = Field(default_factory=RoiData)
    price_vs_time: PriceSeries = Field(default_factory=PriceSeries)
    rsi_vs_time: RsiSeries = Field(default_factory=RsiSeries)
    profit_vs_loss: PnlSeries = Field(default_factory=PnlSeries)
    next_price: NextPrice = Field(default_factory=NextPrice)
    next_rsi: NextRsi = Field(default_factory=NextRsi)
