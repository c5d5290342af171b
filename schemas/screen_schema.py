"""
Data schema definitions for what the screens render.

Controllers never raise to the UI; they return a :class:`ScreenResult`
carrying either the data to render or the message to show.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from enums.metric_labels import PnlTrend, PriceTrend, RoiLabel, RsiZone
from models.analytics import AnalyticsBundle
from models.bot_state import BotState
from models.history import HistorySummary, TradeHistoryEntry
from models.market import Candle, MarketSnapshot


@dataclass
class ScreenResult:
    """Outcome of a screen action."""

    ok: bool
    message: Optional[str] = None
    data: Any = None


@dataclass
class DashboardView:
    state: BotState
    market: MarketSnapshot
    candles: List[Candle] = field(default_factory=list)


@dataclass
class HistoryView:
    entries: List[TradeHistoryEntry]
    summary: HistorySummary


@dataclass
class AnalyticsView:
    bundle: AnalyticsBundle
    roi_label: RoiLabel
    roi_sentence: str
    price_trend: PriceTrend
    rsi_zone: RsiZone
    pnl_trend: PnlTrend
    last_price_label: str
