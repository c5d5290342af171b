"""
Derived metrics shown by the history, dashboard and analytics screens.

All functions are pure and total: empty or missing input never raises, it
degrades to the ``UNCLASSIFIED`` member of the corresponding label enum.
Comparisons are strict; ties resolve to the neutral label.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from enums.metric_labels import PnlTrend, PriceTrend, RoiLabel, RsiZone
from models.history import HistorySummary, TradeHistoryEntry
from models.market import Candle

CANDLE_SIZE = 4


def classify_roi(roi: Optional[float]) -> RoiLabel:
    if roi is None:
        return RoiLabel.UNCLASSIFIED
    if roi > 0:
        return RoiLabel.POSITIVE
    if roi < 0:
        return RoiLabel.NEGATIVE
    return RoiLabel.BREAK_EVEN


def roi_sentence(roi: Optional[float]) -> str:
    """One-line explanation of the ROI figure for the analytics card."""
    label = classify_roi(roi)
    if label is RoiLabel.POSITIVE:
        return f"The bot generated a positive return of {roi}%, indicating profitable behavior."
    if label is RoiLabel.NEGATIVE:
        return f"The bot incurred a loss of {abs(roi)}%, indicating unfavorable conditions."
    if label is RoiLabel.BREAK_EVEN:
        return "The bot neither gained nor lost value."
    return "ROI measures how much the balance changed due to trading."


def price_trend(prices: Sequence[float]) -> PriceTrend:
    if len(prices) < 2:
        return PriceTrend.UNCLASSIFIED
    first, last = prices[0], prices[-1]
    if last > first:
        return PriceTrend.UP
    if last < first:
        return PriceTrend.DOWN
    return PriceTrend.SIDEWAYS


def rsi_zone(rsi_values: Sequence[float], buy: Optional[float], sell: Optional[float]) -> RsiZone:
    """Zone of the latest RSI value relative to the buy (lower) and sell (upper) thresholds.

    A missing threshold never matches its side, so the value is NEUTRAL
    unless the other threshold says otherwise.
    """
    if not rsi_values:
        return RsiZone.UNCLASSIFIED
    last = rsi_values[-1]
    if buy is not None and last < buy:
        return RsiZone.OVERSOLD
    if sell is not None and last > sell:
        return RsiZone.OVERBOUGHT
    return RsiZone.NEUTRAL


def pnl_trend(pnl_values: Sequence[float]) -> PnlTrend:
    if len(pnl_values) < 2:
        return PnlTrend.UNCLASSIFIED
    first, last = pnl_values[0], pnl_values[-1]
    if last > first:
        return PnlTrend.IMPROVING
    if last < first:
        return PnlTrend.DECLINING
    return PnlTrend.FLAT


def summarize_history(entries: Iterable[TradeHistoryEntry]) -> HistorySummary:
    total = 0
    net = 0.0
    for entry in entries:
        total += 1
        net += entry.profit_loss or 0.0
    return HistorySummary(total_trades=total, net_pnl=net)


def build_candles(prices: Sequence[float], size: int = CANDLE_SIZE) -> List[Candle]:
    """Group consecutive prices into OHLC candles of ``size`` points.

    Fewer than ``CANDLE_SIZE`` prices means there is nothing to chart yet.
    A trailing chunk with a single price is dropped.
    """
    if len(prices) < CANDLE_SIZE:
        return []
    candles: List[Candle] = []
    for i in range(0, len(prices), size):
        chunk = prices[i:i + size]
        if len(chunk) < 2:
            continue
        candles.append(Candle(open=chunk[0], close=chunk[-1], high=max(chunk), low=min(chunk)))
    return candles


def format_pnl(value: float) -> str:
    return f"{'+' if value >= 0 else ''}{value:.2f}"
