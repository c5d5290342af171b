"""
Human readable labels produced by the derived metrics calculators.

Every enum carries an ``UNCLASSIFIED`` member rendered as an em dash, which
is what the screens show when there is not enough data to classify.
"""

from __future__ import annotations

from enum import Enum

UNCLASSIFIED_MARK = "—"


class RoiLabel(str, Enum):
    POSITIVE = "Positive Return"
    NEGATIVE = "Negative Return"
    BREAK_EVEN = "Break Even"
    UNCLASSIFIED = UNCLASSIFIED_MARK


class PriceTrend(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    SIDEWAYS = "SIDEWAYS"
    UNCLASSIFIED = UNCLASSIFIED_MARK


class RsiZone(str, Enum):
    OVERSOLD = "OVERSOLD"
    OVERBOUGHT = "OVERBOUGHT"
    NEUTRAL = "NEUTRAL"
    UNCLASSIFIED = UNCLASSIFIED_MARK


class PnlTrend(str, Enum):
    IMPROVING = "IMPROVING"
    DECLINING = "DECLINING"
    FLAT = "FLAT"
    UNCLASSIFIED = UNCLASSIFIED_MARK
