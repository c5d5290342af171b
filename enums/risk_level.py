"""
Enumerations shared with the trading bot backend.

The string values are sent over the wire as-is, so they must match what the
backend expects.
"""

from __future__ import annotations

from enum import Enum


class RiskLevel(str, Enum):
    """Risk profile of the bot strategy."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TradeAction(str, Enum):
    """Side of a manual or bot-executed trade."""

    BUY = "BUY"
    SELL = "SELL"
