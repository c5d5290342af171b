"""
Local input validation. Anything rejected here never reaches the network.
"""

from __future__ import annotations

import math

from enums.risk_level import RiskLevel

MIN_CANDLE_LIMIT = 10


class ValidationError(ValueError):
    """Input rejected before any request is sent; ``str(exc)`` is the message to show."""


def parse_number(text) -> float:
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        raw = str(text or "").strip()
        if not raw:
            raise ValidationError("INPUT_ERROR: Numeric values required.")
        try:
            value = float(raw)
        except ValueError:
            raise ValidationError("INPUT_ERROR: Numeric values required.") from None
    if math.isnan(value) or math.isinf(value):
        raise ValidationError("INPUT_ERROR: Numeric values required.")
    return value


def require_fields(message: str, *values: str) -> None:
    if not all((v or "").strip() for v in values):
        raise ValidationError(message)


def validate_quantity(text) -> float:
    try:
        quantity = parse_number(text)
    except ValidationError:
        raise ValidationError("Enter a valid quantity") from None
    if quantity <= 0:
        raise ValidationError("Enter a valid quantity")
    return quantity


def validate_thresholds(buy_text, sell_text) -> tuple[float, float]:
    buy = parse_number(buy_text)
    sell = parse_number(sell_text)
    if buy >= sell:
        raise ValidationError("LOGIC_ERROR: Buy signal must be < Sell signal.")
    return buy, sell


def validate_candle_limit(text) -> int:
    try:
        value = parse_number(text)
    except ValidationError:
        raise ValidationError("MIN_LIMIT: Requires > 10 candles.") from None
    if value < MIN_CANDLE_LIMIT:
        raise ValidationError("MIN_LIMIT: Requires > 10 candles.")
    if not value.is_integer():
        raise ValidationError("INPUT_ERROR: Whole number of candles required.")
    return int(value)


def validate_risk(level) -> RiskLevel:
    if isinstance(level, RiskLevel):
        return level
    try:
        return RiskLevel(str(level or "").strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown risk level: {level}") from None
