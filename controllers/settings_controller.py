"""
Controller for the settings screen: trading pair, risk profile, RSI
thresholds and analysis window.

Changing the asset force-stops the bot and resets the simulated wallet on
the backend, so it is only sent once the user has confirmed.
"""

from __future__ import annotations

from controllers.screen_controller import ScreenController
from controllers.validators import (
    ValidationError,
    require_fields,
    validate_candle_limit,
    validate_risk,
    validate_thresholds,
)
from schemas.screen_schema import ScreenResult
from utils.logger import log_function, setup_logger

logger = setup_logger(__name__)

ASSET_RESET_WARNING = (
    "Changing the trading pair will FORCE STOP the bot and reset all "
    "simulated wallet holdings to 0. Proceed?"
)


class SettingsController(ScreenController):

    @log_function
    def change_asset(self, asset_symbol: str, confirmed: bool) -> ScreenResult:
        if not confirmed:
            return ScreenResult(ok=False, message=ASSET_RESET_WARNING)
        try:
            require_fields("Asset symbol required.", asset_symbol)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        symbol = asset_symbol.strip().upper()
        logger.info(f"⚠️ Cambio de activo a {symbol} (reinicio de wallet)")
        return self._run(
            lambda: self.service.change_asset(symbol),
            "Failed to change asset.",
            "Asset updated. Wallet reset initiated.",
        )

    @log_function
    def set_risk(self, level) -> ScreenResult:
        try:
            risk = validate_risk(level)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        return self._run(
            lambda: self.service.set_risk(risk),
            "Failed to update risk level.",
            f"Strategy updated to {risk.value} RISK.",
        )

    @log_function
    def set_thresholds(self, buy_rsi, sell_rsi) -> ScreenResult:
        try:
            buy, sell = validate_thresholds(buy_rsi, sell_rsi)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        return self._run(
            lambda: self.service.set_thresholds(buy, sell),
            "Failed to update thresholds.",
            "Oscillator thresholds updated.",
        )

    @log_function
    def set_candles(self, candle_limit) -> ScreenResult:
        try:
            value = validate_candle_limit(candle_limit)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        return self._run(
            lambda: self.service.set_candles(value),
            "Failed to update candle count.",
            "Analysis window updated.",
        )
