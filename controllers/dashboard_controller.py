"""
Controller for the dashboard screen: bot state, live price, start/stop,
manual trades and the quick log of recent trades.
"""

from __future__ import annotations

from enums.risk_level import TradeAction
from controllers.screen_controller import ScreenController
from controllers.validators import ValidationError, validate_quantity
from schemas.screen_schema import DashboardView, ScreenResult
from services.metrics import build_candles
from utils.logger import log_function, setup_logger

logger = setup_logger(__name__)


class DashboardController(ScreenController):

    @log_function
    def load_state(self) -> ScreenResult:
        """Fetch ``/state/`` then ``/market-data/`` and build the dashboard view."""
        state_res = self._run(self.service.get_state, "State load failed")
        if not state_res.ok:
            return state_res
        market_res = self._run(self.service.get_market_data, "State load failed")
        if not market_res.ok:
            return market_res
        market = market_res.data
        view = DashboardView(state=state_res.data, market=market, candles=build_candles(market.prices))
        return ScreenResult(ok=True, data=view)

    @log_function
    def toggle_bot(self, running: bool) -> ScreenResult:
        if running:
            res = self._run(self.service.stop_bot, "Failed to stop bot", "Bot stopped.")
        else:
            res = self._run(self.service.start_bot, "Failed to start bot", "Bot started.")
        if not res.ok:
            return res
        reloaded = self.load_state()
        return ScreenResult(ok=True, message=res.message, data=reloaded.data if reloaded.ok else None)

    @log_function
    def trade(self, action: TradeAction, quantity) -> ScreenResult:
        try:
            qty = validate_quantity(quantity)
        except ValidationError as e:
            return ScreenResult(ok=False, message=str(e))
        side = TradeAction(action)
        res = self._run(
            lambda: self.service.trade(side, qty),
            f"{side.value} order failed",
            f"{side.value} order sent ({qty:g}).",
        )
        if not res.ok:
            return res
        logger.info(f"✅ {side.value} x{qty:g} enviado")
        reloaded = self.load_state()
        return ScreenResult(ok=True, message=res.message, data=reloaded.data if reloaded.ok else None)

    @log_function
    def load_logs(self) -> ScreenResult:
        res = self._run(self.service.get_history, "Failed to load logs")
        if not res.ok:
            # los logs solo muestran un aviso genérico
            return ScreenResult(ok=False, message="Failed to load logs")
        return ScreenResult(ok=True, data=res.data.history)
