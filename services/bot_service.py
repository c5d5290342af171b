# services/bot_service.py
from __future__ import annotations

from enums.risk_level import RiskLevel, TradeAction
from models.analytics import AnalyticsBundle
from models.auth import Ack, AuthResponse
from models.bot_state import BotState
from models.history import HistoryResponse
from models.market import MarketSnapshot
from services.api_service import ApiService
from utils.log_config import log_function

class BotService:
    """
    Typed wrapper over the backend routes. Every method issues exactly one
    POST through :class:`ApiService` and decodes the body into its record.
    Transport and decode errors propagate untouched.
    """

    def __init__(self, api: ApiService) -> None:
        self.api = api

    # -------------------- AUTH --------------------

    @log_function
    def login(self, phone: str, password: str) -> AuthResponse:
        return AuthResponse.from_json(self.api.post("/login/", {"phone": phone, "password": password}))

    @log_function
    def register(self, name: str, phone: str, password: str) -> AuthResponse:
        body = {"name": name, "phone": phone, "password": password}
        return AuthResponse.from_json(self.api.post("/register/", body))

    @log_function
    def logout(self) -> Ack:
        return Ack.from_json(self.api.post("/logout/", {}))

    # -------------------- BOT / MARKET --------------------

    @log_function
    def get_state(self) -> BotState:
        return BotState.from_json(self.api.post("/state/", {}))

    @log_function
    def get_market_data(self) -> MarketSnapshot:
        return MarketSnapshot.from_json(self.api.post("/market-data/", {}))

    @log_function
    def start_bot(self) -> Ack:
        return Ack.from_json(self.api.post("/start-bot/", {}))

    @log_function
    def stop_bot(self) -> Ack:
        return Ack.from_json(self.api.post("/stop-bot/", {}))

    @log_function
    def trade(self, action: TradeAction, quantity: float) -> Ack:
        endpoint = "/buy/" if TradeAction(action) is TradeAction.BUY else "/sell/"
        return Ack.from_json(self.api.post(endpoint, {"quantity": quantity}))

    # -------------------- HISTORY / ANALYTICS --------------------

    @log_function
    def get_history(self) -> HistoryResponse:
        return HistoryResponse.from_json(self.api.post("/history/", {}))

    @log_function
    def export_history(self) -> Ack:
        return Ack.from_json(self.api.post("/export/", {}))

    @log_function
    def get_analytics(self) -> AnalyticsBundle:
        return AnalyticsBundle.from_json(self.api.post("/analytics/", {}))

    # -------------------- SETTINGS --------------------

    @log_function
    def change_asset(self, asset_symbol: str) -> Ack:
        return Ack.from_json(self.api.post("/wallet/change-asset/", {"asset_symbol": asset_symbol}))

    @log_function
    def set_risk(self, risk_level: RiskLevel) -> Ack:
        return Ack.from_json(self.api.post("/bot/risk/", {"risk_level": RiskLevel(risk_level).value}))

    @log_function
    def set_thresholds(self, buy_rsi: float, sell_rsi: float) -> Ack:
        return Ack.from_json(self.api.post("/bot/thresholds/", {"buy_rsi": buy_rsi, "sell_rsi": sell_rsi}))

    @log_function
    def set_candles(self, candle_limit: int) -> Ack:
        return Ack.from_json(self.api.post("/bot/candles/", {"candle_limit": candle_limit}))

