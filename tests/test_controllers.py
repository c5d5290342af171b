import requests
import pytest

from controllers.analytics_controller import AnalyticsController
from controllers.auth_controller import AuthController
from controllers.dashboard_controller import DashboardController
from controllers.history_controller import HistoryController
from controllers.screen_controller import NETWORK_ERROR
from controllers.settings_controller import ASSET_RESET_WARNING, SettingsController
from enums.metric_labels import PnlTrend, PriceTrend, RoiLabel, RsiZone
from enums.risk_level import TradeAction
from tests.conftest import make_raw_response, make_response


def _routes(mock_post, table):
    """Answer each call according to the endpoint it hits."""
    def _post(url, json=None, headers=None, timeout=None):
        for path, payload in table.items():
            if url.endswith(path):
                return make_response(payload)
        return make_response({})
    mock_post.side_effect = _post


# -------------------- AUTH --------------------

def test_login_stores_token(service, session, mock_post):
    mock_post.return_value = make_response({"token": "abc"})
    res = AuthController(service, session).login("555", "x")
    assert res.ok
    assert res.message is None
    assert session.read() == "abc"
    assert mock_post.call_args.kwargs["json"] == {"phone": "555", "password": "x"}


def test_login_shows_backend_detail(service, session, mock_post):
    mock_post.return_value = make_response({"detail": "Invalid credentials"}, status=400)
    res = AuthController(service, session).login("555", "bad")
    assert not res.ok
    assert res.message == "Invalid credentials"
    assert session.read() is None


def test_login_without_token_or_detail_uses_fallback(service, session, mock_post):
    mock_post.return_value = make_response({})
    assert AuthController(service, session).login("555", "x").message == "Authentication Failed"


def test_login_requires_credentials_before_calling(service, session, mock_post):
    res = AuthController(service, session).login("", "x")
    assert res.message == "Credentials required."
    mock_post.assert_not_called()


def test_login_network_failure(service, session, mock_post):
    mock_post.side_effect = requests.ConnectionError("offline")
    res = AuthController(service, session).login("555", "x")
    assert not res.ok
    assert res.message == NETWORK_ERROR


def test_register_validation_and_success(service, session, mock_post):
    auth = AuthController(service, session)
    assert auth.register("ana", "", "pw").message == "All fields are required."
    mock_post.assert_not_called()

    mock_post.return_value = make_response({"token": "new"})
    assert auth.register("ana", "555", "pw").ok
    assert session.read() == "new"
    assert mock_post.call_args.kwargs["json"] == {"name": "ana", "phone": "555", "password": "pw"}


def test_register_rejected(service, session, mock_post):
    mock_post.return_value = make_response({})
    assert AuthController(service, session).register("a", "b", "c").message == "Registration Failed"


def test_logout_requires_confirmation(service, session, mock_post):
    session.save("abc")
    res = AuthController(service, session).logout(confirmed=False)
    assert not res.ok
    mock_post.assert_not_called()
    assert session.read() == "abc"


def test_logout_clears_session_even_if_call_fails(service, session, mock_post):
    session.save("abc")
    mock_post.side_effect = requests.Timeout("slow")
    res = AuthController(service, session).logout(confirmed=True)
    assert res.ok
    assert session.read() is None


def test_logout_sends_token(service, session, mock_post):
    session.save("abc")
    AuthController(service, session).logout(confirmed=True)
    assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Token abc"


# -------------------- DASHBOARD --------------------

def test_load_state_builds_view(service, mock_post):
    _routes(mock_post, {
        "/state/": {"bot_running": True, "asset": "ETHUSDT", "username": "ana"},
        "/market-data/": {"prices": [1, 2, 3, 4, 5]},
    })
    res = DashboardController(service).load_state()
    assert res.ok
    view = res.data
    assert view.state.asset == "ETHUSDT"
    assert view.market.current_price_label == "5.00"
    assert len(view.candles) == 1
    called = [c.args[0] for c in mock_post.call_args_list]
    assert called[0].endswith("/state/") and called[1].endswith("/market-data/")


def test_load_state_network_failure(service, mock_post):
    mock_post.side_effect = requests.ConnectionError()
    res = DashboardController(service).load_state()
    assert not res.ok
    assert res.message == NETWORK_ERROR


@pytest.mark.parametrize("running,endpoint", [(True, "/stop-bot/"), (False, "/start-bot/")])
def test_toggle_bot_calls_right_endpoint_and_reloads(service, mock_post, running, endpoint):
    _routes(mock_post, {"/state/": {"bot_running": not running}, "/market-data/": {"prices": []}})
    res = DashboardController(service).toggle_bot(running)
    assert res.ok
    called = [c.args[0] for c in mock_post.call_args_list]
    assert called[0].endswith(endpoint)
    assert res.data.state.bot_running is (not running)


def test_toggle_bot_backend_rejection(service, mock_post):
    mock_post.return_value = make_response({"detail": "Bot already running"})
    res = DashboardController(service).toggle_bot(False)
    assert not res.ok
    assert res.message == "Bot already running"
    assert mock_post.call_count == 1


@pytest.mark.parametrize("quantity", ["", "0", "-1", "abc", "nan", None])
def test_trade_rejects_invalid_quantity(service, mock_post, quantity):
    res = DashboardController(service).trade(TradeAction.BUY, quantity)
    assert res.message == "Enter a valid quantity"
    mock_post.assert_not_called()


def test_trade_sell_posts_quantity(service, mock_post):
    res = DashboardController(service).trade(TradeAction.SELL, "0.25")
    assert res.ok
    first = mock_post.call_args_list[0]
    assert first.args[0].endswith("/sell/")
    assert first.kwargs["json"] == {"quantity": 0.25}


def test_trade_reloads_state_after_order(service, mock_post):
    _routes(mock_post, {"/state/": {"bot_running": True, "asset": "ETHUSDT"}, "/market-data/": {"prices": [7, 8]}})
    res = DashboardController(service).trade(TradeAction.BUY, "1")
    assert res.ok
    assert res.message == "BUY order sent (1)."
    called = [c.args[0] for c in mock_post.call_args_list]
    assert called[0].endswith("/buy/")
    assert called[1].endswith("/state/") and called[2].endswith("/market-data/")
    assert res.data.state.asset == "ETHUSDT"
    assert res.data.market.current_price_label == "8.00"


def test_rejected_trade_does_not_reload(service, mock_post):
    mock_post.return_value = make_response({"detail": "Insufficient balance"})
    res = DashboardController(service).trade(TradeAction.SELL, "5")
    assert res.message == "Insufficient balance"
    assert mock_post.call_count == 1


def test_load_logs(service, mock_post):
    mock_post.return_value = make_response({"history": [{"action": "SELL", "profit_loss": 2}]})
    res = DashboardController(service).load_logs()
    assert res.ok
    assert res.data[0].action is TradeAction.SELL

    mock_post.side_effect = requests.ConnectionError()
    assert DashboardController(service).load_logs().message == "Failed to load logs"


# -------------------- HISTORY --------------------

def test_history_load_summarises(service, mock_post):
    mock_post.return_value = make_response({"history": [{"profit_loss": 10}, {"profit_loss": -3}, {}]})
    res = HistoryController(service).load()
    assert res.ok
    assert res.data.summary.total_trades == 3
    assert res.data.summary.net_pnl == 7


def test_history_rejected_call_shows_detail(service, mock_post):
    mock_post.return_value = make_response({"detail": "Invalid token."}, status=401)
    res = HistoryController(service).load()
    assert not res.ok
    assert res.message == "Invalid token."


def test_history_without_list_is_empty(service, mock_post):
    res = HistoryController(service).load()
    assert res.ok
    assert res.data.entries == []


def test_export_csv(service, mock_post):
    res = HistoryController(service).export_csv()
    assert res.ok and res.message == "CSV Export Initiated"
    assert mock_post.call_args.args[0].endswith("/export/")


# -------------------- ANALYTICS --------------------

def test_analytics_view_labels(service, mock_post):
    mock_post.return_value = make_response({
        "roi": {"roi_percent": -2},
        "price_vs_time": {"data": [{"price": 100}, {"price": 100}]},
        "rsi_vs_time": {"data": [{"rsi": 40}], "thresholds": {"buy": 45, "sell": 55}},
        "profit_vs_loss": {"data": [{"pnl": 1}, {"pnl": 4}]},
        "next_price": {"estimated_price": 101.5},
        "next_rsi": {"estimated_rsi": 48},
    })
    res = AnalyticsController(service).load()
    assert res.ok
    view = res.data
    assert view.roi_label is RoiLabel.NEGATIVE
    assert view.price_trend is PriceTrend.SIDEWAYS
    assert view.rsi_zone is RsiZone.OVERSOLD
    assert view.pnl_trend is PnlTrend.IMPROVING
    assert view.last_price_label == "100.00"


def test_analytics_empty_bundle_is_unclassified(service, mock_post):
    res = AnalyticsController(service).load()
    view = res.data
    assert view.roi_label is RoiLabel.UNCLASSIFIED
    assert view.price_trend is PriceTrend.UNCLASSIFIED
    assert view.rsi_zone is RsiZone.UNCLASSIFIED
    assert view.pnl_trend is PnlTrend.UNCLASSIFIED
    assert view.last_price_label == "—"


# -------------------- SETTINGS --------------------

def test_change_asset_needs_confirmation(service, mock_post):
    res = SettingsController(service).change_asset("ethusdt", confirmed=False)
    assert res.message == ASSET_RESET_WARNING
    mock_post.assert_not_called()


def test_change_asset_confirmed(service, mock_post):
    res = SettingsController(service).change_asset(" ethusdt ", confirmed=True)
    assert res.ok
    assert res.message == "Asset updated. Wallet reset initiated."
    assert mock_post.call_args.kwargs["json"] == {"asset_symbol": "ETHUSDT"}


def test_set_risk(service, mock_post):
    res = SettingsController(service).set_risk("high")
    assert res.message == "Strategy updated to HIGH RISK."
    assert mock_post.call_args.kwargs["json"] == {"risk_level": "HIGH"}

    mock_post.reset_mock()
    assert not SettingsController(service).set_risk("YOLO").ok
    mock_post.assert_not_called()


@pytest.mark.parametrize("buy,sell,message", [
    ("abc", "55", "INPUT_ERROR: Numeric values required."),
    ("45", "", "INPUT_ERROR: Numeric values required."),
    ("55", "55", "LOGIC_ERROR: Buy signal must be < Sell signal."),
    ("60", "40", "LOGIC_ERROR: Buy signal must be < Sell signal."),
])
def test_thresholds_rejected_locally(service, mock_post, buy, sell, message):
    res = SettingsController(service).set_thresholds(buy, sell)
    assert res.message == message
    mock_post.assert_not_called()


def test_thresholds_sent_as_numbers(service, mock_post):
    res = SettingsController(service).set_thresholds("30", "70.5")
    assert res.message == "Oscillator thresholds updated."
    assert mock_post.call_args.kwargs["json"] == {"buy_rsi": 30.0, "sell_rsi": 70.5}


@pytest.mark.parametrize("value", ["9", "abc", ""])
def test_candles_minimum(service, mock_post, value):
    res = SettingsController(service).set_candles(value)
    assert res.message == "MIN_LIMIT: Requires > 10 candles."
    mock_post.assert_not_called()


def test_candles_accepted(service, mock_post):
    res = SettingsController(service).set_candles("10")
    assert res.message == "Analysis window updated."
    assert mock_post.call_args.kwargs["json"] == {"candle_limit": 10}


def test_settings_network_failure(service, mock_post):
    mock_post.side_effect = requests.ConnectionError()
    assert SettingsController(service).set_candles("50").message == NETWORK_ERROR


def test_html_body_uses_action_fallback(service, mock_post):
    mock_post.return_value = make_raw_response(b"<html>Bad Gateway</html>", status=502)
    res = HistoryController(service).export_csv()
    assert not res.ok
    assert res.message == "Failed to export CSV"


def test_transport_failure_is_not_reported_as_bad_body(service, mock_post):
    mock_post.side_effect = requests.ConnectionError("offline")
    assert HistoryController(service).export_csv().message == NETWORK_ERROR


def test_login_and_register_send_fields_as_typed(service, session, mock_post):
    mock_post.return_value = make_response({"token": "abc"})
    auth = AuthController(service, session)
    auth.login(" 555 ", "x")
    assert mock_post.call_args.kwargs["json"] == {"phone": " 555 ", "password": "x"}
    auth.register("ana ", " 555", "pw")
    assert mock_post.call_args.kwargs["json"] == {"name": "ana ", "phone": " 555", "password": "pw"}


def test_whitespace_only_phone_is_rejected_locally(service, session, mock_post):
    assert AuthController(service, session).login("   ", "x").message == "Credentials required."
    mock_post.assert_not_called()
