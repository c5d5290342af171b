"""
Streamlit view for the bot configuration.
"""

from __future__ import annotations

import streamlit as st  # type: ignore

from controllers.settings_controller import ASSET_RESET_WARNING
from enums.risk_level import RiskLevel


def _show(res) -> None:
    if res.ok:
        st.success(res.message)
    else:
        st.error(res.message)


def render(ctx, navigate) -> None:
    st.header("⚙️ Settings")

    st.subheader("Trading pair")
    asset = st.text_input("Asset symbol", value="BTCUSDT")
    st.warning(ASSET_RESET_WARNING)
    confirm = st.checkbox("CONFIRM RESET")
    if st.button("Change asset", disabled=not confirm):
        _show(ctx.config.change_asset(asset, confirmed=confirm))

    st.subheader("Risk strategy")
    risk = st.radio("Risk level", [r.value for r in RiskLevel], index=1, horizontal=True)
    if st.button("Save risk"):
        _show(ctx.config.set_risk(risk))

    st.subheader("RSI thresholds")
    c1, c2 = st.columns(2)
    buy = c1.text_input("Buy RSI", value="45")
    sell = c2.text_input("Sell RSI", value="55")
    if st.button("Save thresholds"):
        _show(ctx.config.set_thresholds(buy, sell))

    st.subheader("Analysis window")
    candles = st.text_input("Candle limit", value="50")
    if st.button("Save candles"):
        _show(ctx.config.set_candles(candles))
