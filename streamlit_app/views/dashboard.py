"""
Streamlit view for the bot dashboard.

Shows the bot state and live price, start/stop and manual trades, and the
latest trades. While this page is open it reloads itself every
``STATE_POLL_INTERVAL_SEC`` seconds; leaving the page ends the refresh.
"""

from __future__ import annotations

import time

import pandas as pd
import streamlit as st  # type: ignore

from enums.risk_level import TradeAction


def _render_chart(view) -> None:
    if not view.candles:
        st.info("// WAITING FOR SIGNAL... CHECK YOUR INTERNET")
        return
    df = pd.DataFrame([c.model_dump() | {"bull": c.is_bull} for c in view.candles])
    st.line_chart(pd.DataFrame({"price": view.market.prices}))
    st.dataframe(df[["open", "high", "low", "close", "bull"]], use_container_width=True)


def _after_action(out) -> None:
    # éxito: se guarda el aviso y se repinta con el estado recargado
    if out.ok:
        st.session_state["dashboard_flash"] = out.message
        st.rerun()
    st.error(out.message)


def render(ctx, navigate) -> None:
    flash = st.session_state.pop("dashboard_flash", None)
    if flash:
        st.success(flash)

    res = ctx.dashboard.load_state()
    if not res.ok:
        st.error(res.message)
        view = None
    else:
        view = res.data

    state = view.state if view else None
    st.title(f"📊 {state.username if state else '—'}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Asset", state.asset if state else "—")
    c2.metric("Price", view.market.current_price_label if view else "—")
    c3.metric("Bot", "RUNNING" if state and state.bot_running else "STOPPED")
    c4.metric("Risk", state.risk_level.value if state else "—")
    if state:
        st.caption(f"RSI buy < {state.buy_rsi:g} · sell > {state.sell_rsi:g} · candles {state.candle_limit}")

    if view:
        _render_chart(view)

    # -------- start / stop --------
    running = bool(state and state.bot_running)
    if st.button("⏹ Stop bot" if running else "▶ Start bot", disabled=state is None):
        _after_action(ctx.dashboard.toggle_bot(running))

    # -------- manual trade --------
    with st.form("trade"):
        side = st.radio("Side", [a.value for a in TradeAction], horizontal=True)
        quantity = st.text_input("Quantity")
        if st.form_submit_button("Confirm trade"):
            _after_action(ctx.dashboard.trade(TradeAction(side), quantity))

    # -------- logs --------
    if st.toggle("Show logs"):
        logs = ctx.dashboard.load_logs()
        if not logs.ok:
            st.error(logs.message)
        elif logs.data:
            st.dataframe(pd.DataFrame([e.model_dump() for e in logs.data]), use_container_width=True)
        else:
            st.info("No trades yet.")

    # -------- logout --------
    st.divider()
    confirm = st.checkbox("I want to log out")
    if st.button("Logout", disabled=not confirm):
        out = ctx.auth.logout(confirmed=confirm)
        if out.ok:
            navigate("login")

    # -------- auto-refresh --------
    if st.sidebar.checkbox("Auto-refresh", value=True):
        time.sleep(float(ctx.settings.state_poll_interval_sec))
        st.rerun()
