"""
Streamlit view for the analytics cards: ROI, PnL, price and RSI.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st  # type: ignore

from enums.metric_labels import UNCLASSIFIED_MARK


def render(ctx, navigate) -> None:
    st.header("📈 Analytics")
    st.caption("SIMULATION MODE ACTIVE // NO FINANCIAL ADVICE")

    with st.spinner("Initializing Analytics Module..."):
        res = ctx.analytics.load()
    if not res.ok:
        st.error(res.message)
        return
    view = res.data
    bundle = view.bundle
    roi = bundle.roi.roi_percent

    st.subheader("ROI")
    st.metric(view.roi_label.value, f"{'+' if (roi or 0) > 0 else ''}{roi if roi is not None else UNCLASSIFIED_MARK}%")
    st.write(view.roi_sentence)

    st.subheader(f"Profit vs loss · {view.pnl_trend.value}")
    pnl = bundle.profit_vs_loss.values()
    if pnl:
        st.line_chart(pd.DataFrame({"pnl": pnl}))

    st.subheader(f"Price · ${view.last_price_label} · {view.price_trend.value}")
    prices = bundle.price_vs_time.values()
    if prices:
        st.line_chart(pd.DataFrame({"price": prices}))
    if bundle.next_price.estimated_price is not None:
        st.caption(f"Next price estimate: {bundle.next_price.estimated_price:.2f}")

    th = bundle.rsi_vs_time.thresholds
    st.subheader(f"RSI · {view.rsi_zone.value}")
    rsi = bundle.rsi_vs_time.values()
    if rsi:
        frame = {"rsi": rsi}
        if th.buy is not None:
            frame["buy"] = [th.buy] * len(rsi)
        if th.sell is not None:
            frame["sell"] = [th.sell] * len(rsi)
        st.line_chart(pd.DataFrame(frame))
    st.caption(f"L:{th.buy if th.buy is not None else UNCLASSIFIED_MARK} / H:{th.sell if th.sell is not None else UNCLASSIFIED_MARK}")
    if bundle.next_rsi.estimated_rsi is not None:
        st.caption(f"Next RSI estimate: {bundle.next_rsi.estimated_rsi:.2f}")
