"""
Streamlit view for the trade history and its summary.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st  # type: ignore

from services.metrics import format_pnl


def render(ctx, navigate) -> None:
    st.header("📜 Trade History")

    res = ctx.history.load()
    if not res.ok:
        st.error(res.message)
        return
    view = res.data

    c1, c2 = st.columns(2)
    c1.metric("Total trades", f"{view.summary.total_trades}")
    c2.metric("Net PnL", format_pnl(view.summary.net_pnl))

    if view.entries:
        df = pd.DataFrame([e.model_dump() for e in view.entries])
        cols = [c for c in ["time", "action", "price", "quantity", "profit_loss", "event_type"] if c in df.columns]
        st.dataframe(df[cols], use_container_width=True)
    else:
        st.info("No trades recorded yet.")

    if st.button("Export CSV"):
        out = ctx.history.export_csv()
        (st.success if out.ok else st.error)(out.message)
