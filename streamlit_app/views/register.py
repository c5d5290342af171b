"""
Streamlit view for creating an account.
"""

from __future__ import annotations

import streamlit as st  # type: ignore


def render(ctx, navigate) -> None:
    st.header("📝 Register")
    with st.form("register"):
        name = st.text_input("Name")
        phone = st.text_input("Phone")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Register")

    if submitted:
        with st.spinner("Registering..."):
            res = ctx.auth.register(name, phone, password)
        if res.ok:
            navigate("dashboard")
        else:
            st.error(res.message)

    if st.button("Already have an account? Login"):
        navigate("login")
