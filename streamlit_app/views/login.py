"""
Streamlit view for signing in with phone and password.
"""

from __future__ import annotations

import streamlit as st  # type: ignore


def render(ctx, navigate) -> None:
    """Render the login form."""
    st.header("🔐 Login")
    with st.form("login"):
        phone = st.text_input("Phone")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        with st.spinner("Authenticating..."):
            res = ctx.auth.login(phone, password)
        if res.ok:
            navigate("dashboard")
        else:
            st.error(res.message)

    if st.button("Create an account"):
        navigate("register")
