# streamlit_app/dashboard.py
from __future__ import annotations
import streamlit as st

from controllers.app_context import AppContext, create_context
from streamlit_app.views import analytics, dashboard, history, login, register, settings

PUBLIC_PAGES = {"login": login.render, "register": register.render}
PRIVATE_PAGES = {
    "dashboard": dashboard.render,
    "history": history.render,
    "analytics": analytics.render,
    "settings": settings.render,
}

@st.cache_resource
def get_context() -> AppContext:
    return create_context()

def navigate(page: str) -> None:
    st.session_state["page"] = page
    st.rerun()

st.set_page_config(page_title="RSI Bot", layout="wide")
ctx = get_context()

if "page" not in st.session_state:
    st.session_state["page"] = "dashboard" if ctx.auth.is_authenticated() else "login"

page = st.session_state["page"]
authenticated = ctx.auth.is_authenticated()

# sin token solo se ven login/register
if not authenticated and page not in PUBLIC_PAGES:
    page = st.session_state["page"] = "login"

if authenticated:
    st.sidebar.header("Menú")
    for name in PRIVATE_PAGES:
        if st.sidebar.button(name.capitalize(), use_container_width=True, disabled=(name == page)):
            navigate(name)

renderer = PUBLIC_PAGES.get(page) or PRIVATE_PAGES.get(page)
renderer(ctx, navigate)
