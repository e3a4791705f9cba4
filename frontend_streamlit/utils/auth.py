"""
Access control helpers for the Streamlit pages.
"""

import json

import streamlit as st
import streamlit.components.v1 as components

from vitrine.services.session import SessionManager


def require_auth(session: SessionManager) -> bool:
    """
    Check if user is authenticated.

    Displays warning and returns False if not authenticated.
    """
    if not session.is_authenticated:
        st.warning("Você precisa fazer login para acessar esta página.")
        st.page_link("pages/1_Login.py", label="Ir para Login", icon="🔐")
        return False
    return True


def require_admin(session: SessionManager) -> bool:
    """
    Check if user is an admin.

    Displays error and returns False if not admin.
    """
    if not require_auth(session):
        return False

    if not session.is_admin:
        st.error("Acesso restrito. Esta página é apenas para administradores.")
        return False

    return True


def open_url(url: str, new_tab: bool = True) -> None:
    """Open a URL in the visitor's browser (chat link, dialer, checkout)."""
    target = "window.open({url}, '_blank')" if new_tab else "window.top.location.href = {url}"
    components.html(f"<script>{target.format(url=json.dumps(url))}</script>", height=0)
