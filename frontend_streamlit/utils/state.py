"""
Session state management utilities.

Holds the single APIClient and SessionManager for this browser session in
Streamlit's session_state and hands them to pages explicitly.
"""

import asyncio
from typing import Any, Coroutine, Optional, TypeVar

import streamlit as st
from streamlit.runtime.scriptrunner import get_script_run_ctx

from vitrine.api_client import APIClient
from vitrine.core.config import get_settings
from vitrine.core.logging import get_logger, setup_logging
from vitrine.services.session import SessionManager

T = TypeVar("T")

logger = get_logger(__name__)


class SessionStateTokenStore:
    """Token store backed by st.session_state under the fixed storage key."""

    def __init__(self):
        self.key = get_settings().TOKEN_STORAGE_KEY

    def load(self) -> Optional[str]:
        return st.session_state.get(self.key)

    def save(self, token: str) -> None:
        st.session_state[self.key] = token

    def clear(self) -> None:
        st.session_state.pop(self.key, None)


def browser_session_id() -> Optional[str]:
    """Short id of the browser session running the current script, for log lines."""
    ctx = get_script_run_ctx(suppress_warning=True)
    return ctx.session_id[:8] if ctx else None


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive a coroutine to completion from a Streamlit script."""
    return asyncio.run(coro)


def init_session_state() -> None:
    """
    Create the API client and session manager once per browser session.

    Should be called at the top of every page. The first call restores the
    persisted token before any page content renders.
    """
    if "session" in st.session_state:
        return

    setup_logging(context=browser_session_id)
    api = APIClient()
    session = SessionManager(api, SessionStateTokenStore())
    st.session_state.api = api
    st.session_state.session = session

    with st.spinner("Carregando..."):
        run(session.restore())

    logger.info(f"Sessão iniciada (autenticado: {session.is_authenticated})")


def get_api() -> APIClient:
    """Get the API client for this browser session."""
    return st.session_state.api


def get_session() -> SessionManager:
    """Get the session manager for this browser session."""
    return st.session_state.session
