"""
Utility modules for the Streamlit frontend.
"""

from .auth import open_url, require_admin, require_auth
from .state import get_api, get_session, init_session_state, run

__all__ = [
    "open_url",
    "require_admin",
    "require_auth",
    "get_api",
    "get_session",
    "init_session_state",
    "run",
]
