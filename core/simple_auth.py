"""Simple authentication module without external dependencies.

The logged-in user lives in Streamlit session state, but pages never read
it directly: `app.py` fetches it once with `get_current_user()` and passes
it to every page and to the sidebar.
"""
import hashlib
import logging
from typing import Iterable, Optional

import streamlit as st

from core.constants import ROLE_MANAGER, ROLES, STORE_NAME
from core.models import User

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash password using SHA-256."""
    return hashlib.sha256(password.encode()).hexdigest()


def get_bootstrap_users() -> dict:
    """Get extra accounts from secrets.toml (`[users.<username>]` tables)."""
    try:
        if 'users' in st.secrets:
            return {k: dict(v) for k, v in st.secrets['users'].items()}
    except Exception:
        logger.debug("No users configured in secrets")
    return {}


def find_user(users: Iterable[User], username: str) -> Optional[User]:
    username = (username or "").strip().lower()
    for user in users:
        if user.username.lower() == username:
            return user
    return None


def verify_login(users: Iterable[User], username: str, password: str) -> tuple:
    """Verify login credentials against secrets.toml, then the built-in users.
    Returns: (success: bool, name: str, role: str)
    """
    username = (username or "").strip()
    password_hash = hash_password(password or "")

    for key, user in get_bootstrap_users().items():
        if key.lower() == username.lower():
            if password_hash == user.get('password_hash') and user.get('role') in ROLES:
                return True, user['name'], user['role']
            return False, None, None

    user = find_user(users, username)
    if user and user.role in ROLES and password_hash == user.password_hash:
        return True, user.name, user.role

    return False, None, None


def login_form(users: Iterable[User]):
    """Display the login form."""
    st.markdown(f"### \U0001F510 {STORE_NAME}")
    with st.form("login_form", clear_on_submit=False):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submit = st.form_submit_button("Login", width="stretch")

        if submit:
            if username and password:
                success, name, role = verify_login(users, username, password)
                if success:
                    st.session_state.authenticated = True
                    st.session_state.username = username.strip().lower()
                    st.session_state.name = name
                    st.session_state.role = role
                    logger.info("User %s logged in as %s", username, role)
                    st.rerun()
                else:
                    logger.warning("Failed login for %s", username)
                    st.error("❌ Invalid username or password")
            else:
                st.warning("⚠️ Please enter both username and password")


def logout():
    """Clear authentication session."""
    st.session_state.authenticated = False
    st.session_state.username = None
    st.session_state.name = None
    st.session_state.role = None


def require_auth():
    """Check if user is authenticated. Returns True if authenticated, False otherwise."""
    return bool(st.session_state.get('authenticated', False))


def get_current_user():
    """Get current user info."""
    role = st.session_state.get('role')
    return build_user_context(
        st.session_state.get('username'), st.session_state.get('name'), role
    )


def build_user_context(username, name, role) -> dict:
    return {
        'username': username,
        'name': name,
        'role': role,
        'is_manager': role == ROLE_MANAGER,
    }


def can_view_reports(user: dict) -> bool:
    """Reports are for managers only."""
    return bool(user and user.get('role') == ROLE_MANAGER)
