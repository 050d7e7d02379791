"""Sidebar menu and logout."""
import streamlit as st

from core.constants import (
    MENU_CUSTOMERS,
    MENU_DASHBOARD,
    MENU_REPORTS,
    MENU_SALES,
    MENU_SHOWROOM,
    MENU_SUPPLIERS,
    MENU_WAREHOUSE,
)
from core.simple_auth import can_view_reports, logout


def menu_for(user):
    """Menu entries offered to this user. Reports is manager-only."""
    menu = [
        MENU_DASHBOARD,
        MENU_SHOWROOM,
        MENU_WAREHOUSE,
        MENU_SALES,
        MENU_CUSTOMERS,
        MENU_SUPPLIERS,
    ]
    if can_view_reports(user):
        menu.append(MENU_REPORTS)
    return menu


def render_sidebar_menu(user):
    """Render the sidebar navigation menu with the user's portal and logout."""
    menu = menu_for(user)
    if (
        "menu_selection" not in st.session_state
        or st.session_state.menu_selection not in menu
    ):
        st.session_state.menu_selection = menu[0]
    selected = st.sidebar.radio("Select Page", menu, key="menu_selection")

    st.sidebar.markdown("---")
    portal = "Manager Portal" if user["is_manager"] else "Sales Portal"
    st.sidebar.caption(portal)
    st.sidebar.write(f"**{user['name']}**")
    if st.sidebar.button("\U0001F6AA Logout", key="sidebar_logout"):
        logout()
        st.toast("Logged out.", icon="\U0001F512")
        st.rerun()

    return selected
