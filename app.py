"""Mayondo Wood & Furniture - Main Application Entry Point."""
import logging

import streamlit as st

from core.constants import (
    MENU_CUSTOMERS,
    MENU_DASHBOARD,
    MENU_REPORTS,
    MENU_SALES,
    MENU_SHOWROOM,
    MENU_SUPPLIERS,
    MENU_WAREHOUSE,
    STORE_NAME,
)
from core.simple_auth import can_view_reports, get_current_user, login_form, require_auth
from core.store import init_store
from ui.sidebar import render_sidebar_menu

# Import page render functions
from page_modules import customers, dashboard, reports, sales, showroom, suppliers, warehouse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration
st.set_page_config(
    page_title=STORE_NAME,
    page_icon="\U0001FA91",
    layout="wide",
)


# Fixtures are loaded once per process
@st.cache_resource
def get_store():
    return init_store()


store = get_store()

# Check authentication
if not require_auth():
    login_form(store.users)
    st.stop()

# User is authenticated - passed explicitly to the sidebar and every page
user = get_current_user()

menu = render_sidebar_menu(user)

# Page routing
pages = {
    MENU_DASHBOARD: lambda: dashboard.render(store, user),
    MENU_SHOWROOM: lambda: showroom.render(store, user),
    MENU_WAREHOUSE: lambda: warehouse.render(store, user),
    MENU_SALES: lambda: sales.render(store, user),
    MENU_CUSTOMERS: lambda: customers.render(store, user),
    MENU_SUPPLIERS: lambda: suppliers.render(store, user),
}

# Add manager-only pages
if can_view_reports(user):
    pages[MENU_REPORTS] = lambda: reports.render(store, user)

# Render selected page
if menu not in pages:
    menu = MENU_DASHBOARD
pages[menu]()
