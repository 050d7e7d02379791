"""Suppliers page."""
import streamlit as st

from core.analytics import supplier_metrics
from core.services import add_supplier, delete_supplier, search_suppliers, suppliers_frame
from core.validation import MissingInformationError
from ui.components import render_metric_row, render_table, show_validation_error


def render(store, user):
    """Render the suppliers page."""
    st.header("\U0001F69A Suppliers")
    st.caption("Manage your supplier network")

    metrics = supplier_metrics(store.suppliers)
    avg_rating = metrics["average_rating"]
    render_metric_row([
        ("Total Suppliers", metrics["suppliers"]),
        ("Top Rated", metrics["top_rated"]),
        ("Avg. Rating", "N/A" if avg_rating is None else f"{avg_rating:.1f} ⭐"),
        ("Product Categories", len(metrics["categories"])),
    ])

    with st.expander("➕ Add Supplier"):
        with st.form("add_supplier_form", clear_on_submit=True):
            data = {
                "name": st.text_input("Name"),
                "contact": st.text_input("Contact"),
                "email": st.text_input("Email"),
                "address": st.text_input("Address"),
                "products": st.text_input("Products (comma separated)"),
            }
            if st.form_submit_button("✅ Add Supplier"):
                try:
                    _, msg = add_supplier(data)
                except MissingInformationError as e:
                    show_validation_error(e)
                else:
                    st.success(msg)

    search = st.text_input("Search by name or product")
    suppliers = sorted(
        search_suppliers(store.suppliers, search), key=lambda s: s.name.casefold()
    )
    render_table(
        suppliers_frame(suppliers),
        {
            "name": "Name",
            "contact": "Contact",
            "email": "Email",
            "address": "Address",
            "products": "Products",
            "rating": "Rating",
        },
        empty_message="No suppliers found matching your search.",
    )

    if suppliers and user["is_manager"]:
        st.divider()
        st.caption("Remove a supplier")
        for supplier in suppliers:
            col1, col2 = st.columns([10, 1])
            col1.text(f"{supplier.name} - {supplier.contact}")
            if col2.button("\U0001F5D1\ufe0f", key=f"del_supplier_{supplier.id}"):
                st.toast(delete_supplier(supplier), icon="\U0001F5D1\ufe0f")
