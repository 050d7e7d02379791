"""Customers page."""
import streamlit as st

from core.analytics import customer_metrics
from core.services import add_customer, customers_frame, delete_customer, search_customers
from core.validation import MissingInformationError
from ui.components import money, render_metric_row, render_table, show_validation_error


def render(store, user):
    """Render the customers page."""
    st.header("\U0001F465 Customers")
    st.caption("Manage your customer relationships")

    metrics = customer_metrics(store.customers)
    render_metric_row([
        ("Total Customers", metrics["customers"]),
        ("Total Revenue", money(metrics["revenue"])),
        ("Avg. Purchase", money(metrics["average_purchase"])),
    ])

    with st.expander("➕ Add Customer"):
        with st.form("add_customer_form", clear_on_submit=True):
            data = {
                "name": st.text_input("Name"),
                "phone": st.text_input("Phone"),
                "email": st.text_input("Email"),
                "address": st.text_input("Address"),
            }
            if st.form_submit_button("✅ Add Customer"):
                try:
                    _, msg = add_customer(data)
                except MissingInformationError as e:
                    show_validation_error(e)
                else:
                    st.success(msg)

    search = st.text_input("Search by name, phone or email")
    customers = sorted(
        search_customers(store.customers, search), key=lambda c: c.name.casefold()
    )
    render_table(
        customers_frame(customers),
        {
            "name": "Name",
            "phone": "Phone",
            "email": "Email",
            "address": "Address",
            "total_purchases": "Total Purchases",
            "last_purchase": "Last Purchase",
        },
        money_cols=("total_purchases",),
        empty_message="No customers found matching your search.",
    )

    if customers and user["is_manager"]:
        st.divider()
        st.caption("Remove a customer")
        for customer in customers:
            col1, col2 = st.columns([10, 1])
            col1.text(f"{customer.name} - {customer.phone}")
            if col2.button("\U0001F5D1\ufe0f", key=f"del_customer_{customer.id}"):
                st.toast(delete_customer(customer), icon="\U0001F5D1\ufe0f")
