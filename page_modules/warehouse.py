"""Warehouse page for wood stock."""
import streamlit as st

from core.analytics import summarize_stock
from core.constants import WOOD_CATEGORIES, wood_low_stock_threshold
from core.services import search_wood, supplier_names, update_wood_stock, wood_frame
from ui.components import money, render_metric_row, render_table

AVAILABILITY_OPTIONS = {
    "All": "all",
    "Available": "available",
    "Low Stock": "low",
    "Out of Stock": "out",
}


def render(store, user):
    """Render the warehouse page."""
    st.header("\U0001FAB5 Warehouse Management")
    threshold = wood_low_stock_threshold()

    col1, col2, col3, col4 = st.columns([3, 2, 2, 2])
    search = col1.text_input("Search by name or supplier")
    category = col2.selectbox("Type", ["all"] + WOOD_CATEGORIES)
    supplier = col3.selectbox("Supplier", ["all"] + supplier_names(store.wood_products))
    availability = col4.selectbox("Availability", list(AVAILABILITY_OPTIONS))

    items = search_wood(
        store.wood_products,
        threshold,
        query=search,
        category=category,
        supplier=supplier,
        availability=AVAILABILITY_OPTIONS[availability],
    )

    # Counts cover the whole warehouse, value only what the filters show
    summary = summarize_stock(store.wood_products, threshold)
    render_metric_row([
        ("Total Products", summary["products"]),
        ("Filtered Value", money(summarize_stock(items, threshold)["value"])),
        ("Low Stock", summary["low_stock"]),
        ("Out of Stock", summary["out_of_stock"]),
    ])

    items = sorted(items, key=lambda w: w.name.casefold())
    render_table(
        wood_frame(items, threshold),
        {
            "name": "Name",
            "category": "Type",
            "supplier": "Supplier",
            "cost_price": "Cost",
            "selling_price": "Price",
            "stock": "Stock",
            "unit": "Unit",
            "status": "Status",
            "date_received": "Received",
        },
        money_cols=("cost_price", "selling_price"),
        empty_message="No products found matching your filters.",
    )

    if not items:
        return

    st.divider()
    st.subheader("\U0001F4E6 Update Stock")
    names = [w.name for w in items]
    with st.form("update_stock_form", clear_on_submit=True):
        selected = st.selectbox("Product", names)
        quantity = st.number_input("New quantity", min_value=0, step=1, value=0)
        submitted = st.form_submit_button("Update Stock")
        if submitted:
            product = items[names.index(selected)]
            try:
                msg = update_wood_stock(product, int(quantity))
            except ValueError as e:
                st.error(str(e))
            else:
                st.toast(msg, icon="\U0001F4E6")
