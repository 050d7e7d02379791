"""Showroom page to browse furniture."""
import streamlit as st

from core.analytics import stock_status, summarize_stock
from core.constants import FURNITURE_CATEGORIES, furniture_low_stock_threshold
from core.services import products_frame, search_products
from ui.components import money, render_metric_row, render_table, status_label


def render(store, user):
    """Render the showroom page."""
    st.header("\U0001F6CB\ufe0f Furniture Showroom")
    threshold = furniture_low_stock_threshold()

    summary = summarize_stock(store.products, threshold)
    render_metric_row([
        ("Products", summary["products"]),
        ("Units in Stock", summary["items"]),
        ("Low Stock", summary["low_stock"]),
        ("Out of Stock", summary["out_of_stock"]),
    ])

    max_price = int(max((p.price for p in store.products), default=0))
    col1, col2, col3 = st.columns([3, 2, 3])
    search = col1.text_input("Search by name or description")
    category = col2.selectbox("Category", ["all"] + FURNITURE_CATEGORIES)
    price_range = col3.slider(
        "Price range", 0, max(max_price, 1), (0, max(max_price, 1)), step=5000
    )

    products = search_products(store.products, search, category, price_range)
    products = sorted(products, key=lambda p: p.name.casefold())

    featured = [p for p in products if p.featured]
    if featured:
        st.subheader("⭐ Featured")
        cols = st.columns(len(featured))
        for col, product in zip(cols, featured):
            with col:
                st.markdown(f"**{product.name}**")
                st.caption(f"{product.category.title()} · {product.quality.title()}")
                st.write(money(product.price))
                st.write(status_label(stock_status(product.stock_quantity, threshold)))

    st.subheader("All Products")
    render_table(
        products_frame(products, threshold),
        {
            "name": "Name",
            "category": "Category",
            "quality": "Quality",
            "price": "Price",
            "stock": "Stock",
            "status": "Status",
            "supplier": "Supplier",
            "description": "Description",
        },
        money_cols=("price",),
        empty_message="No products found matching your filters.",
    )

    if products:
        names = [p.name for p in products]
        selected = st.selectbox("Product details", names, key="showroom_selected")
        product = products[names.index(selected)]
        with st.expander(product.name, expanded=False):
            st.write(product.description or "")
            st.write(f"Colour: {product.color or 'N/A'}")
            if product.measurements:
                m = product.measurements
                st.write(f"Measurements (W x H x D): {m.width} x {m.height} x {m.depth}")
            if user["is_manager"] and product.cost_price is not None:
                st.write(f"Cost price: {money(product.cost_price)}")
