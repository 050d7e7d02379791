"""Dashboard page with business overview and statistics."""
import pandas as pd
import plotly.express as px
import streamlit as st

from core.analytics import sales_summary, summarize_stock, top_products
from core.constants import (
    STORE_NAME,
    TOP_PRODUCTS_LIMIT,
    furniture_low_stock_threshold,
    wood_low_stock_threshold,
)
from core.services import products_frame, sales_frame, today_iso
from ui.components import money, render_metric_row, render_table


def render(store, user):
    """Render the dashboard page."""
    st.header(f"Welcome back, {user['name']}")
    st.caption(f"Here's what's happening at {STORE_NAME} today")

    furniture = summarize_stock(store.products, furniture_low_stock_threshold())
    wood = summarize_stock(store.wood_products, wood_low_stock_threshold())
    overall = sales_summary(store.sales)
    today = sales_summary(store.sales, on=today_iso())

    render_metric_row([
        ("Total Sales", money(overall["revenue"])),
        ("Today's Sales", today["sales"]),
        ("Total Products", furniture["products"] + wood["products"]),
        ("Low Stock Items", furniture["low_stock"] + wood["low_stock"]),
    ])
    render_metric_row([
        ("Showroom Value", money(furniture["value"])),
        ("Warehouse Value", money(wood["value"])),
        ("Out of Stock", furniture["out_of_stock"] + wood["out_of_stock"]),
        ("Average Sale", money(overall["average"])),
    ])

    st.markdown("---")

    # Stock distribution by category (Pie chart)
    st.subheader("\U0001F4CA Showroom Stock by Category")
    df = products_frame(store.products, furniture_low_stock_threshold())
    category_stock = df.groupby("category")["stock"].sum().reset_index()
    category_stock = category_stock[category_stock["stock"] > 0]
    if not category_stock.empty:
        fig = px.pie(
            category_stock,
            values="stock",
            names="category",
            title="Units in Showroom",
        )
        st.plotly_chart(fig, width="stretch")
    else:
        st.info("No stock data to display")

    st.subheader("\U0001F4B0 Top Products by Revenue")
    best = pd.DataFrame(
        top_products(store.sales, TOP_PRODUCTS_LIMIT),
        columns=["name", "quantity", "revenue"],
    )
    if not best.empty:
        fig = px.bar(
            best,
            x="name",
            y="revenue",
            labels={"name": "Product", "revenue": "Revenue"},
            color="revenue",
            color_continuous_scale="Viridis",
        )
        st.plotly_chart(fig, width="stretch")
    else:
        st.info("No sales to display")

    st.subheader("\U0001F501 Recent Sales")
    recent = sales_frame(store.sales).sort_values("date", ascending=False).head(5)
    render_table(
        recent,
        {
            "date": "Date",
            "customer": "Customer",
            "total": "Total",
            "attendant": "Attendant",
            "status": "Status",
        },
        money_cols=("total",),
        empty_message="No recent activity",
    )
