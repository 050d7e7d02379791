"""Reports page (managers only)."""
from datetime import date, datetime, timedelta

import pandas as pd
import plotly.express as px
import streamlit as st

from core.analytics import (
    group_sales_by_attendant,
    group_sales_by_date,
    revenue_share,
    sales_in_period,
    sales_summary,
    stock_value,
    top_products,
)
from core.constants import (
    TOP_PRODUCTS_LIMIT,
    furniture_low_stock_threshold,
    wood_low_stock_threshold,
)
from core.services import (
    KAMPALA_TZ,
    export_report,
    products_frame,
    rollups_frame,
    wood_frame,
)
from core.simple_auth import can_view_reports
from ui.components import money, render_metric_row, render_table


def render(store, user):
    """Render the reports page."""
    if not can_view_reports(user):
        st.error("⛔ Access denied. Reports are for managers only.")
        return

    st.header("\U0001F4C8 Reports & Analytics")

    col1, col2, col3, col4 = st.columns([2, 2, 1, 1])
    first_sale = min((s.date[:10] for s in store.sales), default=None)
    today = datetime.now(KAMPALA_TZ).date()
    default_start = today - timedelta(days=30)
    if first_sale:
        default_start = min(default_start, date.fromisoformat(first_sale))
    start = col1.date_input("From", value=default_start)
    end = col2.date_input("To", value=today)
    if col3.button("\U0001F4C4 Export PDF"):
        st.toast(export_report("pdf"), icon="\U0001F4C4")
    if col4.button("⬇️ Export Excel"):
        st.toast(export_report("excel"), icon="\U0001F4CA")

    sales = sales_in_period(store.sales, start.isoformat(), end.isoformat())
    summary = sales_summary(sales)
    total_stock_value = stock_value(store.products) + stock_value(store.wood_products)
    render_metric_row([
        ("Total Revenue", money(summary["revenue"])),
        ("Total Orders", summary["sales"]),
        ("Average Order", money(summary["average"])),
        ("Stock Value", money(total_stock_value)),
    ])

    sales_tab, inventory_tab, products_tab, attendants_tab = st.tabs(
        ["Sales Report", "Inventory Report", "Product Performance", "Attendant Performance"]
    )

    with sales_tab:
        by_date = rollups_frame(group_sales_by_date(sales), ["date", "sales", "revenue"])
        if not by_date.empty:
            fig = px.bar(
                by_date,
                x="date",
                y="revenue",
                labels={"date": "Date", "revenue": "Revenue"},
                title="Daily Revenue",
            )
            st.plotly_chart(fig, width="stretch")
        render_table(
            by_date,
            {"date": "Date", "sales": "Number of Sales", "revenue": "Revenue"},
            money_cols=("revenue",),
            empty_message="No sales in the selected period",
        )

    with inventory_tab:
        st.subheader("Showroom")
        render_table(
            products_frame(store.products, furniture_low_stock_threshold()),
            {
                "name": "Product",
                "category": "Type",
                "stock": "Quantity",
                "price": "Unit Price",
                "value": "Total Value",
                "status": "Status",
            },
            money_cols=("price", "value"),
            empty_message="No products",
        )
        st.subheader("Warehouse")
        render_table(
            wood_frame(store.wood_products, wood_low_stock_threshold()),
            {
                "name": "Product",
                "category": "Type",
                "stock": "Quantity",
                "selling_price": "Unit Price",
                "value": "Total Value",
                "status": "Status",
            },
            money_cols=("selling_price", "value"),
            empty_message="No wood stock",
        )

    with products_tab:
        best = pd.DataFrame(
            top_products(sales, TOP_PRODUCTS_LIMIT), columns=["name", "quantity", "revenue"]
        )
        best["share"] = best["revenue"].apply(
            lambda r: revenue_share(r, summary["revenue"])
        )
        best["share"] = best["share"].apply(lambda s: "N/A" if s is None else f"{s:.1f}%")
        render_table(
            best,
            {
                "name": "Product Name",
                "quantity": "Units Sold",
                "revenue": "Revenue Generated",
                "share": "Percentage of Total",
            },
            money_cols=("revenue",),
            empty_message="No product sales in the selected period",
        )

    with attendants_tab:
        render_table(
            rollups_frame(
                group_sales_by_attendant(sales), ["name", "sales", "revenue", "average"]
            ),
            {
                "name": "Attendant Name",
                "sales": "Number of Sales",
                "revenue": "Total Revenue",
                "average": "Average Sale Value",
            },
            money_cols=("revenue", "average"),
            empty_message="No attendant sales in the selected period",
        )
