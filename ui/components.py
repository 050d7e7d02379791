"""Reusable UI components."""
import streamlit as st

from core.constants import STOCK_IN, STOCK_LOW, STOCK_OUT, currency

STATUS_ICONS = {
    STOCK_IN: "\U0001F7E2",
    STOCK_LOW: "\U0001F7E0",
    STOCK_OUT: "\U0001F534",
}


def money(amount) -> str:
    """Format an amount in the configured currency, or N/A when there is none."""
    if amount is None:
        return "N/A"
    return f"{currency()} {amount:,.0f}"


def status_label(status: str) -> str:
    if status not in STATUS_ICONS:
        return status.title()
    return f"{STATUS_ICONS[status]} {status.title()}"


def render_metric_row(metrics):
    """Render (label, value) pairs as one row of st.metric cards."""
    cols = st.columns(len(metrics))
    for col, (label, value) in zip(cols, metrics):
        col.metric(label, value)


def render_table(df, rename, money_cols=(), empty_message="Nothing to show"):
    """Render a DataFrame with friendly headers and formatted money columns."""
    if df.empty:
        st.info(empty_message)
        return

    display_df = df.copy()
    for c in money_cols:
        if c in display_df.columns:
            display_df[c] = display_df[c].apply(money)
    if "status" in display_df.columns:
        display_df["status"] = display_df["status"].apply(status_label)
    display_df = display_df[[c for c in rename if c in display_df.columns]]
    display_df = display_df.rename(columns=rename)

    st.markdown(
        "<style>td {vertical-align: middle !important;}</style>", unsafe_allow_html=True
    )
    st.dataframe(display_df, width="stretch", hide_index=True)


def show_validation_error(error):
    """Surface a MissingInformationError the way the forms report failures."""
    title = getattr(error, "title", "Error")
    st.error(f"**{title}**: {error}")
