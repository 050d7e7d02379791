"""Sales page: new sale at the counter and sales history."""
import streamlit as st
from streamlit_free_text_select import st_free_text_select

from core.analytics import sales_summary
from core.cart import SaleDraft
from core.constants import PAYMENT_METHODS, SALE_PENDING
from core.services import sales_frame, today_iso
from core.validation import MissingInformationError
from ui.components import money, render_metric_row, render_table, show_validation_error

CUSTOMER_FIELDS = (
    "sale_name", "sale_phone", "sale_address", "sale_customer", "sale_customer_applied"
)


def _draft() -> SaleDraft:
    if "sale_draft" not in st.session_state:
        st.session_state.sale_draft = SaleDraft()
    return st.session_state.sale_draft


def day_metrics(sales, day):
    """Metric row for the sales made on `day`."""
    summary = sales_summary(sales, on=day)
    pending = sum(1 for s in sales if s.status == SALE_PENDING)
    return [
        ("Today's Sales", summary["sales"]),
        ("Today's Revenue", money(summary["revenue"])),
        ("Average Sale", money(summary["average"])),
        ("Pending Orders", pending),
    ]


def render(store, user):
    """Render the sales page."""
    draft = _draft()

    if st.session_state.pop("reset_sale_form", False):
        for key in CUSTOMER_FIELDS + ("sale_delivery",):
            st.session_state.pop(key, None)
        for key in [k for k in st.session_state if str(k).startswith("cart_qty_")]:
            del st.session_state[key]

    if st.session_state.get("sale_completed_msg"):
        st.toast(st.session_state.pop("sale_completed_msg"), icon="\U0001F9FE")

    st.header("\U0001F6D2 Sales Management")

    render_metric_row(day_metrics(store.sales, today_iso()))

    new_sale, history = st.tabs(["New Sale", "Sales History"])
    with new_sale:
        _render_new_sale(store, user, draft)
    with history:
        render_table(
            sales_frame(store.sales),
            {
                "date": "Date",
                "customer": "Customer",
                "items": "Products",
                "total": "Total",
                "payment": "Payment",
                "attendant": "Attendant",
                "status": "Status",
            },
            money_cols=("total",),
            empty_message="No sales recorded",
        )


def _render_new_sale(store, user, draft):
    products = store.products_by_id()
    left, right = st.columns([2, 1])

    with left:
        st.subheader("Select Products")
        for product in sorted(store.products, key=lambda p: p.name.casefold()):
            col1, col2, col3 = st.columns([4, 2, 1])
            col1.write(f"**{product.name}**")
            col1.caption(product.category.title())
            in_stock = product.stock_quantity > 0
            col2.write(money(product.price))
            col2.caption(f"{product.stock_quantity} in stock" if in_stock else "Out of Stock")
            if col3.button("➕", key=f"add_{product.id}", disabled=not in_stock):
                draft.add_item(product.id)
                st.session_state.pop(f"cart_qty_{product.id}", None)
                st.toast("Product added to the sale cart", icon="\U0001F6D2")

    with right:
        st.subheader("\U0001F6D2 Cart")
        if not draft.items:
            st.caption("No items in cart")
        for pid, qty in list(draft.items.items()):
            product = products.get(pid)
            label = product.name if product else pid
            new_qty = st.number_input(
                label, min_value=0, step=1, value=qty, key=f"cart_qty_{pid}"
            )
            if new_qty != qty:
                draft.update_quantity(pid, int(new_qty))
                st.rerun()

        st.checkbox("Needs Delivery (5% surcharge)", key="sale_delivery")
        draft.delivery = st.session_state.get("sale_delivery", False)
        totals = draft.totals(store.price_list())
        st.write(f"Subtotal: {money(totals['subtotal'])}")
        if draft.delivery:
            st.write(f"Transport (5%): {money(totals['surcharge'])}")
        st.markdown(f"**Total: {money(totals['total'])}**")

        st.subheader("Customer Information")
        by_name = {c.name: c for c in store.customers}
        chosen = st_free_text_select(
            "Existing Customer",
            sorted(by_name, key=str.casefold),
            key="sale_customer",
            placeholder="Select customer or add new",
        )
        customer = by_name.get(chosen) if chosen else None
        if st.session_state.get("sale_customer_applied") != chosen:
            st.session_state.sale_customer_applied = chosen
            draft.select_customer(customer)
            if customer:
                st.session_state.sale_name = customer.name
                st.session_state.sale_phone = customer.phone
                st.session_state.sale_address = customer.address

        draft.set_customer_details(
            st.text_input("Name", key="sale_name"),
            st.text_input("Phone", key="sale_phone", placeholder="+256 7XX XXX XXX"),
            st.text_input(
                "Address", key="sale_address", placeholder="Delivery address (optional)"
            ),
        )
        draft.payment_method = st.selectbox(
            "Payment Method", PAYMENT_METHODS, format_func=str.title, key="sale_payment"
        )

        if st.button("\U0001F9FE Complete Sale", width="stretch"):
            try:
                sale = draft.submit(products, user["username"], user["name"], today_iso())
            except MissingInformationError as e:
                show_validation_error(e)
            else:
                st.session_state["sale_completed_msg"] = (
                    f"Sale of {money(sale.total)} completed successfully"
                )
                st.session_state["reset_sale_form"] = True
                st.rerun()
