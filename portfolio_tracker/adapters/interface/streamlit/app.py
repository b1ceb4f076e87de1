"""Streamlit portfolio tracker entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from portfolio_tracker.adapters.interface.import_view_model import (
    ImportViewState,
)
from portfolio_tracker.application.errors import (
    AssetClassInUseError,
    QuoteAuthenticationError,
    QuoteServiceError,
    StoreError,
)
from portfolio_tracker.application.use_cases import (
    GetMonthlyDividendsUseCase,
    GetPortfolioOverviewUseCase,
    ImportTransactionUseCase,
    ManageAssetClassesUseCase,
    ManagePlatformSettingsUseCase,
    RecordTransactionUseCase,
    UpdateQuotesUseCase,
    merge_quotes,
)
from portfolio_tracker.domain.errors import PortfolioError, ValidationError
from portfolio_tracker.domain.models import (
    AllocationSlice,
    AssetClass,
    AssetClassDraft,
    DividendSummary,
    Holding,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from portfolio_tracker.infrastructure.container import (
    build_asset_class_store,
    build_database_adapter,
    build_platform_settings_store,
    build_quote_provider,
    build_transaction_store,
)
from portfolio_tracker.infrastructure.settings import TrackerSettings
from portfolio_tracker.utils.formatters import (
    format_currency_brl,
    format_date_br,
    format_date_long_br,
    format_number_br,
    format_percent_br,
)

QUOTES_KEY = "quotes"
QUOTES_UPDATED_KEY = "quotes_updated_at"
IMPORT_STATE_KEY = "import_state"
MAX_ERRORS_SHOWN = 3


def _prepare_allocation_chart_data(
    allocation: Sequence[AllocationSlice],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready donut data, one entry per asset class."""
    return [
        {
            "category": item.name,
            "amount": float(item.value),
            "color": item.color,
            "amount_label": format_currency_brl(item.value),
            "share_label": f"{format_number_br(item.percent, decimals=1)}%",
        }
        for item in allocation
    ]


def _prepare_dividend_chart_data(
    summary: DividendSummary,
) -> list[dict[str, str | float]]:
    """Prepare one bar per month in calendar order."""
    return [
        {
            "month": item.label,
            "order": item.month,
            "amount": float(item.amount),
            "amount_label": format_currency_brl(item.amount),
        }
        for item in summary.months
    ]


def _holding_rows(holdings: Sequence[Holding]) -> list[dict[str, str]]:
    """Return holdings formatted for the holdings table."""
    return [
        {
            "Ticker": holding.ticker,
            "Asset": holding.asset_name,
            "Class": holding.asset_class,
            "Quantity": format_number_br(holding.quantity, decimals=8),
            "Avg. price": format_currency_brl(holding.avg_price),
            "Current price": format_currency_brl(holding.current_price),
            "Value": format_currency_brl(holding.current_value),
            "P/L": format_currency_brl(holding.profit_loss),
            "P/L %": format_percent_br(holding.profit_loss_percent),
        }
        for holding in holdings
    ]


def _transaction_rows(
    transactions: Sequence[Transaction],
) -> list[dict[str, str]]:
    """Return transactions formatted for the history table, newest first."""
    ordered = sorted(
        transactions,
        key=lambda tx: tx.transaction_date,
        reverse=True,
    )
    return [
        {
            "Date": format_date_br(tx.transaction_date),
            "Type": tx.transaction_type.value,
            "Ticker": tx.ticker,
            "Class": tx.asset_class.name if tx.asset_class else "—",
            "Quantity": format_number_br(tx.quantity, decimals=8),
            "Price": format_currency_brl(tx.price_per_unit),
            "Fees": format_currency_brl(tx.fees),
            "Total": format_currency_brl(tx.total_value),
        }
        for tx in ordered
    ]


def _summarize_quote_errors(errors: Sequence[str]) -> str:
    """Return the first few quote errors in one line."""
    shown = ", ".join(errors[:MAX_ERRORS_SHOWN])
    hidden = len(errors) - MAX_ERRORS_SHOWN
    if hidden > 0:
        shown += f" and {hidden} more"
    return shown


def _build_use_cases() -> dict:
    """Wire use cases to the configured database and quote service."""
    db_adapter = build_database_adapter()
    transactions = build_transaction_store(db_adapter)
    asset_classes = build_asset_class_store(db_adapter)
    return {
        "overview": GetPortfolioOverviewUseCase(transactions),
        "dividends": GetMonthlyDividendsUseCase(transactions),
        "record": RecordTransactionUseCase(transactions, asset_classes),
        "import": ImportTransactionUseCase(transactions, asset_classes),
        "asset_classes": ManageAssetClassesUseCase(asset_classes, transactions),
        "settings": ManagePlatformSettingsUseCase(
            build_platform_settings_store(db_adapter)
        ),
    }


def _render_allocation_chart(
    allocation: Sequence[AllocationSlice],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of portfolio value by asset class."""
    if not allocation:
        st.info("No holdings to chart yet.")
        return
    data = _prepare_allocation_chart_data(allocation)
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[item["category"] for item in data],
                range=[item["color"] for item in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.subheader("Allocation by asset class")
    st.altair_chart(base.configure_view(stroke=None), width="stretch")


def _render_dividend_chart(summary: DividendSummary) -> None:
    """Render twelve monthly dividend bars."""
    data = _prepare_dividend_chart_data(summary)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#6366f1",
    ).encode(
        x=alt.X("month:N", sort=alt.SortField("order"), title=None),
        y=alt.Y("amount:Q", title="Amount"),
        tooltip=[alt.Tooltip("month:N"), alt.Tooltip("amount_label:N")],
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(use_cases: dict, owner: str) -> None:
    overview = use_cases["overview"].execute(
        owner,
        st.session_state.get(QUOTES_KEY, {}),
    )
    summary = overview.summary
    value_col, cost_col, return_col = st.columns(3)
    value_col.metric("Total value", format_currency_brl(summary.total_value))
    cost_col.metric("Total cost", format_currency_brl(summary.total_cost))
    return_col.metric(
        "Total return",
        format_currency_brl(summary.total_return),
        format_percent_br(summary.total_return_percent),
    )
    _render_allocation_chart(overview.allocation)


def _refresh_quotes(tickers: Sequence[str]) -> None:
    """Fetch quotes and keep earlier prices for tickers that failed."""
    use_case = UpdateQuotesUseCase(build_quote_provider(TrackerSettings.from_env()))
    try:
        result = use_case.execute(tickers)
    except QuoteAuthenticationError:
        st.error("Your session expired. Please log in again.")
        return
    except (QuoteServiceError, ValidationError) as exc:
        st.error(f"Could not update quotes: {exc}")
        return
    st.session_state[QUOTES_KEY] = merge_quotes(
        st.session_state.get(QUOTES_KEY, {}),
        result.prices,
    )
    st.session_state[QUOTES_UPDATED_KEY] = result.updated_at
    st.success(f"{result.count} quote(s) updated.")
    if result.errors:
        st.warning(f"Some quotes failed: {_summarize_quote_errors(result.errors)}")


def _render_holdings(use_cases: dict, owner: str) -> None:
    quotes = st.session_state.get(QUOTES_KEY, {})
    overview = use_cases["overview"].execute(owner, quotes)
    if not overview.holdings:
        st.info("No holdings yet. Record a buy to get started.")
        return
    if st.button("Update quotes"):
        _refresh_quotes([holding.ticker for holding in overview.holdings])
        overview = use_cases["overview"].execute(
            owner,
            st.session_state.get(QUOTES_KEY, {}),
        )
    updated_at = st.session_state.get(QUOTES_UPDATED_KEY)
    if updated_at:
        st.caption(f"Quotes updated at {updated_at:%d/%m/%Y %H:%M}")
    st.dataframe(
        _holding_rows(overview.holdings),
        width="stretch",
        hide_index=True,
    )


def _render_dividends(use_cases: dict, owner: str) -> None:
    summary = use_cases["dividends"].execute(owner)
    st.subheader(f"Dividends in {summary.year}")
    total_col, max_col, avg_col = st.columns(3)
    total_col.metric("Total", format_currency_brl(summary.total))
    max_col.metric(
        f"Best month ({summary.max_month_label})",
        format_currency_brl(summary.max_amount),
    )
    avg_col.metric(
        "Average per paying month",
        format_currency_brl(summary.average_per_month),
    )
    if not summary.has_dividends:
        st.info("No dividends recorded this year.")
    _render_dividend_chart(summary)


def _asset_class_options(classes: Sequence[AssetClass]) -> dict[str, str]:
    return {item.name: item.id for item in classes if item.is_active}


def _show_validation_error(exc: ValidationError) -> None:
    st.error(str(exc))
    for field, message in sorted(exc.field_errors.items()):
        st.caption(f"{field}: {message}")


def _transaction_form(
    key: str,
    options: dict[str, str],
    initial: Transaction | None = None,
) -> TransactionDraft | None:
    """Render the add/edit fields and return the draft once submitted."""
    types = [item.value for item in TransactionType]
    class_names = list(options)
    class_index = 0
    if initial is not None and initial.asset_class_id in options.values():
        class_index = list(options.values()).index(initial.asset_class_id)
    with st.form(key, clear_on_submit=initial is None):
        ticker = st.text_input("Ticker", value=initial.ticker if initial else "")
        asset_name = st.text_input(
            "Asset name",
            value=initial.asset_name if initial else "",
        )
        class_name = st.selectbox("Asset class", class_names, index=class_index)
        transaction_type = st.selectbox(
            "Type",
            types,
            index=types.index(initial.transaction_type.value) if initial else 0,
        )
        transaction_date = st.date_input(
            "Date",
            value=initial.transaction_date if initial else date.today(),
        )
        quantity = st.text_input(
            "Quantity",
            value=str(initial.quantity) if initial else "0",
        )
        price = st.text_input(
            "Price per unit",
            value=str(initial.price_per_unit) if initial else "0",
        )
        fees = st.text_input("Fees", value=str(initial.fees) if initial else "0")
        total = st.text_input(
            "Dividend amount",
            value=str(initial.total_value) if initial else "0",
        )
        submitted = st.form_submit_button("Save")
    if not submitted:
        return None
    return TransactionDraft(
        ticker=ticker,
        asset_name=asset_name,
        asset_class_id=options.get(class_name, ""),
        transaction_type=transaction_type,
        transaction_date=transaction_date,
        quantity=quantity,
        price_per_unit=price,
        fees=fees,
        total_value=total,
    )


def _render_transaction_form(
    use_cases: dict,
    owner: str,
    options: dict[str, str],
) -> None:
    draft = _transaction_form("add_transaction", options)
    if draft is None:
        return
    try:
        use_cases["record"].add(owner, draft)
    except ValidationError as exc:
        _show_validation_error(exc)
    except StoreError as exc:
        st.error(f"Could not save the transaction: {exc}")
    else:
        st.success("Transaction saved.")


def _render_edit_form(
    use_cases: dict,
    owner: str,
    options: dict[str, str],
    transaction: Transaction,
) -> None:
    """Edit a stored transaction; its current class stays selectable."""
    if transaction.asset_class_id not in options.values():
        label = (
            transaction.asset_class.name
            if transaction.asset_class
            else transaction.asset_class_id
        )
        options = {**options, label: transaction.asset_class_id}
    draft = _transaction_form(
        f"edit_transaction_{transaction.id}",
        options,
        initial=transaction,
    )
    if draft is None:
        return
    try:
        updated = use_cases["record"].edit(owner, transaction.id, draft)
    except ValidationError as exc:
        _show_validation_error(exc)
    except StoreError as exc:
        st.error(f"Could not save the transaction: {exc}")
    else:
        if updated is None:
            st.warning("This transaction no longer exists.")
        else:
            st.success("Transaction updated.")


def _render_import(
    use_cases: dict,
    owner: str,
    options: dict[str, str],
) -> None:
    state: ImportViewState = st.session_state.get(
        IMPORT_STATE_KEY,
        ImportViewState(),
    )
    uploaded = st.file_uploader("Upload CSV", type=["csv", "txt"])
    text = st.text_area("Or paste the confirmation text", value=state.text)
    if uploaded is not None:
        text = uploaded.getvalue().decode("utf-8-sig", errors="replace")
    if text != state.text:
        state = state.with_text(text)
    if st.button("Extract data"):
        state = state.parse(use_cases["import"].parse)

    if state.notification:
        getattr(st, state.notification.level)(state.notification.message)
    if state.can_confirm:
        candidate = state.result.candidate
        st.json(
            {
                "ticker": candidate.ticker,
                "type": candidate.transaction_type,
                "quantity": str(candidate.quantity),
                "price": str(candidate.price_per_unit),
                "total": str(candidate.total_value),
                "date": (
                    format_date_long_br(candidate.date)
                    if candidate.date
                    else None
                ),
            }
        )
        class_name = st.selectbox("Asset class", list(options), key="import_cls")
        fees = st.text_input("Fees", value="0", key="import_fees")
        if st.button("Use this data", disabled=not options):
            try:
                stored = use_cases["import"].confirm(
                    owner,
                    candidate,
                    options[class_name],
                    fees=fees,
                )
            except ValidationError as exc:
                _show_validation_error(exc)
            except StoreError as exc:
                st.error(f"Could not save the transaction: {exc}")
            else:
                state = state.confirmed(stored)
    if st.button("Clear"):
        state = state.cleared()
    st.session_state[IMPORT_STATE_KEY] = state


def _render_transactions(use_cases: dict, owner: str) -> None:
    options = _asset_class_options(use_cases["asset_classes"].list())
    if not options:
        st.warning("Create an active asset class in Admin first.")
    add_tab, import_tab, history_tab = st.tabs(["Add", "Import", "History"])
    with add_tab:
        _render_transaction_form(use_cases, owner, options)
    with import_tab:
        _render_import(use_cases, owner, options)
    with history_tab:
        transactions = use_cases["record"].list(owner)
        st.dataframe(
            _transaction_rows(transactions),
            width="stretch",
            hide_index=True,
        )
        labels = {
            f"{format_date_br(tx.transaction_date)} {tx.ticker} "
            f"{tx.transaction_type.value}": tx
            for tx in transactions
        }
        selected = st.selectbox("Select transaction", ["—", *labels])
        if selected == "—":
            return
        transaction = labels[selected]
        _render_edit_form(use_cases, owner, options, transaction)
        if st.button("Delete"):
            try:
                deleted = use_cases["record"].delete(owner, transaction.id)
            except ValidationError as exc:
                _show_validation_error(exc)
            else:
                if deleted:
                    st.success("Transaction deleted.")


def _render_admin(use_cases: dict) -> None:
    manage = use_cases["asset_classes"]
    st.subheader("Asset classes")
    for item in manage.list():
        name_col, state_col, delete_col = st.columns([3, 1, 1])
        name_col.markdown(
            f"<span style='color:{item.color}'>●</span> {item.name}",
            unsafe_allow_html=True,
        )
        label = "Deactivate" if item.is_active else "Activate"
        if state_col.button(label, key=f"toggle_{item.id}"):
            manage.set_active(item.id, not item.is_active)
        if delete_col.button("Delete", key=f"delete_{item.id}"):
            try:
                manage.delete(item.id)
            except AssetClassInUseError as exc:
                st.error(str(exc))
    with st.form("new_asset_class", clear_on_submit=True):
        name = st.text_input("Name")
        description = st.text_input("Description")
        color = st.color_picker("Color", value="#6366f1")
        if st.form_submit_button("Create"):
            try:
                manage.create(
                    AssetClassDraft(
                        name=name,
                        description=description,
                        color=color,
                    )
                )
            except ValidationError as exc:
                _show_validation_error(exc)

    st.subheader("Platform settings")
    for setting in use_cases["settings"].list():
        toggled = st.toggle(
            setting.description or setting.key,
            value=setting.enabled,
            key=f"setting_{setting.key}",
        )
        if toggled != setting.enabled:
            use_cases["settings"].toggle(setting.key)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Portfolio Tracker", layout="wide")
    st.title("Portfolio Tracker")
    settings = TrackerSettings.from_env()
    use_cases = _build_use_cases()

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Holdings", "Dividends", "Transactions", "Admin"],
    )
    try:
        if page == "Dashboard":
            _render_dashboard(use_cases, settings.user_id)
        elif page == "Holdings":
            _render_holdings(use_cases, settings.user_id)
        elif page == "Dividends":
            _render_dividends(use_cases, settings.user_id)
        elif page == "Transactions":
            _render_transactions(use_cases, settings.user_id)
        else:
            _render_admin(use_cases)
    except PortfolioError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
