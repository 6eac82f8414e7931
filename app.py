"""Streamlit entry point for the Crypto Dashboard app."""

from __future__ import annotations

import logging

import streamlit as st
from crypto_dashboard import insights, synth, utils, viz
from crypto_dashboard.config import settings

logger = logging.getLogger("crypto_dashboard.app")

TRANSACTION_SLIDER_MAX = 50

ICON_GLYPHS = {
    "wallet": "👛",
    "trending-up": "📈",
    "dollar-sign": "💲",
    "arrow-up": "▲",
    "arrow-down": "▼",
}


def _render_styles() -> None:
    st.markdown(
        """
        <style>
        :root {
            --slate-900: #0f172a;
            --slate-500: #64748b;
            --success-600: #16a34a;
            --danger-600: #dc2626;
            --primary-500: #3b82f6;
        }

        [data-testid="stAppViewContainer"] {
            background: #f9fafb;
            color: var(--slate-900);
        }

        .summary-card {
            background: #ffffff;
            border-radius: 12px;
            border: 1px solid rgba(226, 232, 240, 0.9);
            padding: 1.1rem 1.25rem;
            box-shadow: 0 1px 2px rgba(15, 23, 42, 0.06);
        }

        .summary-card__header {
            display: flex;
            justify-content: space-between;
            align-items: center;
            font-size: 0.875rem;
            font-weight: 500;
            padding-bottom: 0.5rem;
        }

        .summary-card__value {
            font-size: 1.5rem;
            font-weight: 700;
        }

        .summary-card__caption {
            font-size: 0.75rem;
            color: var(--slate-500);
        }

        .summary-card--positive .summary-card__value,
        .summary-card--positive .summary-card__icon {
            color: var(--success-600);
        }

        .summary-card--negative .summary-card__value,
        .summary-card--negative .summary-card__icon {
            color: var(--danger-600);
        }

        .txn-row {
            display: flex;
            justify-content: space-between;
            align-items: center;
            border-bottom: 1px solid rgba(226, 232, 240, 0.9);
            padding: 0.75rem 0;
        }

        .txn-row:last-child {
            border-bottom: none;
        }

        .txn-badge {
            display: inline-block;
            width: 3rem;
            text-align: center;
            font-size: 0.75rem;
            font-weight: 700;
            border-radius: 999px;
            padding: 2px 8px;
            margin-right: 1rem;
        }

        .txn-badge--default {
            background: var(--slate-900);
            color: #ffffff;
        }

        .txn-badge--destructive {
            background: var(--danger-600);
            color: #ffffff;
        }

        .txn-muted {
            font-size: 0.875rem;
            color: var(--slate-500);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _transaction_slider_max(configured: int) -> int:
    return max(TRANSACTION_SLIDER_MAX, configured)


def _card_html(card: insights.SummaryCard) -> str:
    return f"""
    <div class="summary-card summary-card--{card['tone']}">
        <div class="summary-card__header">
            <span>{card['title']}</span>
            <span class="summary-card__icon">{ICON_GLYPHS[card['icon']]}</span>
        </div>
        <div class="summary-card__value">{card['value']}</div>
        <div class="summary-card__caption">{card['caption']}</div>
    </div>
    """


def _transaction_html(row: dict[str, str]) -> str:
    return f"""
    <div class="txn-row">
        <div style="display: flex; align-items: center;">
            <span class="txn-badge txn-badge--{row['badge_variant']}">{row['badge']}</span>
            <div>
                <div style="font-weight: 500;">{row['asset']}</div>
                <div class="txn-muted">{row['detail']}</div>
            </div>
        </div>
        <div style="text-align: right;">
            <div style="font-weight: 500;">{row['total']}</div>
            <div class="txn-muted">{row['date']}</div>
        </div>
    </div>
    """


def main() -> None:
    """Render the Crypto Dashboard Streamlit application."""

    utils.configure_logging(settings.log_level)

    st.set_page_config(
        page_title="Crypto Dashboard",
        page_icon="🪙",
        layout="wide",
    )
    _render_styles()

    sidebar = st.sidebar
    sidebar.header("Mock data controls")
    pin_seed = sidebar.checkbox(
        "Pin random seed",
        value=settings.seed is not None,
        help="Reproduce the same page on every render",
    )
    seed: int | None = None
    if pin_seed:
        seed = int(
            sidebar.number_input(
                "Random seed", value=settings.seed or 0, min_value=0, step=1
            )
        )
    transaction_count = int(
        sidebar.slider(
            "Transactions",
            min_value=0,
            max_value=_transaction_slider_max(settings.transaction_count),
            value=settings.transaction_count,
            step=1,
            help="Number of mock trades to list",
        )
    )
    if sidebar.button("Regenerate"):
        st.rerun()

    data = synth.generate_dashboard(seed, transaction_count=transaction_count)
    logger.info(
        "Rendering dashboard (seed=%s, transactions=%d)", seed, len(data.transactions)
    )
    currency_symbol = settings.currency_symbol

    st.title("Crypto Dashboard")
    st.caption("Track your cryptocurrency portfolio and recent transactions")

    cards = insights.build_summary_cards(data.summary, currency_symbol=currency_symbol)
    card_cols = st.columns(len(cards), gap="medium")
    for column, card in zip(card_cols, cards, strict=True):
        column.markdown(_card_html(card), unsafe_allow_html=True)

    with st.container(border=True):
        st.markdown("### Portfolio Performance")
        st.caption("Monthly portfolio value over the last 6 months")
        chart_fig = viz.plot_portfolio_performance(
            data.chart_series, currency_symbol=currency_symbol
        )
        st.plotly_chart(chart_fig, use_container_width=True, config={"displayModeBar": False})

    with st.container(border=True):
        st.markdown("### Recent Transactions")
        st.caption("Your latest cryptocurrency trades")
        rows = insights.transaction_rows(data.transactions, currency_symbol=currency_symbol)
        if rows.empty:
            st.caption("No transactions to display.")
        else:
            html = "".join(_transaction_html(row) for row in rows.to_dict("records"))
            st.markdown(html, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
