"""Tests for the card, table and chart helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pandas as pd
import plotly.graph_objects as go
from crypto_dashboard import insights, synth, utils, viz

NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


def _summary(change: float) -> synth.PortfolioSummary:
    return synth.PortfolioSummary(
        total_balance=45_210.5,
        total_trades=1_204,
        portfolio_change=change,
        active_positions=9,
    )


def test_build_summary_cards_positive_change() -> None:
    cards = insights.build_summary_cards(_summary(4.5))

    assert [card["title"] for card in cards] == [
        "Total Portfolio",
        "Total Trades",
        "Active Positions",
        "24h Change",
    ]
    assert cards[0]["value"] == "$45,210.50"
    assert cards[0]["caption"] == "+4.50% from last month"
    assert cards[1]["value"] == "1,204"
    assert cards[2]["caption"] == "Across 7 cryptocurrencies"
    assert cards[3]["value"] == "+4.50%"
    assert cards[3]["tone"] == "positive"
    assert cards[3]["icon"] == "arrow-up"


def test_build_summary_cards_negative_change() -> None:
    change_card = insights.build_summary_cards(_summary(-3.25))[3]
    assert change_card["value"] == "-3.25%"
    assert change_card["tone"] == "negative"
    assert change_card["icon"] == "arrow-down"


def test_change_tone_treats_zero_as_positive() -> None:
    assert insights.change_tone(0.0) == "positive"
    assert insights.change_tone(-0.01) == "negative"


def test_transaction_rows_preserve_order_and_format() -> None:
    txn = synth.Transaction(
        id="abc",
        type="sell",
        asset="ETH",
        amount=1.5,
        price=2_345.6,
        timestamp=NOW,
        total=812.0,
    )
    transactions = [txn, *synth.generate_transactions(4, rng=9, now=NOW)]
    rows = insights.transaction_rows(transactions)

    assert list(rows.columns) == insights.TRANSACTION_COLUMNS
    assert list(rows["id"]) == [t.id for t in transactions]

    first = rows.iloc[0]
    assert first["badge"] == "SELL"
    assert first["badge_variant"] == "destructive"
    assert first["detail"] == "1.500000 ETH @ $2,345.60"
    assert first["total"] == "$812.00"
    assert first["date"] == utils.format_date(NOW)
    assert set(rows["badge"]).issubset({"BUY", "SELL"})


def test_transaction_rows_empty() -> None:
    rows = insights.transaction_rows([])
    assert rows.empty
    assert list(rows.columns) == insights.TRANSACTION_COLUMNS


def test_chart_frame_matches_series() -> None:
    series = synth.generate_chart_series(rng=4)
    frame = insights.chart_frame(series)
    expected = pd.DataFrame(
        {
            "month": list(synth.CHART_MONTHS),
            "value": [point.value for point in series],
        }
    )
    pd.testing.assert_frame_equal(frame.reset_index(drop=True), expected)


def test_plot_portfolio_performance_returns_bar_fig() -> None:
    series = synth.generate_chart_series(rng=6)
    figure = viz.plot_portfolio_performance(series)

    assert isinstance(figure, go.Figure)
    assert len(figure.data) == 1
    trace = figure.data[0]
    assert trace.type == "bar"
    assert list(trace.x) == list(synth.CHART_MONTHS)
    assert trace.marker.color == viz.BAR_COLOR
    assert "$%{y:,.0f}" in trace.hovertemplate


def test_plot_portfolio_performance_empty_series() -> None:
    figure = viz.plot_portfolio_performance([])
    assert isinstance(figure, go.Figure)
    assert not figure.data
    assert figure.layout.annotations


def test_format_helpers() -> None:
    assert utils.format_currency(12_345) == "$12,345.00"
    assert utils.format_currency(12_345, decimals=0) == "$12,345"
    assert utils.format_signed_percent(0) == "+0.00%"
    assert utils.format_signed_percent(-1.5) == "-1.50%"


def test_plot_portfolio_performance_positional_currency() -> None:
    figure = viz.plot_portfolio_performance(synth.generate_chart_series(rng=2), "€")
    assert "€%{y:,.0f}" in figure.data[0].hovertemplate


def test_format_date_uses_local_calendar_date_with_full_year() -> None:
    local = NOW.astimezone()
    assert utils.format_date(NOW) == f"{local.month}/{local.day}/{local.year}"
    assert utils.format_date(NOW).endswith("/2024")
