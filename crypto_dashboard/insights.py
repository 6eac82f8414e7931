"""View-model helpers turning generated bundles into card and table payloads."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Literal, TypedDict

import pandas as pd

from . import synth, utils

Tone = Literal["positive", "negative", "neutral"]
Icon = Literal["wallet", "trending-up", "dollar-sign", "arrow-up", "arrow-down"]

TRADES_DELTA_CAPTION = "+12% from last month"

BADGE_VARIANTS = {
    "buy": "default",
    "sell": "destructive",
}

TRANSACTION_COLUMNS = [
    "id",
    "badge",
    "badge_variant",
    "asset",
    "detail",
    "total",
    "date",
]


class SummaryCard(TypedDict):
    title: str
    value: str
    caption: str
    icon: Icon
    tone: Tone


def change_tone(change: float) -> Tone:
    """Sign rule for portfolio change; zero counts as a gain."""

    return "positive" if change >= 0 else "negative"


def build_summary_cards(
    summary: synth.PortfolioSummary, *, currency_symbol: str = "$"
) -> list[SummaryCard]:
    """Return the four headline cards in display order."""

    change_text = utils.format_signed_percent(summary.portfolio_change)
    tone = change_tone(summary.portfolio_change)

    return [
        {
            "title": "Total Portfolio",
            "value": utils.format_currency(summary.total_balance, currency_symbol),
            "caption": f"{change_text} from last month",
            "icon": "wallet",
            "tone": "neutral",
        },
        {
            "title": "Total Trades",
            "value": f"{summary.total_trades:,}",
            "caption": TRADES_DELTA_CAPTION,
            "icon": "trending-up",
            "tone": "neutral",
        },
        {
            "title": "Active Positions",
            "value": str(summary.active_positions),
            "caption": f"Across {len(synth.ASSETS)} cryptocurrencies",
            "icon": "dollar-sign",
            "tone": "neutral",
        },
        {
            "title": "24h Change",
            "value": change_text,
            "caption": "Portfolio performance",
            "icon": "arrow-up" if tone == "positive" else "arrow-down",
            "tone": tone,
        },
    ]


def transaction_rows(
    transactions: Sequence[synth.Transaction], *, currency_symbol: str = "$"
) -> pd.DataFrame:
    """Flatten transactions into display rows, keeping generation order."""

    if not transactions:
        return pd.DataFrame(columns=TRANSACTION_COLUMNS)

    rows = [
        {
            "id": txn.id,
            "badge": txn.type.upper(),
            "badge_variant": BADGE_VARIANTS[txn.type],
            "asset": txn.asset,
            "detail": (
                f"{txn.amount:.6f} {txn.asset} @ "
                f"{utils.format_currency(txn.price, currency_symbol)}"
            ),
            "total": utils.format_currency(txn.total, currency_symbol),
            "date": utils.format_date(txn.timestamp),
        }
        for txn in transactions
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def chart_frame(points: Iterable[synth.ChartPoint]) -> pd.DataFrame:
    """Month/value frame for the performance chart, in series order."""

    df = utils.ensure_dataframe(points)
    if df.empty:
        return pd.DataFrame(columns=["month", "value"])
    return df[["month", "value"]]
