"""Synthetic data generation for the crypto dashboard.

Every generator accepts an injectable random source so a fixed seed yields an
exactly reproducible page, while the default (no seed) draws fresh values on
each render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal, Union
from uuid import UUID

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_COUNT = 10
LOOKBACK_DAYS = 30

ASSETS = ("BTC", "ETH", "ADA", "SOL", "MATIC", "LINK", "DOT")
TRADE_TYPES = ("buy", "sell")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
CHART_MONTHS = MONTHS[:6]

BALANCE_RANGE = (10_000.0, 100_000.0)
TRADES_RANGE = (50, 500)
CHANGE_RANGE = (-15.0, 25.0)
POSITIONS_RANGE = (5, 15)
AMOUNT_RANGE = (0.001, 10.0)
PRICE_RANGE = (100.0, 50_000.0)
TOTAL_RANGE = (50.0, 5_000.0)
CHART_VALUE_RANGE = (5_000.0, 15_000.0)

TradeType = Literal["buy", "sell"]
RandomSource = Union[np.random.Generator, int, None]


@dataclass(frozen=True)
class PortfolioSummary:
    """Headline metrics shown on the summary cards."""

    total_balance: float
    total_trades: int
    portfolio_change: float
    active_positions: int


@dataclass(frozen=True)
class Transaction:
    """A single mock trade.

    ``total`` is drawn on its own range and is not derived from
    ``amount * price``.
    """

    id: str
    type: TradeType
    asset: str
    amount: float
    price: float
    timestamp: datetime
    total: float


@dataclass(frozen=True)
class ChartPoint:
    month: str
    value: float


@dataclass(frozen=True)
class DashboardData:
    """All three bundles drawn for one page render."""

    summary: PortfolioSummary
    transactions: list[Transaction]
    chart_series: list[ChartPoint]
    generated_at: datetime


def _resolve_rng(rng: RandomSource) -> np.random.Generator:
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


def _amount(rng: np.random.Generator, bounds: tuple[float, float], decimals: int) -> float:
    low, high = bounds
    value = round(float(rng.uniform(low, high)), decimals)
    # Rounding can nudge a draw a hair past either bound.
    return min(max(value, low), high)


def _integer(rng: np.random.Generator, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return int(rng.integers(low, high, endpoint=True))


def _uuid4_from_rng(rng: np.random.Generator) -> str:
    raw = bytearray(rng.bytes(16))
    raw[6] = (raw[6] & 0x0F) | 0x40  # version 4
    raw[8] = (raw[8] & 0x3F) | 0x80  # variant 10
    return str(UUID(bytes=bytes(raw)))


def _recent_timestamp(rng: np.random.Generator, now: datetime) -> datetime:
    window = timedelta(days=LOOKBACK_DAYS).total_seconds()
    offset = float(rng.uniform(0.0, window))
    return now - timedelta(seconds=offset)


def generate_summary(rng: RandomSource = None) -> PortfolioSummary:
    """Draw one set of portfolio headline metrics."""

    rng = _resolve_rng(rng)
    return PortfolioSummary(
        total_balance=_amount(rng, BALANCE_RANGE, 2),
        total_trades=_integer(rng, TRADES_RANGE),
        portfolio_change=_amount(rng, CHANGE_RANGE, 2),
        active_positions=_integer(rng, POSITIONS_RANGE),
    )


def generate_transactions(
    count: int = DEFAULT_TRANSACTION_COUNT,
    rng: RandomSource = None,
    *,
    now: datetime | None = None,
) -> list[Transaction]:
    """Generate ``count`` independent mock trades in generation order.

    Timestamps fall within the last 30 days relative to ``now`` (current UTC
    time when omitted). Identifiers are unique within the returned list.
    """

    if count < 0:
        raise ValueError("count must be non-negative")

    rng = _resolve_rng(rng)
    now = now or datetime.now(timezone.utc)

    transactions: list[Transaction] = []
    seen_ids: set[str] = set()
    for _ in range(count):
        txn_id = _uuid4_from_rng(rng)
        while txn_id in seen_ids:
            txn_id = _uuid4_from_rng(rng)
        seen_ids.add(txn_id)

        transactions.append(
            Transaction(
                id=txn_id,
                type=str(rng.choice(TRADE_TYPES)),  # type: ignore[arg-type]
                asset=str(rng.choice(ASSETS)),
                amount=_amount(rng, AMOUNT_RANGE, 6),
                price=_amount(rng, PRICE_RANGE, 2),
                timestamp=_recent_timestamp(rng, now),
                total=_amount(rng, TOTAL_RANGE, 2),
            )
        )

    return transactions


def generate_chart_series(rng: RandomSource = None) -> list[ChartPoint]:
    """Return six monthly portfolio values, January through June."""

    rng = _resolve_rng(rng)
    return [
        ChartPoint(month=month, value=_amount(rng, CHART_VALUE_RANGE, 0))
        for month in CHART_MONTHS
    ]


def generate_dashboard(
    seed: int | None = None,
    *,
    transaction_count: int = DEFAULT_TRANSACTION_COUNT,
    now: datetime | None = None,
) -> DashboardData:
    """Draw every bundle the page needs from a single generator."""

    if seed is not None and seed < 0:
        raise ValueError("seed must be non-negative")

    rng = np.random.default_rng(seed)
    generated_at = now or datetime.now(timezone.utc)

    data = DashboardData(
        summary=generate_summary(rng),
        transactions=generate_transactions(transaction_count, rng, now=generated_at),
        chart_series=generate_chart_series(rng),
        generated_at=generated_at,
    )
    logger.debug(
        "Generated dashboard data (seed=%s, transactions=%d)",
        seed,
        len(data.transactions),
    )
    return data
