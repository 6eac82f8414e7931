"""Shared utilities for the crypto dashboard."""

from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

import pandas as pd

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger."""

    package_logger = logging.getLogger("crypto_dashboard")
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def ensure_dataframe(records: Iterable[Any] | pd.DataFrame) -> pd.DataFrame:
    """Normalise dataclass records or mappings to a :class:`pandas.DataFrame`."""

    if isinstance(records, pd.DataFrame):
        return records.copy()

    rows: list[Mapping[str, Any]] = [
        asdict(record) if is_dataclass(record) else dict(record) for record in records
    ]
    return pd.DataFrame(rows)


def format_currency(value: float, currency: str = "$", *, decimals: int = 2) -> str:
    """Return a human-readable currency string."""

    return f"{currency}{value:,.{decimals}f}"


def format_signed_percent(value: float) -> str:
    """Percentage with an explicit ``+`` for non-negative values."""

    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_date(moment: datetime) -> str:
    """Calendar date in the viewer's local timezone with a four-digit year."""

    local = moment.astimezone()
    return f"{local.month}/{local.day}/{local.year}"
