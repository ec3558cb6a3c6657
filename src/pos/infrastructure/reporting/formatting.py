"""Locale-aware display formatting for amounts and timestamps.

Every amount shown to an operator or printed on a report goes through
``format_money`` so that headers and lines always agree.
"""

from __future__ import annotations

from datetime import datetime, timezone

from babel.dates import format_date, format_datetime
from babel.numbers import format_currency

from pos.domain.model.value_objects import Money

DEFAULT_LOCALE = "cs_CZ"


def format_money(money: Money, locale: str = DEFAULT_LOCALE) -> str:
    return format_currency(money.amount, money.currency, locale=locale)


def format_day(instant: datetime, locale: str = DEFAULT_LOCALE) -> str:
    """Medium-length calendar date of *instant* in UTC."""
    return format_date(_as_utc(instant).date(), format="medium", locale=locale)


def format_timestamp(instant: datetime, locale: str = DEFAULT_LOCALE) -> str:
    """Short date and time of *instant* in UTC."""
    return format_datetime(_as_utc(instant), format="short", tzinfo=timezone.utc, locale=locale)


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)
