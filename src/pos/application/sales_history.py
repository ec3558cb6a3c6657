"""Application service: Sales History use case (query).

Resolves a period into a date range, loads the sales inside it and sums
them. The range is recomputed from the clock on every call.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from pos.application.dto import HistoryResult
from pos.domain.exceptions import HistoryLoadError, PersistenceError, ValidationError
from pos.domain.model.period import Period, PeriodRange
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pos.domain.repository.sale_repository import SaleRepository

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HistoryAggregator:

    def __init__(
        self,
        sale_repo: SaleRepository,
        clock: Clock = utc_now,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._sale_repo = sale_repo
        self._clock = clock
        self._currency = currency

    def query(self, period: Period | str) -> HistoryResult:
        """Return the sales of *period* around now, most recent first.

        A repository failure, or sales recorded in a currency other than
        the configured one, raises HistoryLoadError; there is no cached
        fallback. An empty period is a normal result with a zero total.
        """
        resolved = Period.parse(period)
        period_range = PeriodRange.for_period(resolved, self._clock())

        try:
            sales = self._sale_repo.query(period_range.start, period_range.end)
        except PersistenceError as exc:
            raise HistoryLoadError(f"Failed to load sales history: {exc}") from exc

        ordered = sorted(sales, key=lambda s: s.created_at, reverse=True)
        try:
            total = Money.sum((s.total for s in ordered), self._currency)
        except ValidationError as exc:
            raise HistoryLoadError(f"Cannot total sales for this period: {exc}") from exc

        return HistoryResult(
            period=resolved,
            sales=ordered,
            total=total,
            range=period_range,
        )
