"""Abstract repository for Sale records.

Sales are append-only: there is no update or delete. Implementations
raise ``PersistenceError`` when the backing store fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pos.domain.model.sale import Sale, SaleLine
from pos.domain.model.value_objects import Money


class SaleRepository(ABC):

    @abstractmethod
    def insert(
        self,
        lines: tuple[SaleLine, ...],
        total: Money,
        operator_id: str,
    ) -> Sale:
        """Atomically create a sale, assigning its ID and UTC timestamp."""

    @abstractmethod
    def query(self, start: datetime, end: datetime) -> list[Sale]:
        """Return sales with ``start <= created_at <= end``, most recent first."""
