"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.period import Period, PeriodRange
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product ID and how many units to put in the cart."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CatalogView:
    """Output: products to show and the category tabs to offer."""

    products: list[Product]
    categories: list[str]


@dataclass(frozen=True)
class HistoryResult:
    """Output: sales in a period, most recent first, with their sum."""

    period: Period
    sales: list[Sale]
    total: Money
    range: PeriodRange

    @property
    def is_empty(self) -> bool:
        return not self.sales
