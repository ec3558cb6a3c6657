"""JSON-file-backed implementation of SaleRepository.

Sales are appended to a single JSON array. Each insert writes a sibling
temporary file and swaps it in with ``Path.replace`` so a failed write
never leaves a half-written sale behind.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable

from pos.domain.exceptions import DomainException, PersistenceError
from pos.domain.model.period import PeriodRange
from pos.domain.model.sale import Sale, SaleLine
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class JsonSaleRepository(SaleRepository):

    def __init__(
        self,
        file_path: Path,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._file_path = file_path
        self._clock = clock
        self._id_factory = id_factory
        self._ensure_file()

    # --- SaleRepository interface ---------------------------------------------

    def insert(
        self,
        lines: tuple[SaleLine, ...],
        total: Money,
        operator_id: str,
    ) -> Sale:
        created_at = self._clock().astimezone(timezone.utc)
        try:
            sale = Sale(
                id=self._id_factory(),
                lines=tuple(lines),
                total=total,
                operator_id=operator_id,
                created_at=created_at,
            )
        except DomainException as exc:
            raise PersistenceError(f"Rejected sale: {exc}") from exc

        records = self._load_raw()
        records.append(self._to_raw(sale))
        self._persist_raw(records)

        logger.info(
            "Recorded sale %s (%d lines, total %s) for operator %s",
            sale.id, len(sale.lines), sale.total, operator_id,
        )
        return sale

    def query(self, start: datetime, end: datetime) -> list[Sale]:
        window = PeriodRange(start=start, end=end)
        sales = [
            sale
            for sale in (self._to_domain(raw) for raw in self._load_raw())
            if window.contains(sale.created_at)
        ]
        sales.sort(key=lambda s: s.created_at, reverse=True)
        logger.debug(
            "Found %d sales between %s and %s",
            len(sales), start.isoformat(), end.isoformat(),
        )
        return sales

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "id": sale.id,
            "operator_id": sale.operator_id,
            "created_at": sale.created_at.isoformat(),
            "total": str(sale.total.amount),
            "currency": sale.total.currency,
            "items": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in sale.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        try:
            currency = raw["currency"]
            lines = tuple(
                SaleLine(
                    product_id=i["product_id"],
                    product_name=i["product_name"],
                    unit_price=Money(Decimal(i["unit_price"]), i.get("currency", currency)),
                    quantity=Quantity(i["quantity"]),
                )
                for i in raw["items"]
            )
            return Sale(
                id=raw["id"],
                lines=lines,
                total=Money(Decimal(raw["total"]), currency),
                operator_id=raw["operator_id"],
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, DomainException) as exc:
            raise PersistenceError(f"Corrupt sale record {raw.get('id')!r}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Failed to read sales from %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot read sales: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            logger.error("Failed to write sales to %s: %s", self._file_path, exc)
            tmp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Cannot write sales: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot create sales store at %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot create sales file: {exc}") from exc
