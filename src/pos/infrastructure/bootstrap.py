"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Settings come from environment variables so a terminal can point at its
own data directory and report locale without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pos.domain.model.value_objects import DEFAULT_CURRENCY
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)
from pos.infrastructure.reporting.formatting import DEFAULT_LOCALE
from pos.infrastructure.reporting.pdf_report import ReportRenderer

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    locale: str
    currency: str

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            data_dir=Path(env.get("POS_DATA_DIR") or _DEFAULT_DATA_DIR),
            locale=env.get("POS_LOCALE") or DEFAULT_LOCALE,
            currency=env.get("POS_CURRENCY") or DEFAULT_CURRENCY,
        )


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    config = settings()
    return JsonProductRepository(config.data_dir / "products.json", default_currency=config.currency)


def sale_repository() -> JsonSaleRepository:
    return JsonSaleRepository(settings().data_dir / "sales.json")


def report_renderer() -> ReportRenderer:
    return ReportRenderer(locale=settings().locale)
