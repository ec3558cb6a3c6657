"""Printable sales report.

The layout is computed first as pages of positioned text, measured in
millimetres from the top-left corner of an A4 page, and only then drawn
with ReportLab. Keeping the two apart lets the pagination be checked
without parsing a PDF.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from pos.domain.model.period import Period, PeriodRange
from pos.domain.model.sale import Sale
from pos.domain.model.value_objects import Money
from pos.infrastructure.reporting.formatting import (
    DEFAULT_LOCALE,
    format_day,
    format_money,
    format_timestamp,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout constants (millimetres, y grows downwards)
# ---------------------------------------------------------------------------
REPORT_TITLE = "Sales Report"
FONT_NAME = "Helvetica"
TITLE_FONT_SIZE = 20
HEADER_FONT_SIZE = 12
BODY_FONT_SIZE = 10

LEFT_MARGIN = 20
AMOUNT_COLUMN = 120
TITLE_Y = 20
PERIOD_Y = 30
TOTAL_Y = 40
BODY_START_Y = 60
LINE_HEIGHT = 10
PAGE_BOTTOM = 270
TOP_MARGIN = 20


@dataclass(frozen=True)
class TextItem:
    x: float
    y: float
    text: str
    font_size: int


@dataclass(frozen=True)
class ReportPage:
    items: tuple[TextItem, ...]


def report_filename(period: Period | str) -> str:
    return f"sales-report-{Period.parse(period).value}.pdf"


class ReportRenderer:
    """Renders a period's sales into a paginated PDF."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale

    def layout(
        self,
        sales: Sequence[Sale],
        period_range: PeriodRange,
        total: Money,
    ) -> list[ReportPage]:
        """Place the header and one line per sale, in the order given."""
        current: list[TextItem] = [
            TextItem(LEFT_MARGIN, TITLE_Y, REPORT_TITLE, TITLE_FONT_SIZE),
            TextItem(
                LEFT_MARGIN,
                PERIOD_Y,
                f"Period: {format_day(period_range.start, self._locale)}"
                f" - {format_day(period_range.end, self._locale)}",
                HEADER_FONT_SIZE,
            ),
            TextItem(
                LEFT_MARGIN,
                TOTAL_Y,
                f"Total Sales: {format_money(total, self._locale)}",
                HEADER_FONT_SIZE,
            ),
        ]
        pages: list[ReportPage] = []

        y = BODY_START_Y
        for sale in sales:
            if y > PAGE_BOTTOM:
                pages.append(ReportPage(tuple(current)))
                current = []
                y = TOP_MARGIN
            current.append(
                TextItem(LEFT_MARGIN, y, format_timestamp(sale.created_at, self._locale), BODY_FONT_SIZE)
            )
            current.append(
                TextItem(AMOUNT_COLUMN, y, format_money(sale.total, self._locale), BODY_FONT_SIZE)
            )
            y += LINE_HEIGHT

        pages.append(ReportPage(tuple(current)))
        return pages

    def render(
        self,
        sales: Sequence[Sale],
        period_range: PeriodRange,
        total: Money,
    ) -> bytes:
        """Return the report as PDF bytes.

        The canvas runs in invariant mode, so the same inputs always give
        the same bytes.
        """
        pages = self.layout(sales, period_range, total)

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4, invariant=1)
        pdf.setTitle(REPORT_TITLE)
        _, page_height = A4

        for page in pages:
            for item in page.items:
                pdf.setFont(FONT_NAME, item.font_size)
                pdf.drawString(item.x * mm, page_height - item.y * mm, item.text)
            pdf.showPage()
        pdf.save()

        logger.debug("Rendered sales report: %d sales on %d pages", len(sales), len(pages))
        return buffer.getvalue()

    def export(
        self,
        directory: Path,
        period: Period | str,
        sales: Sequence[Sale],
        period_range: PeriodRange,
        total: Money,
    ) -> Path:
        """Render and write ``sales-report-<period>.pdf`` into *directory*."""
        target = directory / report_filename(period)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.render(sales, period_range, total))
        logger.info("Wrote sales report to %s", target)
        return target
