"""Report Service — the aggregation orchestrator behind every report endpoint.

Invariants:
    - Each report = sequential read-only fetches + one pure fold from core
    - The whole computation runs under report_timeout_seconds; expiry raises
      OperationCancelledError and nothing partial is returned
    - FetchFailureError from the data source propagates unchanged
    - Stateless: the data source and limits are fixed at construction

Design Decisions:
    - Fetches run one after another on the same session, which keeps every
      report on a single consistent read of the database
"""

import logging
import time
from typing import Any, Awaitable, Callable

from reporting.core import sales_aggregates
from reporting.core.cohort_growth import customer_growth
from reporting.core.errors import ReportingError
from reporting.core.inventory_status import build_inventory_rows
from reporting.core.order_status import summarize_order_statuses
from reporting.core.profitability import estimate_profitability
from reporting.core.repository_protocols import ReportDataSource
from reporting.services.deadline import run_with_deadline

logger = logging.getLogger(__name__)

Fetch = Callable[[], Awaitable[list[dict]]]


class ReportService:
    """Compose data source fetches with core folds, one method per report."""

    def __init__(
        self,
        source: ReportDataSource,
        *,
        timeout_seconds: float | None = 30.0,
        top_n: int = 10,
    ):
        self._source = source
        self._timeout = timeout_seconds
        self._top_n = top_n

    async def _run(
        self, report: str, fold: Callable[..., Any], *fetches: Fetch,
    ) -> Any:
        started = time.perf_counter()

        async def compute():
            rows = [await fetch() for fetch in fetches]
            return fold(*rows)

        try:
            result = await run_with_deadline(report, self._timeout, compute())
        except ReportingError as e:
            # Reported once at the API boundary; only traced here
            logger.debug(
                f"Report {report} failed: {e.message}",
                extra={"report": report, "error_code": e.code},
            )
            raise
        logger.info(
            f"Report {report} computed",
            extra={
                "report": report,
                "rows": len(result) if isinstance(result, list) else 1,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return result

    # ─── Revenue rankings ────────────────────────────────────────

    async def top_customers(self) -> list[dict]:
        return await self._run(
            "top_customers",
            lambda customers, lines: sales_aggregates.top_customers(
                customers, lines, self._top_n,
            ),
            self._source.fetch_customers, self._source.fetch_sales_lines,
        )

    async def top_products(self) -> list[dict]:
        return await self._run(
            "top_products",
            lambda products, lines: sales_aggregates.top_products(
                products, lines, self._top_n,
            ),
            self._source.fetch_products, self._source.fetch_sales_lines,
        )

    async def top_suppliers(self) -> list[dict]:
        return await self._run(
            "top_suppliers",
            lambda suppliers, lines: sales_aggregates.top_suppliers(
                suppliers, lines, self._top_n,
            ),
            self._source.fetch_suppliers, self._source.fetch_sales_lines,
        )

    async def sales_by_category(self) -> list[dict]:
        return await self._run(
            "sales_by_category", sales_aggregates.sales_by_category,
            self._source.fetch_categories, self._source.fetch_sales_lines,
        )

    async def sales_by_employee(self) -> list[dict]:
        return await self._run(
            "sales_by_employee", sales_aggregates.sales_by_employee,
            self._source.fetch_employees, self._source.fetch_sales_lines,
        )

    async def employee_performance(self) -> list[dict]:
        return await self._run(
            "employee_performance", sales_aggregates.employee_performance,
            self._source.fetch_employees, self._source.fetch_sales_lines,
        )

    async def region_sales(self) -> list[dict]:
        return await self._run(
            "region_sales", sales_aggregates.region_sales,
            self._source.fetch_sales_lines,
        )

    # ─── Summaries and time series ───────────────────────────────

    async def sales_summary(self) -> dict:
        return await self._run(
            "sales_summary", sales_aggregates.sales_summary,
            self._source.fetch_orders, self._source.fetch_sales_lines,
        )

    async def average_order_value(self) -> dict:
        return await self._run(
            "average_order_value", sales_aggregates.average_order_value,
            self._source.fetch_sales_lines,
        )

    async def monthly_sales(self) -> list[dict]:
        return await self._run(
            "monthly_sales", sales_aggregates.monthly_sales,
            self._source.fetch_sales_lines,
        )

    async def customer_growth(self) -> list[dict]:
        return await self._run(
            "customer_growth", customer_growth, self._source.fetch_orders,
        )

    # ─── Classifications ─────────────────────────────────────────

    async def order_status_summary(self) -> list[dict]:
        return await self._run(
            "order_status_summary", summarize_order_statuses,
            self._source.fetch_orders,
        )

    async def inventory_status(self) -> list[dict]:
        return await self._run(
            "inventory_status", build_inventory_rows,
            self._source.fetch_products,
        )

    async def product_profitability(self) -> list[dict]:
        return await self._run(
            "product_profitability", estimate_profitability,
            self._source.fetch_products, self._source.fetch_sales_lines,
        )
