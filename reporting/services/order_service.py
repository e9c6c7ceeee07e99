"""Order Service — paginated order listing and single-order lookup.

Invariants:
    - Listing is ordered by order_id asc, so a page repeats across calls
      absent concurrent writes
    - Unparsable or non-positive page/page_size fall back to defaults;
      page_size is capped at max_page_size
    - A missing order raises ResourceNotFoundError, never an empty 200; ids
      outside the 64-bit SQL integer range are missing by definition
    - A page past the last one is answered without fetching rows, so any
      positive page number is safe to pass to the data source
"""

import logging

from reporting.core.domain_types import OrderId
from reporting.core.errors import ResourceNotFoundError
from reporting.core.order_status import classify_order
from reporting.core.pagination import (
    DEFAULT_PAGE_SIZE, build_page, normalize_page_params, paginate,
)
from reporting.core.repository_protocols import ReportDataSource
from reporting.core.revenue import ZERO, line_net_amount
from reporting.services.deadline import run_with_deadline

logger = logging.getLogger(__name__)

# Largest value a SQL BIGINT (and a SQLite INTEGER) can bind
MAX_SQL_INTEGER = 2**63 - 1


def _with_status(order: dict) -> dict:
    return {
        **order,
        "status": classify_order(
            order.get("shipped_date"), order.get("required_date"),
        ).value,
    }


class OrderService:
    """Read-only order queries over a ReportDataSource."""

    def __init__(
        self,
        source: ReportDataSource,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = 100,
        timeout_seconds: float | None = 30.0,
    ):
        self._source = source
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size
        self._timeout = timeout_seconds

    async def list_orders(self, page: object = None, page_size: object = None) -> dict:
        """One page of orders plus pagination metadata."""
        p, size = normalize_page_params(
            page, page_size,
            default_page_size=self._default_page_size,
            max_page_size=self._max_page_size,
        )

        async def compute():
            total = await self._source.count_orders()
            window = paginate(total, p, size)
            if window.page > window.total_pages:
                rows = []
            else:
                rows = await self._source.fetch_orders_page(
                    window.items_limit, window.items_offset,
                )
            return build_page([_with_status(r) for r in rows], window)

        return await run_with_deadline("list_orders", self._timeout, compute())

    async def get_order(self, order_id: OrderId) -> dict:
        """Order header, derived status, priced lines and net total."""

        async def compute():
            order = None
            if abs(order_id) <= MAX_SQL_INTEGER:
                order = await self._source.get_order(order_id)
            if order is None:
                logger.info(
                    f"Order {order_id} not found",
                    extra={"operation": "get_order", "entity_id": order_id},
                )
                raise ResourceNotFoundError("Order", order_id)
            lines = [
                {**line, "net_amount": line_net_amount(line)}
                for line in await self._source.fetch_order_lines(order_id)
            ]
            return {
                **_with_status(order),
                "lines": lines,
                "total": sum((line["net_amount"] for line in lines), ZERO),
            }

        return await run_with_deadline("get_order", self._timeout, compute())
