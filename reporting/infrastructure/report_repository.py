"""SQL Report Data Source — ReportDataSource implemented with SQLAlchemy selects.

Invariants:
    - Read-only: only SELECT statements, nothing is added or flushed
    - Every row is returned as a plain dict keyed by the Protocol field names
    - Every multi-row fetch has a deterministic ORDER BY (primary key asc)
    - Any SQLAlchemy failure is logged at WARNING with the driver detail and
      raised as FetchFailureError naming the fetch;
      nothing is retried here

Design Decisions:
    - Joins happen in SQL, grouping and arithmetic happen in core: the
      storage engine only has to support plain joins
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from reporting.core.domain_types import OrderId
from reporting.core.errors import FetchFailureError
from reporting.models import (
    Category, Customer, Employee, Order, OrderDetail, Product, Supplier,
)

logger = logging.getLogger(__name__)

_ORDER_COLUMNS = (
    Order.order_id.label("order_id"),
    Order.customer_id.label("customer_id"),
    Order.employee_id.label("employee_id"),
    Order.order_date.label("order_date"),
    Order.required_date.label("required_date"),
    Order.shipped_date.label("shipped_date"),
)

_ORDER_HEADER_COLUMNS = _ORDER_COLUMNS + (
    Order.ship_name.label("ship_name"),
    Order.ship_city.label("ship_city"),
    Order.ship_region.label("ship_region"),
    Order.ship_country.label("ship_country"),
    Order.freight.label("freight"),
)


class SqlReportDataSource:
    """ReportDataSource over one AsyncSession (one consistent read per request)."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _rows(self, operation: str, stmt: Select) -> list[dict]:
        try:
            result = await self._db.execute(stmt)
        except SQLAlchemyError as e:
            # Driver detail stays in the logs; the ERROR line comes from the handler
            logger.warning(
                f"Fetch {operation} failed: {e}",
                extra={"operation": operation, "error_code": "FETCH_FAILURE"},
            )
            raise FetchFailureError(type(e).__name__, operation) from e
        return [dict(row) for row in result.mappings().all()]

    async def fetch_sales_lines(self) -> list[dict]:
        stmt = (
            select(
                OrderDetail.order_id.label("order_id"),
                Order.customer_id.label("customer_id"),
                Customer.company_name.label("customer_name"),
                Order.employee_id.label("employee_id"),
                Order.order_date.label("order_date"),
                Order.ship_region.label("ship_region"),
                Order.ship_country.label("ship_country"),
                OrderDetail.product_id.label("product_id"),
                Product.product_name.label("product_name"),
                Product.category_id.label("category_id"),
                Product.supplier_id.label("supplier_id"),
                Product.unit_price.label("reference_unit_price"),
                OrderDetail.unit_price.label("unit_price"),
                OrderDetail.quantity.label("quantity"),
                OrderDetail.discount.label("discount"),
            )
            .join(Order, Order.order_id == OrderDetail.order_id)
            .join(Product, Product.product_id == OrderDetail.product_id)
            .outerjoin(Customer, Customer.customer_id == Order.customer_id)
            .order_by(OrderDetail.order_id, OrderDetail.product_id)
        )
        return await self._rows("sales_lines", stmt)

    async def fetch_orders(self) -> list[dict]:
        stmt = select(*_ORDER_COLUMNS).order_by(Order.order_id)
        return await self._rows("orders", stmt)

    async def fetch_products(self) -> list[dict]:
        stmt = select(
            Product.product_id.label("product_id"),
            Product.product_name.label("product_name"),
            Product.supplier_id.label("supplier_id"),
            Product.category_id.label("category_id"),
            Product.unit_price.label("reference_unit_price"),
            Product.units_in_stock.label("units_in_stock"),
            Product.units_on_order.label("units_on_order"),
            Product.reorder_level.label("reorder_level"),
        ).order_by(Product.product_id)
        return await self._rows("products", stmt)

    async def fetch_customers(self) -> list[dict]:
        stmt = select(
            Customer.customer_id.label("customer_id"),
            Customer.company_name.label("company_name"),
        ).order_by(Customer.customer_id)
        return await self._rows("customers", stmt)

    async def fetch_employees(self) -> list[dict]:
        stmt = select(
            Employee.employee_id.label("employee_id"),
            Employee.first_name.label("first_name"),
            Employee.last_name.label("last_name"),
        ).order_by(Employee.employee_id)
        return await self._rows("employees", stmt)

    async def fetch_categories(self) -> list[dict]:
        stmt = select(
            Category.category_id.label("category_id"),
            Category.category_name.label("category_name"),
        ).order_by(Category.category_id)
        return await self._rows("categories", stmt)

    async def fetch_suppliers(self) -> list[dict]:
        stmt = select(
            Supplier.supplier_id.label("supplier_id"),
            Supplier.company_name.label("company_name"),
        ).order_by(Supplier.supplier_id)
        return await self._rows("suppliers", stmt)

    # ─── Order listing ───────────────────────────────────────────

    async def count_orders(self) -> int:
        rows = await self._rows(
            "count_orders", select(func.count(Order.order_id).label("total")),
        )
        return rows[0]["total"] if rows else 0

    async def fetch_orders_page(self, limit: int, offset: int) -> list[dict]:
        stmt = (
            select(*_ORDER_HEADER_COLUMNS)
            .order_by(Order.order_id.asc())
            .limit(limit)
            .offset(offset)
        )
        return await self._rows("orders_page", stmt)

    async def get_order(self, order_id: OrderId) -> dict | None:
        stmt = select(*_ORDER_HEADER_COLUMNS).where(Order.order_id == order_id)
        rows = await self._rows("get_order", stmt)
        return rows[0] if rows else None

    async def fetch_order_lines(self, order_id: OrderId) -> list[dict]:
        stmt = (
            select(
                OrderDetail.order_id.label("order_id"),
                OrderDetail.product_id.label("product_id"),
                Product.product_name.label("product_name"),
                OrderDetail.unit_price.label("unit_price"),
                OrderDetail.quantity.label("quantity"),
                OrderDetail.discount.label("discount"),
            )
            .outerjoin(Product, Product.product_id == OrderDetail.product_id)
            .where(OrderDetail.order_id == order_id)
            .order_by(OrderDetail.product_id)
        )
        return await self._rows("order_lines", stmt)
