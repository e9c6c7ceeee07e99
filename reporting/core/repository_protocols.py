"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from services or infrastructure; dependencies point inward
    - All reads go through ReportDataSource; no method mutates source data
    - Rows are plain dicts keyed by the field names listed per method

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, but the core folds that consume
      the rows are plain synchronous functions
"""

from typing import Protocol

from reporting.core.domain_types import OrderId


class ReportDataSource(Protocol):
    """Read-only row supplier for the reporting services, implemented in infrastructure."""

    async def fetch_sales_lines(self) -> list[dict]:
        """Order lines joined with order, customer, product, category, supplier.

        Keys: order_id, customer_id, customer_name, employee_id, order_date,
        ship_region, ship_country, product_id, product_name, category_id,
        supplier_id, reference_unit_price, unit_price, quantity, discount.
        """
        ...

    async def fetch_orders(self) -> list[dict]:
        """Keys: order_id, customer_id, employee_id, order_date, required_date, shipped_date."""
        ...

    async def fetch_products(self) -> list[dict]:
        """Keys: product_id, product_name, supplier_id, category_id,
        reference_unit_price, units_in_stock, units_on_order, reorder_level."""
        ...

    async def fetch_customers(self) -> list[dict]: ...
    async def fetch_employees(self) -> list[dict]: ...
    async def fetch_categories(self) -> list[dict]: ...
    async def fetch_suppliers(self) -> list[dict]: ...

    async def count_orders(self) -> int: ...
    async def fetch_orders_page(self, limit: int, offset: int) -> list[dict]: ...
    async def get_order(self, order_id: OrderId) -> dict | None: ...
    async def fetch_order_lines(self, order_id: OrderId) -> list[dict]: ...
