"""SQL Report Data Source — joins and ordering against the seeded SQLite snapshot.

Tests cover:
    - sales lines carry order, customer, product and reference price fields
    - listing is ordered by order_id and honors limit/offset
    - missing order returns None; SQL errors become FetchFailureError
"""

from decimal import Decimal

import pytest
from sqlalchemy import text

from reporting.core.errors import FetchFailureError
from reporting.infrastructure.report_repository import SqlReportDataSource


async def test_sales_lines_join_all_dimensions(test_db, seed_northwind):
    lines = await SqlReportDataSource(test_db).fetch_sales_lines()
    assert [(l["order_id"], l["product_id"]) for l in lines] == [
        (10248, 1), (10248, 3), (10249, 2), (10250, 1), (10251, 3),
    ]
    first = lines[0]
    assert first["customer_name"] == "Alfreds Futterkiste"
    assert first["employee_id"] == 1
    assert first["category_id"] == 1
    assert first["supplier_id"] == 1
    assert first["reference_unit_price"] == Decimal("18.00")
    assert first["unit_price"] == Decimal("14.00")
    assert lines[-1]["customer_id"] is None
    assert lines[-1]["customer_name"] is None


async def test_products_keep_null_stock_levels(test_db, seed_northwind):
    products = await SqlReportDataSource(test_db).fetch_products()
    ikura = products[-1]
    assert ikura["product_name"] == "Ikura"
    assert ikura["units_in_stock"] is None


async def test_orders_page_is_ordered_and_bounded(test_db, seed_northwind):
    source = SqlReportDataSource(test_db)
    assert await source.count_orders() == 5
    page = await source.fetch_orders_page(limit=2, offset=2)
    assert [o["order_id"] for o in page] == [10250, 10251]


async def test_get_order_and_lines(test_db, seed_northwind):
    source = SqlReportDataSource(test_db)
    order = await source.get_order(10249)
    assert order["shipped_date"] == "1996-07-20"
    lines = await source.fetch_order_lines(10249)
    assert lines == [{
        "order_id": 10249, "product_id": 2, "product_name": "Chang",
        "unit_price": Decimal("15.20"), "quantity": 10, "discount": 0.25,
    }]


async def test_get_missing_order_returns_none(test_db, seed_northwind):
    assert await SqlReportDataSource(test_db).get_order(1) is None


async def test_sql_error_becomes_fetch_failure(test_db):
    await test_db.execute(text("DROP TABLE OrderDetails"))
    with pytest.raises(FetchFailureError) as exc_info:
        await SqlReportDataSource(test_db).fetch_sales_lines()
    assert exc_info.value.operation == "sales_lines"
