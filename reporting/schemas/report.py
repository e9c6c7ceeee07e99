"""Report Schemas — one row model per report endpoint."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

# Decimal internally, JSON number on the wire
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


class TopCustomerRow(BaseModel):
    customer_id: str
    company_name: str
    total_purchase: Money


class TopProductRow(BaseModel):
    product_id: int
    product_name: str
    total_sold: int


class CategorySalesRow(BaseModel):
    category_id: int
    category_name: str
    total_sales: Money


class EmployeeSalesRow(BaseModel):
    employee_id: int
    employee_name: str
    total_sales: Money


class SalesSummary(BaseModel):
    total_revenue: Money
    total_orders: int
    total_customers: int
    average_order_value: Money
    first_order_date: str | None
    last_order_date: str | None


class MonthlySalesRow(BaseModel):
    year_month: str
    total_sales: Money
    orders: int


class InventoryRow(BaseModel):
    product_id: int
    product_name: str
    units_in_stock: int
    units_on_order: int
    reorder_level: int
    status: str


class TopSupplierRow(BaseModel):
    supplier_id: int
    company_name: str
    total_sales: Money
    total_qty: int


class CohortRow(BaseModel):
    year_month: str
    new_customers: int
    cumulative_unique: int


class StatusCountRow(BaseModel):
    status: str
    count: int


class RegionSalesRow(BaseModel):
    region: str | None
    total_sales: Money
    orders: int


class EmployeePerformanceRow(BaseModel):
    employee_id: int
    employee_name: str
    total_sales: Money
    orders_handled: int
    avg_order_value: Money
    unique_customers: int


class ProfitabilityRow(BaseModel):
    """COGS is approximated from the product's reference unit price.

    This is an intentional approximation, not an accounting ground truth.
    """
    product_id: int
    product_name: str
    revenue: Money
    cogs: Money
    gross_profit: Money
    gross_margin_pct: Money


class AverageOrderValue(BaseModel):
    average: Money
