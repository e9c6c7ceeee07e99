"""Order Schemas — listing rows and the single-order detail view."""

from pydantic import BaseModel

from reporting.schemas.report import Money


class OrderSummary(BaseModel):
    order_id: int
    customer_id: str | None
    employee_id: int | None
    order_date: str | None
    required_date: str | None
    shipped_date: str | None
    ship_name: str | None = None
    ship_city: str | None = None
    ship_region: str | None = None
    ship_country: str | None = None
    freight: Money | None = None
    status: str


class OrderLine(BaseModel):
    product_id: int
    product_name: str | None
    unit_price: Money
    quantity: int
    discount: float
    net_amount: Money


class OrderDetailResponse(OrderSummary):
    lines: list[OrderLine]
    total: Money
