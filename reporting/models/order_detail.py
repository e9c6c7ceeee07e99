"""OrderDetail ORM — one priced line of an order.

Invariants:
    - (order_id, product_id) is the primary key
    - unit_price is the price actually charged; discount is a fraction in [0, 1]
"""

from decimal import Decimal

from sqlalchemy import Float, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class OrderDetail(Base):
    __tablename__ = "OrderDetails"

    order_id: Mapped[int] = mapped_column(
        "OrderID", Integer, ForeignKey("Orders.OrderID"), primary_key=True,
    )
    product_id: Mapped[int] = mapped_column(
        "ProductID", Integer, ForeignKey("Products.ProductID"), primary_key=True,
    )
    unit_price: Mapped[Decimal] = mapped_column(
        "UnitPrice", Numeric(10, 2), nullable=False, default=0,
    )
    quantity: Mapped[int] = mapped_column("Quantity", Integer, nullable=False, default=1)
    discount: Mapped[float] = mapped_column("Discount", Float, nullable=False, default=0.0)
