"""Order ORM — order header with nullable dates and shipping fields.

Invariants:
    - customer_id and employee_id are nullable references
    - Lateness compares shipped_date to required_date only, as calendar dates
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Order(Base):
    __tablename__ = "Orders"

    order_id: Mapped[int] = mapped_column("OrderID", Integer, primary_key=True)
    customer_id: Mapped[str | None] = mapped_column(
        "CustomerID", String(40), ForeignKey("Customers.CustomerID"), nullable=True,
    )
    employee_id: Mapped[int | None] = mapped_column(
        "EmployeeID", Integer, ForeignKey("Employees.EmployeeID"), nullable=True,
    )
    order_date: Mapped[str | None] = mapped_column("OrderDate", String(30), nullable=True)
    required_date: Mapped[str | None] = mapped_column("RequiredDate", String(30), nullable=True)
    shipped_date: Mapped[str | None] = mapped_column("ShippedDate", String(30), nullable=True)
    ship_via: Mapped[int | None] = mapped_column("ShipVia", Integer, nullable=True)
    freight: Mapped[Decimal | None] = mapped_column("Freight", Numeric(10, 2), nullable=True)
    ship_name: Mapped[str | None] = mapped_column("ShipName", String(40), nullable=True)
    ship_address: Mapped[str | None] = mapped_column("ShipAddress", String(60), nullable=True)
    ship_city: Mapped[str | None] = mapped_column("ShipCity", String(15), nullable=True)
    ship_region: Mapped[str | None] = mapped_column("ShipRegion", String(15), nullable=True)
    ship_postal_code: Mapped[str | None] = mapped_column(
        "ShipPostalCode", String(10), nullable=True,
    )
    ship_country: Mapped[str | None] = mapped_column("ShipCountry", String(15), nullable=True)
