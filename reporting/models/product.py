"""Product ORM — catalogue entry with stock levels.

Invariants:
    - unit_price is the catalogue price; reports use it as the COGS proxy
    - Stock columns are nullable; reports treat absent levels as 0
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Product(Base):
    __tablename__ = "Products"

    product_id: Mapped[int] = mapped_column("ProductID", Integer, primary_key=True)
    product_name: Mapped[str] = mapped_column("ProductName", String(40), nullable=False)
    supplier_id: Mapped[int | None] = mapped_column(
        "SupplierID", Integer, ForeignKey("Suppliers.SupplierID"), nullable=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        "CategoryID", Integer, ForeignKey("Categories.CategoryID"), nullable=True,
    )
    quantity_per_unit: Mapped[str | None] = mapped_column(
        "QuantityPerUnit", String(20), nullable=True,
    )
    unit_price: Mapped[Decimal] = mapped_column(
        "UnitPrice", Numeric(10, 2), nullable=False, default=0,
    )
    units_in_stock: Mapped[int | None] = mapped_column("UnitsInStock", Integer, nullable=True)
    units_on_order: Mapped[int | None] = mapped_column("UnitsOnOrder", Integer, nullable=True)
    reorder_level: Mapped[int | None] = mapped_column("ReorderLevel", Integer, nullable=True)
    discontinued: Mapped[str] = mapped_column(
        "Discontinued", String(1), nullable=False, default="0",
    )
