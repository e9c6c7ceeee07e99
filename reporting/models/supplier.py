"""Supplier ORM — join dimension for supplier sales."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Supplier(Base):
    __tablename__ = "Suppliers"

    supplier_id: Mapped[int] = mapped_column("SupplierID", Integer, primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)
    country: Mapped[str | None] = mapped_column("Country", String(15), nullable=True)
