"""Customer ORM — referenced by orders; identifier is a short text code."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Customer(Base):
    __tablename__ = "Customers"

    customer_id: Mapped[str] = mapped_column("CustomerID", String(40), primary_key=True)
    company_name: Mapped[str] = mapped_column("CompanyName", String(40), nullable=False)
    contact_name: Mapped[str | None] = mapped_column("ContactName", String(30), nullable=True)
    city: Mapped[str | None] = mapped_column("City", String(15), nullable=True)
    country: Mapped[str | None] = mapped_column("Country", String(15), nullable=True)
