"""Employee ORM — sales grouping key; display name is "first last"."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Employee(Base):
    __tablename__ = "Employees"

    employee_id: Mapped[int] = mapped_column("EmployeeID", Integer, primary_key=True)
    last_name: Mapped[str] = mapped_column("LastName", String(20), nullable=False)
    first_name: Mapped[str] = mapped_column("FirstName", String(10), nullable=False)
    title: Mapped[str | None] = mapped_column("Title", String(30), nullable=True)
