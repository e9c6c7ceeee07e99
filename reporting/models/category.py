"""Category ORM — product grouping dimension."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reporting.db.base import Base


class Category(Base):
    __tablename__ = "Categories"

    category_id: Mapped[int] = mapped_column("CategoryID", Integer, primary_key=True)
    category_name: Mapped[str] = mapped_column("CategoryName", String(15), nullable=False)
    description: Mapped[str | None] = mapped_column("Description", Text, nullable=True)
