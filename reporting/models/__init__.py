"""ORM Models — SQLAlchemy declarative models for the Northwind tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names match the Northwind SQLite schema (PascalCase),
      attribute names are snake_case
    - Date columns are stored as text, as in the Northwind database; core
      parses them with as_date()

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from reporting.models.category import Category  # noqa: F401
from reporting.models.customer import Customer  # noqa: F401
from reporting.models.employee import Employee  # noqa: F401
from reporting.models.supplier import Supplier  # noqa: F401
from reporting.models.product import Product  # noqa: F401
from reporting.models.order import Order  # noqa: F401
from reporting.models.order_detail import OrderDetail  # noqa: F401
