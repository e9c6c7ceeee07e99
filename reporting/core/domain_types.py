"""Domain Types — identity aliases and categorical labels for reporting.

Invariants:
    - OrderStatus and StockStatus are closed sets: every input maps to exactly one member
    - str Enums serialize to their label without custom encoders
    - YearMonth is always formatted "YYYY-MM"
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", int)
ProductId = NewType("ProductId", int)
CustomerId = NewType("CustomerId", str)
EmployeeId = NewType("EmployeeId", int)
SupplierId = NewType("SupplierId", int)
CategoryId = NewType("CategoryId", int)


# ─── Value Types ─────────────────────────────────────────────────

YearMonth = NewType("YearMonth", str)   # "YYYY-MM"


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Derived fulfilment state of an order."""
    PENDING = "Pending"
    SHIPPED = "Shipped"
    LATE = "Late"


class StockStatus(str, Enum):
    """Derived stock health of a product."""
    OK = "OK"
    LOW = "LOW"
    OUT = "OUT"
