"""Revenue Calculator — net contribution of one order line.

Invariants:
    - net_amount = unit_price * quantity * (1 - discount)
    - discount is a fraction of price (0 = none, 1 = full); values outside
      [0, 1] pass through arithmetically, never clamped
    - Absent numeric inputs are treated as 0
    - All money arithmetic in Decimal; floats are converted through str()
      so 0.05 stays 0.05 rather than its binary expansion
"""

from decimal import Decimal

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def as_decimal(value: object) -> Decimal:
    """Coerce a DB scalar (Decimal, int, float, str, None) to Decimal."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def net_amount(unit_price: object, quantity: object, discount: object) -> Decimal:
    """Price of one order line after discount."""
    return as_decimal(unit_price) * as_decimal(quantity) * (ONE - as_decimal(discount))


def line_net_amount(line: dict) -> Decimal:
    """net_amount for a row carrying unit_price/quantity/discount keys."""
    return net_amount(
        line.get("unit_price"), line.get("quantity"), line.get("discount"),
    )
