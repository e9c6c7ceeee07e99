"""Order Status Classifier — Pending / Shipped / Late from order date fields.

Invariants:
    - Precedence: no shipped_date -> Pending; shipped after required -> Late;
      otherwise Shipped
    - Comparison is on calendar dates (time of day ignored)
    - Never raises: absent or unparsable dates count as absent, so every
      input maps to exactly one label
    - Summary ordered by count desc, ties by label asc
"""

from collections import Counter
from datetime import date, datetime
from typing import Iterable

from reporting.core.domain_types import OrderStatus


def as_date(value: object) -> date | None:
    """Truncate a datetime / ISO string to a date.

    None, '' and text that is not an ISO date (e.g. '1997-3-10') are absent.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def classify_order(shipped_date: object, required_date: object) -> OrderStatus:
    """Derive the status label of one order."""
    shipped = as_date(shipped_date)
    if shipped is None:
        return OrderStatus.PENDING
    required = as_date(required_date)
    if required is not None and shipped > required:
        return OrderStatus.LATE
    return OrderStatus.SHIPPED


def summarize_order_statuses(orders: Iterable[dict]) -> list[dict]:
    """Count orders per derived status."""
    counts = Counter(
        classify_order(o.get("shipped_date"), o.get("required_date")).value
        for o in orders
    )
    return [
        {"status": label, "count": count}
        for label, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
