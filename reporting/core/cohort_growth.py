"""Cohort Growth Analyzer — first-seen period per customer and a running total.

Invariants:
    - Each customer with at least one dated order belongs to exactly one
      first-seen period (year-month of its earliest order)
    - The period series is every distinct year-month with any order, so
      periods without new customers still appear with new_customers = 0
    - cumulative_unique is a sequential fold over the sorted periods:
      non-decreasing, and its last value equals the distinct customer count
    - Orders without a customer or without an order date are ignored

Design Decisions:
    - Running sum computed in Python, not with a SQL window function, so the
      same result comes out of any storage engine
"""

from collections import Counter
from datetime import date
from typing import Iterable

from reporting.core.domain_types import YearMonth
from reporting.core.order_status import as_date


def year_month(value: date) -> YearMonth:
    return YearMonth(f"{value.year:04d}-{value.month:02d}")


def first_seen_periods(orders: Iterable[dict]) -> tuple[dict, list[YearMonth]]:
    """Pass 1: earliest period per customer, plus the ordered period series."""
    earliest: dict[str, date] = {}
    periods: set[YearMonth] = set()
    for o in orders:
        ordered_on = as_date(o.get("order_date"))
        if ordered_on is None:
            continue
        periods.add(year_month(ordered_on))
        customer = o.get("customer_id")
        if customer is None:
            continue
        if customer not in earliest or ordered_on < earliest[customer]:
            earliest[customer] = ordered_on
    cohorts = {c: year_month(d) for c, d in earliest.items()}
    return cohorts, sorted(periods)


def customer_growth(orders: Iterable[dict]) -> list[dict]:
    """Pass 2: new and cumulative distinct customers per period."""
    cohorts, periods = first_seen_periods(orders)
    new_per_period = Counter(cohorts.values())

    rows = []
    cumulative = 0
    for period in periods:
        new = new_per_period.get(period, 0)
        cumulative += new
        rows.append({
            "year_month": period,
            "new_customers": new,
            "cumulative_unique": cumulative,
        })
    return rows
