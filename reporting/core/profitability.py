"""Profitability Estimator — revenue, approximated COGS, gross profit and margin.

This is an intentional approximation, not an accounting ground truth.
True historical cost is not modeled: COGS uses the product's reference
unit price (its catalogue price) as a cost proxy.

Invariants:
    - revenue = sum of net_amount over the product's order lines
    - cogs = sum of reference_unit_price * quantity over the same lines
    - gross_profit = revenue - cogs
    - gross_margin_pct = 0 when revenue == 0, else gross_profit / revenue * 100
    - Products with no lines report zeros (never omitted, never divide by zero)
    - Rows ordered by revenue desc, ties by product_id asc
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from reporting.core.revenue import ZERO, HUNDRED, as_decimal, line_net_amount


def gross_margin_pct(revenue: Decimal, gross_profit: Decimal) -> Decimal:
    if revenue == 0:
        return ZERO
    return gross_profit / revenue * HUNDRED


def estimate_profitability(
    products: Iterable[dict], lines: Iterable[dict],
) -> list[dict]:
    """Fold order lines into one profitability row per product."""
    revenue: dict[int, Decimal] = defaultdict(lambda: ZERO)
    cogs: dict[int, Decimal] = defaultdict(lambda: ZERO)
    names: dict[int, str | None] = {}
    reference_price: dict[int, Decimal] = {}
    for p in products:
        names[p["product_id"]] = p.get("product_name")
        reference_price[p["product_id"]] = as_decimal(p.get("reference_unit_price"))

    for line in lines:
        pid = line["product_id"]
        revenue[pid] += line_net_amount(line)
        cost = reference_price.get(pid)
        if cost is None:
            cost = as_decimal(line.get("reference_unit_price"))
        cogs[pid] += cost * as_decimal(line.get("quantity"))
        if not names.get(pid):
            names[pid] = line.get("product_name")

    rows = []
    for pid in names:
        r = revenue[pid]
        c = cogs[pid]
        profit = r - c
        rows.append({
            "product_id": pid,
            "product_name": names[pid] or "",
            "revenue": r,
            "cogs": c,
            "gross_profit": profit,
            "gross_margin_pct": gross_margin_pct(r, profit),
        })
    rows.sort(key=lambda row: (-row["revenue"], row["product_id"]))
    return rows
