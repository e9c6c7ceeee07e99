"""Inventory Status Classifier — OK / LOW / OUT from stock and reorder levels.

Invariants:
    - Absent stock, on-order and reorder values are treated as 0
    - units_in_stock == 0 -> OUT; 0 < units_in_stock <= reorder_level -> LOW; else OK
    - Rows ordered by product name asc, ties by product_id
"""

from typing import Iterable

from reporting.core.domain_types import StockStatus


def classify_stock(
    units_in_stock: int | None,
    units_on_order: int | None,
    reorder_level: int | None,
) -> StockStatus:
    """Derive stock health. units_on_order does not affect the label."""
    in_stock = units_in_stock or 0
    reorder = reorder_level or 0
    if in_stock == 0:
        return StockStatus.OUT
    if 0 < in_stock <= reorder:
        return StockStatus.LOW
    return StockStatus.OK


def build_inventory_rows(products: Iterable[dict]) -> list[dict]:
    """One inventory row per product with its zero-defaulted levels."""
    rows = []
    for p in products:
        in_stock = p.get("units_in_stock") or 0
        on_order = p.get("units_on_order") or 0
        reorder = p.get("reorder_level") or 0
        rows.append({
            "product_id": p["product_id"],
            "product_name": p.get("product_name") or "",
            "units_in_stock": in_stock,
            "units_on_order": on_order,
            "reorder_level": reorder,
            "status": classify_stock(in_stock, on_order, reorder).value,
        })
    rows.sort(key=lambda r: (r["product_name"], r["product_id"]))
    return rows
