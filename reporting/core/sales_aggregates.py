"""Sales Aggregates — grouping folds behind the revenue-bearing reports.

Invariants:
    - Every revenue figure is a sum of net_amount (discount applied)
    - Dimension reports (categories, employees) include every member; members
      without lines report 0 instead of being dropped
    - "Top" reports rank only members with sales and keep at most `limit` rows
    - Ordering is total desc with ties broken by identifier asc, so output is
      identical across runs over the same rows
    - An order counts toward order totals only when it has at least one line
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from reporting.core.cohort_growth import year_month
from reporting.core.order_status import as_date
from reporting.core.revenue import ZERO, line_net_amount


def employee_name(employee: dict) -> str:
    """Display name "first last"."""
    return f"{employee.get('first_name') or ''} {employee.get('last_name') or ''}".strip()


def order_totals(lines: Iterable[dict]) -> dict:
    """Net total per order_id, in first-seen order."""
    totals: dict = defaultdict(lambda: ZERO)
    for line in lines:
        totals[line["order_id"]] += line_net_amount(line)
    return dict(totals)


def average_of(total: Decimal, count: int) -> Decimal:
    if count == 0:
        return ZERO
    return total / count


def _ranked(rows: list[dict], total_key: str, id_key: str) -> list[dict]:
    rows.sort(key=lambda r: (-r[total_key], r[id_key]))
    return rows


# ─── Top-N reports ───────────────────────────────────────────────

def top_customers(customers: Iterable[dict], lines: Iterable[dict], limit: int) -> list[dict]:
    names = {c["customer_id"]: c.get("company_name") for c in customers}
    totals: dict = defaultdict(lambda: ZERO)
    for line in lines:
        cid = line.get("customer_id")
        if cid is None:
            continue
        totals[cid] += line_net_amount(line)
        if not names.get(cid):
            names[cid] = line.get("customer_name")
    rows = [
        {"customer_id": cid, "company_name": names.get(cid) or "", "total_purchase": total}
        for cid, total in totals.items()
    ]
    return _ranked(rows, "total_purchase", "customer_id")[:limit]


def top_products(products: Iterable[dict], lines: Iterable[dict], limit: int) -> list[dict]:
    names = {p["product_id"]: p.get("product_name") for p in products}
    sold: dict = defaultdict(int)
    for line in lines:
        pid = line["product_id"]
        sold[pid] += line.get("quantity") or 0
        if not names.get(pid):
            names[pid] = line.get("product_name")
    rows = [
        {"product_id": pid, "product_name": names.get(pid) or "", "total_sold": qty}
        for pid, qty in sold.items()
    ]
    return _ranked(rows, "total_sold", "product_id")[:limit]


def top_suppliers(suppliers: Iterable[dict], lines: Iterable[dict], limit: int) -> list[dict]:
    names = {s["supplier_id"]: s.get("company_name") for s in suppliers}
    sales: dict = defaultdict(lambda: ZERO)
    qty: dict = defaultdict(int)
    for line in lines:
        sid = line.get("supplier_id")
        if sid is None:
            continue
        sales[sid] += line_net_amount(line)
        qty[sid] += line.get("quantity") or 0
    rows = [
        {
            "supplier_id": sid,
            "company_name": names.get(sid) or "",
            "total_sales": total,
            "total_qty": qty[sid],
        }
        for sid, total in sales.items()
    ]
    return _ranked(rows, "total_sales", "supplier_id")[:limit]


# ─── Dimension reports ───────────────────────────────────────────

def sales_by_category(categories: Iterable[dict], lines: Iterable[dict]) -> list[dict]:
    totals: dict = {}
    names = {}
    for c in categories:
        totals[c["category_id"]] = ZERO
        names[c["category_id"]] = c.get("category_name")
    for line in lines:
        cid = line.get("category_id")
        if cid is None:
            continue
        totals[cid] = totals.get(cid, ZERO) + line_net_amount(line)
    rows = [
        {"category_id": cid, "category_name": names.get(cid) or "", "total_sales": total}
        for cid, total in totals.items()
    ]
    return _ranked(rows, "total_sales", "category_id")


def sales_by_employee(employees: Iterable[dict], lines: Iterable[dict]) -> list[dict]:
    return [
        {
            "employee_id": row["employee_id"],
            "employee_name": row["employee_name"],
            "total_sales": row["total_sales"],
        }
        for row in employee_performance(employees, lines)
    ]


def employee_performance(employees: Iterable[dict], lines: Iterable[dict]) -> list[dict]:
    """Sales, orders handled, AOV and distinct customers per employee."""
    employees = list(employees)
    sales: dict = defaultdict(lambda: ZERO)
    orders: dict = defaultdict(set)
    customers: dict = defaultdict(set)
    for line in lines:
        eid = line.get("employee_id")
        if eid is None:
            continue
        sales[eid] += line_net_amount(line)
        orders[eid].add(line["order_id"])
        if line.get("customer_id") is not None:
            customers[eid].add(line["customer_id"])

    rows = []
    for e in employees:
        eid = e["employee_id"]
        handled = len(orders[eid])
        rows.append({
            "employee_id": eid,
            "employee_name": employee_name(e),
            "total_sales": sales[eid],
            "orders_handled": handled,
            "avg_order_value": average_of(sales[eid], handled),
            "unique_customers": len(customers[eid]),
        })
    return _ranked(rows, "total_sales", "employee_id")


# ─── Time and geography ──────────────────────────────────────────

def monthly_sales(lines: Iterable[dict]) -> list[dict]:
    """Net sales and distinct orders per YYYY-MM of the order date."""
    sales: dict = defaultdict(lambda: ZERO)
    orders: dict = defaultdict(set)
    for line in lines:
        ordered_on = as_date(line.get("order_date"))
        if ordered_on is None:
            continue
        period = year_month(ordered_on)
        sales[period] += line_net_amount(line)
        orders[period].add(line["order_id"])
    return [
        {"year_month": period, "total_sales": sales[period], "orders": len(orders[period])}
        for period in sorted(sales)
    ]


def region_of(line: dict) -> str | None:
    """Trimmed ship region, falling back to ship country when blank."""
    region = (line.get("ship_region") or "").strip()
    return region or line.get("ship_country")


def region_sales(lines: Iterable[dict]) -> list[dict]:
    sales: dict = defaultdict(lambda: ZERO)
    orders: dict = defaultdict(set)
    for line in lines:
        region = region_of(line)
        sales[region] += line_net_amount(line)
        orders[region].add(line["order_id"])
    rows = [
        {"region": region, "total_sales": total, "orders": len(orders[region])}
        for region, total in sales.items()
    ]
    rows.sort(key=lambda r: (-r["total_sales"], r["region"] is None, r["region"] or ""))
    return rows


# ─── Summaries ───────────────────────────────────────────────────

def average_order_value(lines: Iterable[dict]) -> dict:
    totals = order_totals(lines)
    return {"average": average_of(sum(totals.values(), ZERO), len(totals))}


def sales_summary(orders: Iterable[dict], lines: Iterable[dict]) -> dict:
    """Revenue, order and customer counts, AOV and the order date span."""
    totals = order_totals(lines)
    revenue = sum(totals.values(), ZERO)
    customers = set()
    dates = []
    for o in orders:
        if o.get("customer_id") is not None:
            customers.add(o["customer_id"])
        ordered_on = as_date(o.get("order_date"))
        if ordered_on is not None:
            dates.append(ordered_on)
    return {
        "total_revenue": revenue,
        "total_orders": len(totals),
        "total_customers": len(customers),
        "average_order_value": average_of(revenue, len(totals)),
        "first_order_date": min(dates).isoformat() if dates else None,
        "last_order_date": max(dates).isoformat() if dates else None,
    }
