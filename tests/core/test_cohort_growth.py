"""Cohort Growth Analyzer — tests for first-seen periods and the running total.

Tests cover:
    - each customer counted once, in the month of its earliest order
    - months with orders but no new customers still appear
    - cumulative_unique non-decreasing, ending at the distinct customer count
    - orders without customer or with an absent or malformed date are ignored
"""

from reporting.core.cohort_growth import customer_growth, first_seen_periods


ORDERS = [
    {"customer_id": "ALFKI", "order_date": "1996-07-04"},
    {"customer_id": "ANATR", "order_date": "1996-07-05 00:00:00"},
    {"customer_id": "ALFKI", "order_date": "1996-08-08"},
    {"customer_id": None, "order_date": "1996-09-01"},
    {"customer_id": "BONAP", "order_date": "1996-11-20"},
    {"customer_id": "ANATR", "order_date": None},
]


def test_first_seen_period_is_earliest_order_month():
    cohorts, periods = first_seen_periods(ORDERS)
    assert cohorts == {"ALFKI": "1996-07", "ANATR": "1996-07", "BONAP": "1996-11"}
    assert periods == ["1996-07", "1996-08", "1996-09", "1996-11"]


def test_out_of_order_input_still_finds_earliest():
    orders = [
        {"customer_id": "ALFKI", "order_date": "1997-02-01"},
        {"customer_id": "ALFKI", "order_date": "1996-12-31"},
    ]
    cohorts, _ = first_seen_periods(orders)
    assert cohorts == {"ALFKI": "1996-12"}


def test_growth_rows_fill_months_without_new_customers():
    assert customer_growth(ORDERS) == [
        {"year_month": "1996-07", "new_customers": 2, "cumulative_unique": 2},
        {"year_month": "1996-08", "new_customers": 0, "cumulative_unique": 2},
        {"year_month": "1996-09", "new_customers": 0, "cumulative_unique": 2},
        {"year_month": "1996-11", "new_customers": 1, "cumulative_unique": 3},
    ]


def test_cumulative_is_non_decreasing_and_ends_at_distinct_customers():
    rows = customer_growth(ORDERS)
    totals = [r["cumulative_unique"] for r in rows]
    assert totals == sorted(totals)
    distinct = {
        o["customer_id"] for o in ORDERS
        if o["customer_id"] is not None and o["order_date"] is not None
    }
    assert totals[-1] == len(distinct)


def test_no_orders_gives_no_rows():
    assert customer_growth([]) == []


def test_malformed_order_date_is_skipped():
    orders = [
        {"customer_id": "A", "order_date": "1996/07/04"},
        {"customer_id": "B", "order_date": "1996-08-01"},
    ]
    assert customer_growth(orders) == [
        {"year_month": "1996-08", "new_customers": 1, "cumulative_unique": 1},
    ]
