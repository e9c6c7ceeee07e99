"""API Schemas — Pydantic DTOs for report rows, orders and pagination.

Invariants:
    - Field sets are stable: renaming a field is a breaking API change
    - Money and percentage fields are Decimal in Python and JSON numbers on the wire
"""
