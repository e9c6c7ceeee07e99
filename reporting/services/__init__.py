"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services receive their ReportDataSource through the constructor
    - Services hold no mutable state between calls
    - Fetch errors propagate unchanged; no partial report is ever returned
"""
