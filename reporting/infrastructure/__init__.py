"""Infrastructure Layer — database access, SQL data source, logging.

Invariants:
    - Only this layer talks to SQLAlchemy engines and sessions
    - Every SQLAlchemy failure leaves this layer as FetchFailureError
"""
