"""Root conftest — shared test configuration."""

import os

# Never point tests at a real Northwind database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
