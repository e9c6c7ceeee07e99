"""Service Dependencies — build request-scoped services for the routes.

Invariants:
    - Each request gets its own session, data source and service instances
    - Limits and timeouts come from Settings, never from the route
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reporting.config import Settings, get_settings
from reporting.infrastructure.database import get_db
from reporting.infrastructure.report_repository import SqlReportDataSource
from reporting.services.order_service import OrderService
from reporting.services.report_service import ReportService


def get_report_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ReportService:
    return ReportService(
        SqlReportDataSource(db),
        timeout_seconds=settings.report_timeout_seconds,
        top_n=settings.top_n_limit,
    )


def get_order_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> OrderService:
    return OrderService(
        SqlReportDataSource(db),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
        timeout_seconds=settings.report_timeout_seconds,
    )
