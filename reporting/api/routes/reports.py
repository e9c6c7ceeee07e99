"""Report Routes — GET endpoints for the analytics reports.

Invariants:
    - One endpoint per ReportService method, kebab-case path
    - Read-only: every endpoint is a GET with no parameters
"""

from fastapi import APIRouter, Depends

from reporting.api.dependencies import get_report_service
from reporting.schemas.report import (
    AverageOrderValue, CategorySalesRow, CohortRow, EmployeePerformanceRow,
    EmployeeSalesRow, InventoryRow, MonthlySalesRow, ProfitabilityRow,
    RegionSalesRow, SalesSummary, StatusCountRow, TopCustomerRow,
    TopProductRow, TopSupplierRow,
)
from reporting.services.report_service import ReportService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/top-customers", response_model=list[TopCustomerRow])
async def top_customers(service: ReportService = Depends(get_report_service)):
    """Customers with the highest net purchases."""
    return await service.top_customers()


@router.get("/top-products", response_model=list[TopProductRow])
async def top_products(service: ReportService = Depends(get_report_service)):
    """Products with the most units sold."""
    return await service.top_products()


@router.get("/sales-by-category", response_model=list[CategorySalesRow])
async def sales_by_category(service: ReportService = Depends(get_report_service)):
    return await service.sales_by_category()


@router.get("/sales-by-employee", response_model=list[EmployeeSalesRow])
async def sales_by_employee(service: ReportService = Depends(get_report_service)):
    return await service.sales_by_employee()


@router.get("/sales-summary", response_model=SalesSummary)
async def sales_summary(service: ReportService = Depends(get_report_service)):
    """Revenue, order/customer counts, AOV and order date span."""
    return await service.sales_summary()


@router.get("/monthly-sales", response_model=list[MonthlySalesRow])
async def monthly_sales(service: ReportService = Depends(get_report_service)):
    return await service.monthly_sales()


@router.get("/inventory-status", response_model=list[InventoryRow])
async def inventory_status(service: ReportService = Depends(get_report_service)):
    """Stock health (OK / LOW / OUT) per product."""
    return await service.inventory_status()


@router.get("/top-suppliers", response_model=list[TopSupplierRow])
async def top_suppliers(service: ReportService = Depends(get_report_service)):
    return await service.top_suppliers()


@router.get("/customer-growth", response_model=list[CohortRow])
async def customer_growth(service: ReportService = Depends(get_report_service)):
    """New and cumulative distinct customers per month."""
    return await service.customer_growth()


@router.get("/order-status-summary", response_model=list[StatusCountRow])
async def order_status_summary(service: ReportService = Depends(get_report_service)):
    return await service.order_status_summary()


@router.get("/region-sales", response_model=list[RegionSalesRow])
async def region_sales(service: ReportService = Depends(get_report_service)):
    return await service.region_sales()


@router.get("/employee-performance", response_model=list[EmployeePerformanceRow])
async def employee_performance(service: ReportService = Depends(get_report_service)):
    return await service.employee_performance()


@router.get("/product-profitability", response_model=list[ProfitabilityRow])
async def product_profitability(service: ReportService = Depends(get_report_service)):
    """Revenue, approximated COGS and margin per product."""
    return await service.product_profitability()


@router.get("/average-order-value", response_model=AverageOrderValue)
async def average_order_value(service: ReportService = Depends(get_report_service)):
    return await service.average_order_value()
