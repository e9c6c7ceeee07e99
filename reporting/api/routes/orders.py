"""Order Routes — paginated listing and single-order lookup.

Invariants:
    - page/page_size accepted as raw strings: unparsable values fall back to
      defaults in OrderService instead of failing validation
    - Unknown order id → 404 via ResourceNotFoundError
"""

from fastapi import APIRouter, Depends, Query

from reporting.api.dependencies import get_order_service
from reporting.schemas.order import OrderDetailResponse, OrderSummary
from reporting.schemas.pagination import Paginated
from reporting.services.order_service import OrderService

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.get("", response_model=Paginated[OrderSummary])
async def list_orders(
    page: str | None = Query(None),
    page_size: str | None = Query(None),
    service: OrderService = Depends(get_order_service),
):
    """List orders by ascending id, one page at a time."""
    return await service.list_orders(page, page_size)


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: int, service: OrderService = Depends(get_order_service),
):
    """Single order with its lines and net total."""
    return await service.get_order(order_id)
