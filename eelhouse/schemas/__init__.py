"""Schema exports."""

from eelhouse.schemas.menu import MenuItemResponse
from eelhouse.schemas.order import (
    CustomerCreate,
    CustomerResponse,
    OrderCreate,
    OrderDetailResponse,
    OrderItemPayload,
    OrderItemResponse,
    OrderResponse,
    OrderStatusUpdate,
    RecentOrderResponse,
)
from eelhouse.schemas.report import (
    ItemPopularityResponse,
    ReportFilter,
    SalesMetricsResponse,
    SalesTrendPointResponse,
)

__all__ = [
    "CustomerCreate",
    "CustomerResponse",
    "ItemPopularityResponse",
    "MenuItemResponse",
    "OrderCreate",
    "OrderDetailResponse",
    "OrderItemPayload",
    "OrderItemResponse",
    "OrderResponse",
    "OrderStatusUpdate",
    "RecentOrderResponse",
    "ReportFilter",
    "SalesMetricsResponse",
    "SalesTrendPointResponse",
]
