"""API router composition."""

from fastapi import APIRouter

from eelhouse.api.endpoints import customers, menu_items, orders, reports

api_router: APIRouter = APIRouter()
api_router.include_router(menu_items.router, prefix="/menu-items", tags=["menu"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
