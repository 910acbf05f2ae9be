"""Order endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from eelhouse.db.session import get_db
from eelhouse.models.order import Order
from eelhouse.schemas.order import (
    CustomerResponse,
    OrderCreate,
    OrderDetailResponse,
    OrderItemResponse,
    OrderResponse,
    OrderStatusUpdate,
    RecentOrderResponse,
)
from eelhouse.services.errors import InvalidStatusTransitionError, MenuItemNotFoundError, OrderNotFoundError
from eelhouse.services.order_service import get_order, list_recent_orders, place_order, update_order_status

router: APIRouter = APIRouter()


def _serialize_order_detail(order: Order) -> OrderDetailResponse:
    return OrderDetailResponse(
        order=OrderResponse.model_validate(order),
        customer=CustomerResponse.model_validate(order.customer),
        items=[OrderItemResponse.model_validate(item) for item in order.items],
    )


@router.post("", response_model=OrderDetailResponse, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)) -> OrderDetailResponse:
    """Place a delivery order for a new customer row."""
    try:
        order = place_order(db, payload)
    except MenuItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_order_detail(order)


@router.get("/recent/{limit}", response_model=list[RecentOrderResponse])
def get_recent_orders(limit: int = Path(ge=1), db: Session = Depends(get_db)) -> list[Order]:
    """Return the newest orders with customer and items for the staff dashboard."""
    return list_recent_orders(db, limit)


@router.get("/{order_id}", response_model=OrderDetailResponse)
def get_order_detail(order_id: int, db: Session = Depends(get_db)) -> OrderDetailResponse:
    try:
        order = get_order(db, order_id)
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found") from exc
    return _serialize_order_detail(order)


@router.patch("/{order_id}/status", response_model=OrderResponse)
def change_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
) -> Order:
    """Set an order's status."""
    try:
        return update_order_status(db, order_id, payload.status)
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found") from exc
    except InvalidStatusTransitionError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
