"""Customer endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eelhouse.db.session import get_db
from eelhouse.models.customer import Customer
from eelhouse.models.order import Order
from eelhouse.schemas.order import CustomerResponse, OrderResponse
from eelhouse.services.errors import CustomerNotFoundError
from eelhouse.services.order_service import get_customer, list_orders_for_customer

router: APIRouter = APIRouter()


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer_detail(customer_id: int, db: Session = Depends(get_db)) -> Customer:
    try:
        return get_customer(db, customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc


@router.get("/{customer_id}/orders", response_model=list[OrderResponse])
def get_customer_orders(customer_id: int, db: Session = Depends(get_db)) -> list[Order]:
    """Return orders placed under one customer row."""
    try:
        return list_orders_for_customer(db, customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
