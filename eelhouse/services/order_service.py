"""Order placement, lookup and status updates."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from eelhouse.core.config import settings
from eelhouse.models.customer import Customer
from eelhouse.models.menu import MenuItem
from eelhouse.models.order import Order, OrderItem
from eelhouse.schemas.order import OrderCreate
from eelhouse.services.errors import (
    CustomerNotFoundError,
    InvalidStatusTransitionError,
    MenuItemNotFoundError,
    OrderNotFoundError,
)
from eelhouse.services.menu_service import get_menu_items_by_ids
from eelhouse.services.order_status import can_transition, set_status
from eelhouse.services.pricing import calculate_order_totals

logger = logging.getLogger(__name__)


def _with_details(query):
    return query.options(
        joinedload(Order.customer),
        selectinload(Order.items).joinedload(OrderItem.menu_item),
    )


def place_order(db: Session, payload: OrderCreate) -> Order:
    """Create customer, order and order items as one unit.

    Every referenced menu item is resolved before anything is written, so an
    unknown id leaves no partial rows behind.
    """
    requested_ids: set[int] = {line.menu_item_id for line in payload.order_items}
    menu_items: dict[int, MenuItem] = get_menu_items_by_ids(db, requested_ids)
    for line in payload.order_items:
        if line.menu_item_id not in menu_items:
            raise MenuItemNotFoundError(line.menu_item_id)

    totals = calculate_order_totals(
        (menu_items[line.menu_item_id].price, line.quantity) for line in payload.order_items
    )

    customer = Customer(**payload.customer.model_dump())
    order = Order(
        customer=customer,
        scheduled_date=payload.scheduled_date,
        delivery_notes=payload.delivery_notes,
        subtotal=totals.subtotal,
        tax=totals.tax,
        delivery_fee=totals.delivery_fee,
        total=totals.total,
        status="pending",
    )
    for line in payload.order_items:
        menu_item = menu_items[line.menu_item_id]
        order.items.append(
            OrderItem(
                menu_item=menu_item,
                quantity=line.quantity,
                price=menu_item.price,
                special_instructions=line.special_instructions,
            )
        )

    try:
        db.add(order)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Order %s placed for customer %s: %s items, total %s",
        order.id,
        customer.id,
        len(payload.order_items),
        totals.total,
    )
    return get_order(db, order.id)


def get_order(db: Session, order_id: int) -> Order:
    """Return order with customer and items, or raise OrderNotFoundError."""
    order: Order | None = _with_details(db.query(Order)).filter(Order.id == order_id).first()
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def get_customer(db: Session, customer_id: int) -> Customer:
    customer: Customer | None = db.get(Customer, customer_id)
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    return customer


def list_orders_for_customer(db: Session, customer_id: int) -> list[Order]:
    """Return every order placed under one customer row, oldest first."""
    get_customer(db, customer_id)
    return (
        db.query(Order)
        .filter(Order.customer_id == customer_id)
        .order_by(Order.order_date.asc(), Order.id.asc())
        .all()
    )


def list_recent_orders(db: Session, limit: int) -> list[Order]:
    """Return the newest orders with customer and items, newest first."""
    limit = max(1, min(limit, settings.recent_orders_max))
    return (
        _with_details(db.query(Order))
        .order_by(Order.order_date.desc(), Order.id.desc())
        .limit(limit)
        .all()
    )


def update_order_status(db: Session, order_id: int, new_status: str) -> Order:
    """Write a new status; the last write wins."""
    order: Order | None = db.get(Order, order_id)
    if order is None:
        raise OrderNotFoundError(order_id)

    if settings.strict_status_transitions and not can_transition(order.status, new_status):
        raise InvalidStatusTransitionError(order.status, new_status)

    previous = set_status(order, new_status)
    db.commit()
    db.refresh(order)
    logger.info("Order %s status changed: %s -> %s", order.id, previous, new_status)
    return order
