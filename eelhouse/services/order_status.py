"""Order status values and transition helpers."""

from __future__ import annotations

from typing import Literal, get_args

from eelhouse.models.order import Order

OrderStatus = Literal["pending", "preparing", "in-transit", "ready", "delivered", "cancelled"]

ORDER_STATUSES: tuple[str, ...] = get_args(OrderStatus)

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"preparing", "cancelled"},
    "preparing": {"in-transit", "ready", "cancelled"},
    "in-transit": {"delivered"},
    "ready": {"delivered"},
    "delivered": set(),
    "cancelled": set(),
}


def can_transition(current: str, new: str) -> bool:
    """Return whether order can move from current to new status."""
    if current == new:
        return True
    return new in ALLOWED_TRANSITIONS.get(current, set())


def set_status(order: Order, new_status: str) -> str:
    """Set status and return the previous one."""
    previous = order.status
    order.status = new_status
    return previous
