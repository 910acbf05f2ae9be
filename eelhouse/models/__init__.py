"""Application models package."""

from eelhouse.models.customer import Customer
from eelhouse.models.menu import MenuItem
from eelhouse.models.order import Order, OrderItem

__all__ = ["Customer", "MenuItem", "Order", "OrderItem"]
