"""Domain errors raised by service functions and mapped to HTTP by the API."""


class MenuItemNotFoundError(Exception):
    """Raised when an order references a menu item that does not exist."""

    def __init__(self, menu_item_id: int) -> None:
        super().__init__(f"Menu item with ID {menu_item_id} not found")
        self.menu_item_id = menu_item_id


class OrderNotFoundError(Exception):
    """Raised when an order id does not exist."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class CustomerNotFoundError(Exception):
    """Raised when a customer id does not exist."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class InvalidStatusTransitionError(Exception):
    """Raised when strict transitions are on and the requested move is not allowed."""

    def __init__(self, current: str, new: str) -> None:
        super().__init__(f"Cannot change order status from '{current}' to '{new}'")
        self.current = current
        self.new = new
