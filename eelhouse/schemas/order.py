"""Order and customer API schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from eelhouse.schemas.common import CamelModel
from eelhouse.schemas.menu import MenuItemResponse
from eelhouse.services.order_status import OrderStatus
from eelhouse.utils.time import as_utc


class CustomerCreate(CamelModel):
    """Contact and delivery details entered at checkout."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(min_length=1, max_length=32)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1, max_length=128)
    state: str = Field(min_length=1, max_length=64)
    zip: str = Field(min_length=1, max_length=16)


class OrderItemPayload(CamelModel):
    """Single order item payload."""

    menu_item_id: int
    quantity: int = Field(default=1, ge=1)
    special_instructions: str | None = None


class OrderCreate(CamelModel):
    """Checkout payload: customer details plus the cart contents."""

    customer: CustomerCreate
    order_items: list[OrderItemPayload] = Field(min_length=1)
    scheduled_date: datetime | None = None
    delivery_notes: str | None = None

    @field_validator("scheduled_date")
    @classmethod
    def _scheduled_in_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None


class OrderStatusUpdate(CamelModel):
    """Payload for changing an order's status."""

    status: OrderStatus


class CustomerResponse(CamelModel):
    """Serialized customer."""

    id: int
    name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip: str


class OrderResponse(CamelModel):
    """Serialized order row."""

    id: int
    customer_id: int
    order_date: datetime
    scheduled_date: datetime | None
    delivery_notes: str | None
    subtotal: float
    tax: float
    delivery_fee: float
    total: float
    status: str

    @field_validator("order_date", "scheduled_date")
    @classmethod
    def _ensure_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None


class OrderItemResponse(CamelModel):
    """Serialized order item joined with its menu item."""

    id: int
    order_id: int
    menu_item_id: int
    quantity: int
    price: float
    special_instructions: str | None
    menu_item: MenuItemResponse


class OrderDetailResponse(CamelModel):
    """Order together with its customer and line items."""

    order: OrderResponse
    customer: CustomerResponse
    items: list[OrderItemResponse]


class RecentOrderResponse(OrderResponse):
    """Order row flattened with its customer and line items for the staff list."""

    customer: CustomerResponse
    items: list[OrderItemResponse]
