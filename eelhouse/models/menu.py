"""Menu ORM models."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eelhouse.db.base import Base


class MenuItem(Base):
    """Dish or drink offered on the menu; seeded once and read-only afterwards."""

    __tablename__ = "menu_items"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_menu_items_price_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    order_items: Mapped[list["OrderItem"]] = relationship(back_populates="menu_item")
