"""Reporting API schemas."""

from datetime import date
from typing import Literal

from pydantic import model_validator

from eelhouse.schemas.common import CamelModel
from eelhouse.schemas.menu import MenuItemResponse

ALL_CATEGORIES = "all"


class ReportFilter(CamelModel):
    """Date window and item restriction shared by every report."""

    date_range: Literal["today", "week", "month", "custom"] | None = None
    start_date: date | None = None
    end_date: date | None = None
    category: str | None = None
    menu_item_id: int | None = None

    @model_validator(mode="after")
    def _check_date_order(self) -> "ReportFilter":
        if self.start_date is not None and self.end_date is not None and self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self

    @property
    def category_restriction(self) -> str | None:
        """Return the category to keep, or None when every category counts."""
        if self.category is None or self.category == ALL_CATEGORIES:
            return None
        return self.category

    @property
    def restricts_items(self) -> bool:
        return self.category_restriction is not None or self.menu_item_id is not None


class ItemPopularityResponse(CamelModel):
    """Menu item with the quantity sold in the report window."""

    menu_item: MenuItemResponse
    quantity: int


class SalesMetricsResponse(CamelModel):
    """Headline sales figures for the report window."""

    total_revenue: float
    total_orders: int
    average_order_value: float
    top_selling_item: ItemPopularityResponse | None


class SalesTrendPointResponse(CamelModel):
    """Revenue for one calendar day."""

    date: str
    revenue: float
