"""Sales reporting over placed orders.

Every report first resolves the filter into a UTC time window, loads the orders
placed inside it, and then aggregates them in memory:

* order-level figures (revenue, order count, daily trend) sum the persisted
  ``Order.total`` of the selected orders;
* item-level figures (top seller, popularity) sum ``OrderItem.quantity``.

A category or menu item restriction applies to both levels in the same way:
only qualifying order items are counted, and only orders holding at least one
qualifying item are selected. Ties in quantity keep the item that was seen
first while scanning orders by (order_date, id) and their items by id.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session, selectinload

from eelhouse.core.config import settings
from eelhouse.models.menu import MenuItem
from eelhouse.models.order import Order, OrderItem
from eelhouse.schemas.report import ReportFilter
from eelhouse.services.pricing import quantize_money
from eelhouse.utils.time import days_window, local_date, report_timezone, utc_now

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class ReportWindow:
    """UTC bounds of a report; start is inclusive, end is exclusive."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class ItemSales:
    menu_item: MenuItem
    quantity: int


@dataclass(frozen=True)
class SalesMetrics:
    total_revenue: Decimal
    total_orders: int
    average_order_value: Decimal
    top_selling_item: ItemSales | None


@dataclass(frozen=True)
class SalesTrendPoint:
    date: str
    revenue: Decimal


def _months_before(day: date, months: int) -> date:
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_window(report_filter: ReportFilter, now: datetime | None = None) -> ReportWindow:
    """Turn the filter's date options into a window of whole calendar days."""
    tz = report_timezone()
    today: date = (now or utc_now()).astimezone(tz).date()

    if report_filter.date_range == "today":
        first_day, last_day = today, today
    elif report_filter.date_range == "week":
        first_day, last_day = today - timedelta(days=7), today
    elif report_filter.date_range == "month":
        first_day, last_day = _months_before(today, 1), today
    elif report_filter.start_date is not None:
        first_day = report_filter.start_date
        last_day = report_filter.end_date or today
    else:
        last_day = report_filter.end_date or today
        first_day = last_day - timedelta(days=settings.default_report_days)

    start, end = days_window(first_day, last_day, tz)
    return ReportWindow(start=start, end=end)


def load_orders(db: Session, window: ReportWindow) -> list[Order]:
    """Return orders placed inside the window with their items and menu items."""
    return (
        db.query(Order)
        .options(selectinload(Order.items).selectinload(OrderItem.menu_item))
        .filter(Order.order_date >= window.start, Order.order_date < window.end)
        .order_by(Order.order_date.asc(), Order.id.asc())
        .all()
    )


def item_qualifies(item: OrderItem, report_filter: ReportFilter) -> bool:
    category = report_filter.category_restriction
    if category is not None and item.menu_item.category != category:
        return False
    if report_filter.menu_item_id is not None and item.menu_item_id != report_filter.menu_item_id:
        return False
    return True


def select_orders(orders: Iterable[Order], report_filter: ReportFilter) -> list[Order]:
    """Keep orders holding at least one qualifying item."""
    if not report_filter.restricts_items:
        return list(orders)
    return [order for order in orders if any(item_qualifies(item, report_filter) for item in order.items)]


def rank_items(orders: Iterable[Order], report_filter: ReportFilter) -> list[ItemSales]:
    """Sum quantities per menu item and rank them, most sold first."""
    quantities: dict[int, int] = {}
    menu_items: dict[int, MenuItem] = {}
    for order in orders:
        for item in order.items:
            if not item_qualifies(item, report_filter):
                continue
            quantities[item.menu_item_id] = quantities.get(item.menu_item_id, 0) + item.quantity
            menu_items.setdefault(item.menu_item_id, item.menu_item)

    ranked = [ItemSales(menu_item=menu_items[item_id], quantity=qty) for item_id, qty in quantities.items()]
    # sorted() is stable, so equal quantities stay in first-seen order.
    return sorted(ranked, key=lambda entry: entry.quantity, reverse=True)


def summarize_sales(orders: list[Order], report_filter: ReportFilter) -> SalesMetrics:
    selected = select_orders(orders, report_filter)
    total_revenue = sum((order.total for order in selected), ZERO)
    total_orders = len(selected)
    average = quantize_money(total_revenue / total_orders) if total_orders else ZERO
    ranked = rank_items(selected, report_filter)
    return SalesMetrics(
        total_revenue=quantize_money(total_revenue),
        total_orders=total_orders,
        average_order_value=average,
        top_selling_item=ranked[0] if ranked else None,
    )


def daily_revenue(orders: list[Order], report_filter: ReportFilter) -> list[SalesTrendPoint]:
    """Sum order totals per report-time-zone calendar day, oldest day first."""
    tz = report_timezone()
    revenue: dict[str, Decimal] = {}
    for order in select_orders(orders, report_filter):
        day = local_date(order.order_date, tz).isoformat()
        revenue[day] = revenue.get(day, ZERO) + order.total
    return [SalesTrendPoint(date=day, revenue=quantize_money(revenue[day])) for day in sorted(revenue)]


def compute_sales_metrics(db: Session, report_filter: ReportFilter, now: datetime | None = None) -> SalesMetrics:
    orders = load_orders(db, resolve_window(report_filter, now))
    return summarize_sales(orders, report_filter)


def compute_item_popularity(db: Session, report_filter: ReportFilter, now: datetime | None = None) -> list[ItemSales]:
    orders = load_orders(db, resolve_window(report_filter, now))
    return rank_items(orders, report_filter)


def compute_sales_trend(db: Session, report_filter: ReportFilter, now: datetime | None = None) -> list[SalesTrendPoint]:
    orders = load_orders(db, resolve_window(report_filter, now))
    return daily_revenue(orders, report_filter)
