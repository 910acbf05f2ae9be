"""Sales report aggregation tests."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from eelhouse.core.config import settings
from eelhouse.db.base import Base
from eelhouse.db.seed import ensure_menu_seeded
from eelhouse.models import Customer, MenuItem, Order, OrderItem
from eelhouse.schemas.report import ReportFilter
from eelhouse.services.report_service import (
    compute_item_popularity,
    compute_sales_metrics,
    compute_sales_trend,
    resolve_window,
)

NOW = datetime(2024, 6, 15, 14, 30, tzinfo=timezone.utc)


def _utc(*parts: int) -> datetime:
    return datetime(*parts, tzinfo=timezone.utc)


@pytest.fixture()
def db(tmp_path: Path) -> Session:
    engine = create_engine(f"sqlite:///{tmp_path / 'reports.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    session: Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    ensure_menu_seeded(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def _menu(db: Session, name: str) -> MenuItem:
    return db.query(MenuItem).filter(MenuItem.name == name).one()


def _add_order(db: Session, placed_at: datetime, lines: list[tuple[MenuItem, int]], total: str | None = None) -> Order:
    subtotal = sum((item.price * quantity for item, quantity in lines), Decimal("0.00"))
    order = Order(
        customer=Customer(
            name="Pat Doe",
            email="pat@example.com",
            phone="555-0100",
            address="1 River Rd",
            city="Alexandria",
            state="VA",
            zip="22314",
        ),
        order_date=placed_at,
        subtotal=subtotal,
        tax=Decimal("0.00"),
        delivery_fee=Decimal("0.00"),
        total=Decimal(total) if total is not None else subtotal,
        status="pending",
    )
    for item, quantity in lines:
        order.items.append(OrderItem(menu_item=item, quantity=quantity, price=item.price))
    db.add(order)
    db.commit()
    return order


def test_empty_window_reports_zero_without_errors(db: Session) -> None:
    report_filter = ReportFilter(date_range="today")

    metrics = compute_sales_metrics(db, report_filter, now=NOW)

    assert metrics.total_orders == 0
    assert metrics.total_revenue == Decimal("0.00")
    assert metrics.average_order_value == Decimal("0.00")
    assert metrics.top_selling_item is None
    assert compute_item_popularity(db, report_filter, now=NOW) == []
    assert compute_sales_trend(db, report_filter, now=NOW) == []


def test_today_range_ignores_yesterdays_order(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    sake = _menu(db, "Hot Sake")
    _add_order(db, _utc(2024, 6, 14, 23, 59, 59), [(smoked, 5)], total="84.95")
    _add_order(db, _utc(2024, 6, 15, 9, 0), [(sake, 2)], total="17.98")

    metrics = compute_sales_metrics(db, ReportFilter(date_range="today"), now=NOW)

    assert metrics.total_orders == 1
    assert metrics.total_revenue == Decimal("17.98")
    assert metrics.average_order_value == Decimal("17.98")
    assert metrics.top_selling_item is not None
    assert metrics.top_selling_item.menu_item.name == "Hot Sake"
    assert metrics.top_selling_item.quantity == 2


def test_custom_window_includes_both_boundary_days(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    _add_order(db, _utc(2024, 6, 9, 23, 59, 59, 999999), [(smoked, 1)], total="1.00")
    _add_order(db, _utc(2024, 6, 10, 0, 0, 0), [(smoked, 1)], total="2.00")
    _add_order(db, _utc(2024, 6, 12, 23, 59, 59), [(smoked, 1)], total="4.00")
    _add_order(db, _utc(2024, 6, 13, 0, 0, 0), [(smoked, 1)], total="8.00")

    report_filter = ReportFilter(date_range="custom", start_date=date(2024, 6, 10), end_date=date(2024, 6, 12))
    metrics = compute_sales_metrics(db, report_filter, now=NOW)

    assert metrics.total_orders == 2
    assert metrics.total_revenue == Decimal("6.00")
    assert metrics.average_order_value == Decimal("3.00")


def test_popularity_without_restriction_counts_every_item_in_window(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    grilled = _menu(db, "Grilled Eel")
    beer = _menu(db, "Fat Tire Beer")
    _add_order(db, _utc(2024, 6, 13, 12), [(smoked, 2), (beer, 3)])
    _add_order(db, _utc(2024, 6, 14, 12), [(grilled, 1), (beer, 1)])
    _add_order(db, _utc(2024, 5, 1, 12), [(grilled, 10)])

    report_filter = ReportFilter(date_range="week")
    popularity = compute_item_popularity(db, report_filter, now=NOW)

    assert [(entry.menu_item.name, entry.quantity) for entry in popularity] == [
        ("Fat Tire Beer", 4),
        ("Smoked Eel", 2),
        ("Grilled Eel", 1),
    ]
    assert sum(entry.quantity for entry in popularity) == 2 + 3 + 1 + 1


def test_beverage_popularity_lists_only_beverages_ranked(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    beer = _menu(db, "Fat Tire Beer")
    sake = _menu(db, "Hot Sake")
    _add_order(db, _utc(2024, 6, 15, 10), [(smoked, 9), (beer, 1)])
    _add_order(db, _utc(2024, 6, 15, 11), [(sake, 3)])

    popularity = compute_item_popularity(db, ReportFilter(date_range="today", category="beverage"), now=NOW)

    assert [(entry.menu_item.name, entry.quantity) for entry in popularity] == [("Hot Sake", 3), ("Fat Tire Beer", 1)]
    assert all(entry.menu_item.category == "beverage" for entry in popularity)


def test_category_restriction_selects_orders_holding_a_matching_item(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    beer = _menu(db, "Fat Tire Beer")
    _add_order(db, _utc(2024, 6, 15, 10), [(smoked, 4)], total="70.00")
    _add_order(db, _utc(2024, 6, 15, 11), [(smoked, 1), (beer, 2)], total="35.00")

    report_filter = ReportFilter(date_range="today", category="beverage")
    metrics = compute_sales_metrics(db, report_filter, now=NOW)
    trend = compute_sales_trend(db, report_filter, now=NOW)

    assert metrics.total_orders == 1
    assert metrics.total_revenue == Decimal("35.00")
    assert metrics.top_selling_item is not None
    assert metrics.top_selling_item.menu_item.name == "Fat Tire Beer"
    assert metrics.top_selling_item.quantity == 2
    assert [(point.date, point.revenue) for point in trend] == [("2024-06-15", Decimal("35.00"))]


def test_all_category_means_no_restriction(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    beer = _menu(db, "Fat Tire Beer")
    _add_order(db, _utc(2024, 6, 15, 10), [(smoked, 1)], total="10.00")
    _add_order(db, _utc(2024, 6, 15, 11), [(beer, 1)], total="20.00")

    metrics = compute_sales_metrics(db, ReportFilter(date_range="today", category="all"), now=NOW)

    assert metrics.total_orders == 2
    assert metrics.total_revenue == Decimal("30.00")


def test_menu_item_restriction_counts_only_that_item(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    fried = _menu(db, "Fried Eel")
    _add_order(db, _utc(2024, 6, 15, 10), [(smoked, 5), (fried, 1)])
    _add_order(db, _utc(2024, 6, 15, 11), [(smoked, 7)])

    report_filter = ReportFilter(date_range="today", menu_item_id=fried.id)
    metrics = compute_sales_metrics(db, report_filter, now=NOW)
    popularity = compute_item_popularity(db, report_filter, now=NOW)

    assert metrics.total_orders == 1
    assert metrics.top_selling_item is not None
    assert metrics.top_selling_item.menu_item.id == fried.id
    assert [(entry.menu_item.id, entry.quantity) for entry in popularity] == [(fried.id, 1)]


def test_top_seller_tie_goes_to_first_seen_item(db: Session) -> None:
    baked = _menu(db, "Baked Eel")
    sushi = _menu(db, "Eel Sushi")
    _add_order(db, _utc(2024, 6, 15, 8), [(sushi, 2)])
    _add_order(db, _utc(2024, 6, 15, 9), [(baked, 2)])

    metrics = compute_sales_metrics(db, ReportFilter(date_range="today"), now=NOW)
    popularity = compute_item_popularity(db, ReportFilter(date_range="today"), now=NOW)

    assert metrics.top_selling_item is not None
    assert metrics.top_selling_item.menu_item.name == "Eel Sushi"
    assert [entry.menu_item.name for entry in popularity] == ["Eel Sushi", "Baked Eel"]


def test_sales_trend_sums_totals_per_day_in_date_order(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    _add_order(db, _utc(2024, 6, 14, 18), [(smoked, 1)], total="10.00")
    _add_order(db, _utc(2024, 6, 12, 9), [(smoked, 1)], total="5.50")
    _add_order(db, _utc(2024, 6, 14, 7), [(smoked, 1)], total="2.25")
    _add_order(db, _utc(2024, 6, 12, 23, 59), [(smoked, 1)], total="1.00")

    trend = compute_sales_trend(db, ReportFilter(date_range="week"), now=NOW)

    assert [(point.date, point.revenue) for point in trend] == [
        ("2024-06-12", Decimal("6.50")),
        ("2024-06-14", Decimal("12.25")),
    ]
    dates = [point.date for point in trend]
    assert dates == sorted(dates)


def test_average_order_value_is_rounded_to_cents(db: Session) -> None:
    smoked = _menu(db, "Smoked Eel")
    for total in ("10.00", "10.00", "10.01"):
        _add_order(db, _utc(2024, 6, 15, 10), [(smoked, 1)], total=total)

    metrics = compute_sales_metrics(db, ReportFilter(date_range="today"), now=NOW)

    assert metrics.total_revenue == Decimal("30.01")
    assert metrics.average_order_value == Decimal("10.00")


def test_today_window_spans_whole_day() -> None:
    window = resolve_window(ReportFilter(date_range="today"), now=NOW)

    assert window.start == _utc(2024, 6, 15)
    assert window.end == _utc(2024, 6, 16)


def test_week_window_starts_seven_days_back_at_midnight() -> None:
    window = resolve_window(ReportFilter(date_range="week"), now=NOW)

    assert window.start == _utc(2024, 6, 8)
    assert window.end == _utc(2024, 6, 16)


def test_month_window_clamps_to_shorter_month() -> None:
    window = resolve_window(ReportFilter(date_range="month"), now=_utc(2024, 3, 31, 12))

    assert window.start == _utc(2024, 2, 29)
    assert window.end == _utc(2024, 4, 1)


def test_month_window_crosses_year_boundary() -> None:
    window = resolve_window(ReportFilter(date_range="month"), now=_utc(2024, 1, 10, 12))

    assert window.start == _utc(2023, 12, 10)


def test_start_date_without_end_runs_through_today() -> None:
    window = resolve_window(ReportFilter(start_date=date(2024, 6, 1)), now=NOW)

    assert window.start == _utc(2024, 6, 1)
    assert window.end == _utc(2024, 6, 16)


def test_missing_dates_default_to_trailing_thirty_days() -> None:
    window = resolve_window(ReportFilter(), now=NOW)

    assert window.start == _utc(2024, 6, 15) - timedelta(days=30)
    assert window.end == _utc(2024, 6, 16)


def test_custom_range_without_start_date_uses_default_window() -> None:
    window = resolve_window(ReportFilter(date_range="custom", end_date=date(2024, 6, 1)), now=NOW)

    assert window.start == _utc(2024, 5, 2)
    assert window.end == _utc(2024, 6, 2)


def test_filter_rejects_start_after_end() -> None:
    with pytest.raises(ValueError):
        ReportFilter(start_date=date(2024, 6, 2), end_date=date(2024, 6, 1))


def test_report_timezone_moves_day_boundaries(monkeypatch) -> None:
    monkeypatch.setattr(settings, "report_timezone", "America/New_York")

    window = resolve_window(ReportFilter(date_range="today"), now=_utc(2024, 6, 15, 2))

    assert window.start == _utc(2024, 6, 14, 4)
    assert window.end == _utc(2024, 6, 15, 4)


def test_trend_groups_by_report_timezone_date(db: Session, monkeypatch) -> None:
    monkeypatch.setattr(settings, "report_timezone", "America/New_York")
    smoked = _menu(db, "Smoked Eel")
    _add_order(db, _utc(2024, 6, 15, 2), [(smoked, 1)], total="12.00")
    _add_order(db, _utc(2024, 6, 15, 3, 59), [(smoked, 1)], total="3.00")
    _add_order(db, _utc(2024, 6, 15, 4), [(smoked, 1)], total="7.00")

    now = _utc(2024, 6, 15, 2)
    trend = compute_sales_trend(db, ReportFilter(date_range="today"), now=now)
    metrics = compute_sales_metrics(db, ReportFilter(date_range="today"), now=now)

    assert [(point.date, point.revenue) for point in trend] == [("2024-06-14", Decimal("15.00"))]
    assert metrics.total_orders == 2
