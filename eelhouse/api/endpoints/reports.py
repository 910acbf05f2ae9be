"""Sales report endpoints for the management dashboard."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eelhouse.db.session import get_db
from eelhouse.schemas.report import (
    ItemPopularityResponse,
    ReportFilter,
    SalesMetricsResponse,
    SalesTrendPointResponse,
)
from eelhouse.services.report_service import compute_item_popularity, compute_sales_metrics, compute_sales_trend

router: APIRouter = APIRouter()


@router.post("/sales-metrics", response_model=SalesMetricsResponse)
def sales_metrics(report_filter: ReportFilter, db: Session = Depends(get_db)) -> SalesMetricsResponse:
    """Revenue, order count, average order value and top seller."""
    return SalesMetricsResponse.model_validate(compute_sales_metrics(db, report_filter))


@router.post("/item-popularity", response_model=list[ItemPopularityResponse])
def item_popularity(report_filter: ReportFilter, db: Session = Depends(get_db)) -> list[ItemPopularityResponse]:
    """Menu items ranked by quantity sold."""
    return [ItemPopularityResponse.model_validate(entry) for entry in compute_item_popularity(db, report_filter)]


@router.post("/sales-trend", response_model=list[SalesTrendPointResponse])
def sales_trend(report_filter: ReportFilter, db: Session = Depends(get_db)) -> list[SalesTrendPointResponse]:
    """Revenue per calendar day, oldest first."""
    return [SalesTrendPointResponse.model_validate(point) for point in compute_sales_trend(db, report_filter)]
