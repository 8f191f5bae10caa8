"""Performance metric endpoints."""
import uuid
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from uxscore.auth.caller import CallerContext, get_caller
from uxscore.database import get_db
from uxscore.models import PerformanceMetric
from uxscore.schemas.performance import PerformanceMetricCreate, PerformanceMetricResponse
from uxscore.utils.db import get_visible, visible_to
from uxscore.utils.exceptions import handle_database_error
from uxscore.utils.logger import logger
from uxscore.utils.serialization import to_naive_utc, utcnow

router = APIRouter(prefix="/api/performance", tags=["performance"])


@router.get("", response_model=list[PerformanceMetricResponse])
async def get_performance_metrics(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[PerformanceMetricResponse]:
    """Visible performance samples, most recent test first."""
    metrics = (
        visible_to(db.query(PerformanceMetric), PerformanceMetric, caller)
        .order_by(PerformanceMetric.test_date.desc())
        .all()
    )
    return [PerformanceMetricResponse.from_orm(m) for m in metrics]


@router.get("/{metric_id}", response_model=PerformanceMetricResponse)
async def get_performance_metric(
    metric_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> PerformanceMetricResponse:
    metric = get_visible(db, PerformanceMetric, metric_id, caller, "Performance metric")
    return PerformanceMetricResponse.from_orm(metric)


@router.post("", response_model=PerformanceMetricResponse, status_code=status.HTTP_201_CREATED)
async def create_performance_metric(
    payload: PerformanceMetricCreate,
    response: Response,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> PerformanceMetricResponse:
    """
    Record a browser-measured performance sample.

    Args:
        payload: Timings and score measured by the client
        response: Used to set the Location header
        db: Database session
        caller: Authenticated caller

    Returns:
        Stored sample
    """
    now = utcnow()
    try:
        metric = PerformanceMetric(
            id=uuid.uuid4(),
            website_url=payload.websiteUrl,
            load_time_ms=payload.loadTimeMs,
            response_time_ms=payload.responseTimeMs,
            dom_content_loaded_ms=payload.domContentLoadedMs,
            first_paint_ms=payload.firstPaintMs,
            performance_score=payload.performanceScore,
            test_date=to_naive_utc(payload.testDate) or now,
            test_location=payload.testLocation or "Unknown",
            created_at=now,
            created_by=caller.username,
            updated_at=now,
            updated_by=caller.username,
        )
        db.add(metric)
        db.commit()
        db.refresh(metric)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create performance metric: {e}", exc_info=True)
        raise handle_database_error(e, "create_performance_metric")

    response.headers["Location"] = f"/api/performance/{metric.id}"
    return PerformanceMetricResponse.from_orm(metric)


@router.delete("/{metric_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_performance_metric(
    metric_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> Response:
    metric = get_visible(db, PerformanceMetric, metric_id, caller, "Performance metric")

    try:
        db.delete(metric)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete performance metric {metric_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_performance_metric")

    logger.info(f"Deleted performance metric {metric_id} by {caller.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
