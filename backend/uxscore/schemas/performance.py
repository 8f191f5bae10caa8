"""Schemas for performance metrics."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from uxscore.constants import METRIC_URL_MAX, TEST_LOCATION_MAX
from uxscore.models import PerformanceMetric
from uxscore.utils.serialization import serialize_datetime


class PerformanceMetricCreate(BaseModel):
    """Sample submitted by the browser probe."""
    websiteUrl: str = Field(..., min_length=1, max_length=METRIC_URL_MAX)
    loadTimeMs: int = Field(0, ge=0)
    responseTimeMs: int = Field(0, ge=0)
    domContentLoadedMs: int = Field(0, ge=0)
    firstPaintMs: int = Field(0, ge=0)
    performanceScore: int = Field(0, ge=0, le=100)
    testDate: Optional[datetime] = None
    testLocation: Optional[str] = Field(None, max_length=TEST_LOCATION_MAX)


class PerformanceMetricResponse(BaseModel):
    id: str
    websiteUrl: str
    loadTimeMs: int
    responseTimeMs: int
    domContentLoadedMs: int
    firstPaintMs: int
    performanceScore: int
    testDate: Optional[str] = None
    testLocation: Optional[str] = None
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj: PerformanceMetric) -> "PerformanceMetricResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=str(obj.id),
            websiteUrl=obj.website_url,
            loadTimeMs=obj.load_time_ms,
            responseTimeMs=obj.response_time_ms,
            domContentLoadedMs=obj.dom_content_loaded_ms,
            firstPaintMs=obj.first_paint_ms,
            performanceScore=obj.performance_score,
            testDate=serialize_datetime(obj.test_date),
            testLocation=obj.test_location,
            createdAt=serialize_datetime(obj.created_at),
            createdBy=obj.created_by,
        )
