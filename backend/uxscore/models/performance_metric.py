"""Performance metric model for browser-measured page timings."""
from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint, Uuid
import uuid
from uxscore.database import Base
from uxscore.utils.serialization import utcnow


class PerformanceMetric(Base):
    """Performance sample; independent of projects."""
    __tablename__ = "performance_metrics"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    website_url = Column(String(2000), nullable=False)
    load_time_ms = Column(Integer, nullable=False, default=0)
    response_time_ms = Column(Integer, nullable=False, default=0)
    dom_content_loaded_ms = Column(Integer, nullable=False, default=0)
    first_paint_ms = Column(Integer, nullable=False, default=0)
    performance_score = Column(Integer, nullable=False, default=0)
    test_date = Column(DateTime, nullable=False, default=utcnow)
    test_location = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    created_by = Column(String(200), nullable=True, index=True)
    updated_at = Column(DateTime, nullable=True)
    updated_by = Column(String(200), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "performance_score >= 0 AND performance_score <= 100",
            name="ck_performance_metrics_score_range",
        ),
    )
