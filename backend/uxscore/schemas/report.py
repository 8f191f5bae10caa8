"""Report row shape shared by the JSON, CSV and PDF renderers."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, field_serializer

from uxscore.utils.serialization import serialize_datetime


class ReportCategoryScore(BaseModel):
    id: str
    category: str
    score: int
    comment: Optional[str] = None


class ReportScreenshot(BaseModel):
    id: str
    category: str
    comment: Optional[str] = None  # the score's annotation
    screenshot: str  # base64


class ReportRow(BaseModel):
    """One evaluation with its project context and ordered scores."""
    evaluationId: str
    projectId: str
    projectName: str
    projectDescription: Optional[str] = None
    projectWebsites: List[str] = []
    websiteUrl: str
    notes: Optional[str] = None
    createdAt: datetime
    userId: Optional[str] = None
    averageScore: float
    categoryScores: List[ReportCategoryScore] = []
    screenshotAnnotations: List[ReportScreenshot] = []

    @field_serializer("createdAt")
    def serialize_created_at(self, value: datetime) -> str:
        # Stored timestamps are naive UTC
        return serialize_datetime(value)


class ReportProject(BaseModel):
    """Project choice for the report filter."""
    id: str
    name: str
