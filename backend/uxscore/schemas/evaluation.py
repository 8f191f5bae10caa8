"""Schemas for evaluations and their category scores."""
from typing import List, Optional
from pydantic import BaseModel

from uxscore.models import CategoryScore, Evaluation
from uxscore.utils.serialization import encode_blob, serialize_datetime


class CategoryScoreResponse(BaseModel):
    id: str
    categoryId: str
    score: int
    comment: Optional[str] = None
    annotation: Optional[str] = None
    screenshot: Optional[str] = None  # base64

    @classmethod
    def from_orm(cls, obj: CategoryScore) -> "CategoryScoreResponse":
        return cls(
            id=str(obj.id),
            categoryId=str(obj.category_id),
            score=obj.score,
            comment=obj.comment,
            annotation=obj.annotation,
            screenshot=encode_blob(obj.screenshot),
        )


class EvaluationResponse(BaseModel):
    id: str
    projectId: str
    websiteUrl: str
    notes: Optional[str] = None
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None
    updatedAt: Optional[str] = None
    updatedBy: Optional[str] = None
    categoryScores: List[CategoryScoreResponse] = []

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj: Evaluation) -> "EvaluationResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=str(obj.id),
            projectId=str(obj.project_id),
            websiteUrl=obj.website_url,
            notes=obj.notes,
            createdAt=serialize_datetime(obj.created_at),
            createdBy=obj.created_by,
            updatedAt=serialize_datetime(obj.updated_at),
            updatedBy=obj.updated_by,
            categoryScores=[CategoryScoreResponse.from_orm(cs) for cs in obj.category_scores],
        )


class EvaluationCreatedResponse(BaseModel):
    """Header echoed back after a successful create."""
    id: str
    projectId: str
    websiteUrl: str
    notes: Optional[str] = None
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None

    @classmethod
    def from_orm(cls, obj: Evaluation) -> "EvaluationCreatedResponse":
        return cls(
            id=str(obj.id),
            projectId=str(obj.project_id),
            websiteUrl=obj.website_url,
            notes=obj.notes,
            createdAt=serialize_datetime(obj.created_at),
            createdBy=obj.created_by,
        )
