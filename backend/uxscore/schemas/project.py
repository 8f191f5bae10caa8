"""Schemas for projects and their websites."""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from uxscore.constants import PROJECT_NAME_MAX, PROJECT_DESCRIPTION_MAX
from uxscore.models import Evaluation, Project
from uxscore.utils.serialization import serialize_datetime


class ProjectCreate(BaseModel):
    """Body for creating or updating a project."""
    name: str = Field(..., min_length=1, max_length=PROJECT_NAME_MAX)
    description: Optional[str] = Field(None, max_length=PROJECT_DESCRIPTION_MAX)
    websites: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Project name is required")
        return value

    @field_validator("websites")
    @classmethod
    def websites_storable(cls, value: Optional[List[str]]) -> List[str]:
        """Drop blank entries and reject URLs the comma-joined column cannot hold."""
        cleaned = []
        for url in value or []:
            url = url.strip()
            if not url:
                continue
            if "," in url:
                raise ValueError(f"Website URL must not contain commas: {url}")
            cleaned.append(url)
        return cleaned


class EvaluationSummary(BaseModel):
    id: str
    websiteUrl: str
    notes: Optional[str] = None
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None

    @classmethod
    def from_orm(cls, obj: Evaluation) -> "EvaluationSummary":
        return cls(
            id=str(obj.id),
            websiteUrl=obj.website_url,
            notes=obj.notes,
            createdAt=serialize_datetime(obj.created_at),
            createdBy=obj.created_by,
        )


class ProjectResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    websites: List[str]
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None
    updatedAt: Optional[str] = None
    updatedBy: Optional[str] = None
    evaluations: List[EvaluationSummary] = []

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj: Project) -> "ProjectResponse":
        """Convert SQLAlchemy model to response model."""
        evaluations = sorted(obj.evaluations, key=lambda e: e.created_at, reverse=True)
        return cls(
            id=str(obj.id),
            name=obj.name,
            description=obj.description,
            websites=list(obj.websites or []),
            createdAt=serialize_datetime(obj.created_at),
            createdBy=obj.created_by,
            updatedAt=serialize_datetime(obj.updated_at),
            updatedBy=obj.updated_by,
            evaluations=[EvaluationSummary.from_orm(e) for e in evaluations],
        )


class WebsiteItem(BaseModel):
    """One website of a project, flattened."""
    id: str
    url: str
    projectName: str
