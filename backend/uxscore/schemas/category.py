"""Schemas for evaluation categories."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from uxscore.constants import CATEGORY_NAME_MAX, CATEGORY_DESCRIPTION_MAX
from uxscore.models import Category


class CategoryCreate(BaseModel):
    """Body for creating or updating a category."""
    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX)
    description: Optional[str] = Field(None, max_length=CATEGORY_DESCRIPTION_MAX)
    isActive: bool = True
    displayOrder: int = Field(0, ge=-32768, le=32767)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Category name is required")
        return value


class CategoryPublic(BaseModel):
    """Active category as shown to evaluators."""
    id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_orm(cls, obj: Category) -> "CategoryPublic":
        return cls(id=str(obj.id), name=obj.name, description=obj.description)


class CategoryResponse(BaseModel):
    """Full category as shown to administrators."""
    id: str
    name: str
    description: Optional[str] = None
    isActive: bool
    displayOrder: int

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj: Category) -> "CategoryResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=str(obj.id),
            name=obj.name,
            description=obj.description,
            isActive=obj.is_active,
            displayOrder=obj.display_order,
        )
