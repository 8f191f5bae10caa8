"""Evaluation model: one reviewer's pass over one website."""
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid
from uxscore.database import Base
from uxscore.utils.serialization import utcnow


class Evaluation(Base):
    """Evaluation header; owns its category scores."""
    __tablename__ = "evaluations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    website_url = Column(String(200), nullable=False)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    created_by = Column(String(200), nullable=True, index=True)
    updated_at = Column(DateTime, nullable=True)
    updated_by = Column(String(200), nullable=True)

    # Relationships
    project = relationship("Project", back_populates="evaluations")
    category_scores = relationship(
        "CategoryScore",
        back_populates="evaluation",
        cascade="all, delete-orphan",
    )
