"""Project model grouping the websites under evaluation."""
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
import uuid
from uxscore.database import Base
from uxscore.models.types import CommaSeparatedList
from uxscore.utils.serialization import utcnow


class Project(Base):
    """Project model."""
    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(String(800), nullable=True)
    websites = Column(CommaSeparatedList, nullable=True, default=list)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    created_by = Column(String(200), nullable=True, index=True)
    updated_at = Column(DateTime, nullable=True)
    updated_by = Column(String(200), nullable=True)

    # Relationships
    evaluations = relationship(
        "Evaluation",
        back_populates="project",
        cascade="all, delete-orphan",
    )
