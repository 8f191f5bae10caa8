"""Category model for rubric dimensions."""
from sqlalchemy import Column, String, Integer, Boolean, Uuid, true
from sqlalchemy.orm import relationship
import uuid
from uxscore.database import Base


class Category(Base):
    """Evaluation category definition."""
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(String(800), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    display_order = Column(Integer, nullable=False, default=0)

    # No delete cascade: historical scores keep the category alive
    category_scores = relationship("CategoryScore", back_populates="category", passive_deletes="all")
