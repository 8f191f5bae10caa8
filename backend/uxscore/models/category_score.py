"""Category score model: one rubric dimension of one evaluation."""
from sqlalchemy import Column, String, Integer, LargeBinary, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
import uuid
from uxscore.database import Base


class CategoryScore(Base):
    """Score (1-5), comment and optional annotated screenshot."""
    __tablename__ = "category_scores"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    evaluation_id = Column(Uuid, ForeignKey("evaluations.id", ondelete="CASCADE"), nullable=False, index=True)
    # RESTRICT: a category cited by any score cannot be removed
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    score = Column(Integer, nullable=False)
    comment = Column(String(800), nullable=True, default="")
    annotation = Column(String(800), nullable=True, default="")
    screenshot = Column(LargeBinary, nullable=True)

    # Relationships
    evaluation = relationship("Evaluation", back_populates="category_scores")
    category = relationship("Category", back_populates="category_scores")

    __table_args__ = (
        CheckConstraint("score >= 1 AND score <= 5", name="ck_category_scores_score_range"),
    )
