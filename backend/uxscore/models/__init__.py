"""Models package."""
from uxscore.models.project import Project
from uxscore.models.evaluation import Evaluation
from uxscore.models.category import Category
from uxscore.models.category_score import CategoryScore
from uxscore.models.performance_metric import PerformanceMetric
from uxscore.models.user import User, Role, user_roles

__all__ = [
    "Project",
    "Evaluation",
    "Category",
    "CategoryScore",
    "PerformanceMetric",
    "User",
    "Role",
    "user_roles",
]
