"""Pydantic schemas for request/response validation."""
from uxscore.schemas.auth import LoginRequest, LoginResponse
from uxscore.schemas.category import CategoryCreate, CategoryPublic, CategoryResponse
from uxscore.schemas.evaluation import EvaluationResponse, EvaluationCreatedResponse
from uxscore.schemas.performance import PerformanceMetricCreate, PerformanceMetricResponse
from uxscore.schemas.project import ProjectCreate, ProjectResponse, WebsiteItem
from uxscore.schemas.report import ReportRow, ReportProject
from uxscore.schemas.user import CreateUserRequest, UpdateUserRequest, UserView, UpdatedUserResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "CategoryCreate",
    "CategoryPublic",
    "CategoryResponse",
    "EvaluationResponse",
    "EvaluationCreatedResponse",
    "PerformanceMetricCreate",
    "PerformanceMetricResponse",
    "ProjectCreate",
    "ProjectResponse",
    "WebsiteItem",
    "ReportRow",
    "ReportProject",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserView",
    "UpdatedUserResponse",
]
