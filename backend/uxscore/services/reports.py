"""Evaluation report aggregation."""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session, selectinload

from uxscore.auth.caller import CallerContext
from uxscore.constants import UNKNOWN_CATEGORY_NAME
from uxscore.models import CategoryScore, Evaluation, Project
from uxscore.schemas.report import ReportCategoryScore, ReportProject, ReportRow, ReportScreenshot
from uxscore.utils.db import visible_to
from uxscore.utils.serialization import encode_blob, to_naive_utc


@dataclass
class ReportFilter:
    """Report narrowing; both date bounds are inclusive."""
    project_id: Optional[uuid.UUID] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


def average_score(scores: Iterable[int]) -> float:
    """Mean of the scores rounded to one decimal, or 0 for no scores."""
    values = list(scores)
    if not values:
        return 0.0
    return round(sum(values) / len(values), 1)


def _display_order(score: CategoryScore) -> int:
    # Scores whose category vanished sort last
    return score.category.display_order if score.category is not None else 2 ** 31


def _category_name(score: CategoryScore) -> str:
    return score.category.name if score.category is not None else UNKNOWN_CATEGORY_NAME


def _own_evaluation(evaluation: Evaluation, caller: CallerContext) -> bool:
    return caller.is_admin or evaluation.created_by == caller.username


def _in_range(evaluation: Evaluation, report_filter: ReportFilter) -> bool:
    start = to_naive_utc(report_filter.start_date)
    end = to_naive_utc(report_filter.end_date)
    if start is not None and evaluation.created_at < start:
        return False
    if end is not None and evaluation.created_at > end:
        return False
    return True


def build_report_row(project: Project, evaluation: Evaluation) -> ReportRow:
    """Project one evaluation and its project into a report row."""
    ordered = sorted(evaluation.category_scores, key=_display_order)
    return ReportRow(
        evaluationId=str(evaluation.id),
        projectId=str(project.id),
        projectName=project.name,
        projectDescription=project.description,
        projectWebsites=list(project.websites or []),
        websiteUrl=evaluation.website_url,
        notes=evaluation.notes,
        createdAt=evaluation.created_at,
        userId=evaluation.created_by,
        averageScore=average_score(cs.score for cs in evaluation.category_scores),
        categoryScores=[
            ReportCategoryScore(id=str(cs.id), category=_category_name(cs), score=cs.score, comment=cs.comment)
            for cs in ordered
        ],
        screenshotAnnotations=[
            ReportScreenshot(
                id=str(cs.id),
                category=_category_name(cs),
                comment=cs.annotation,
                screenshot=encode_blob(cs.screenshot),
            )
            for cs in ordered
            if cs.screenshot is not None
        ],
    )


def build_evaluation_report(db: Session, caller: CallerContext, report_filter: ReportFilter) -> List[ReportRow]:
    """
    Collect report rows for the caller.

    Projects must be visible and hold at least one evaluation visible to the
    caller. Within each project only the caller's evaluations (all of them
    for admins) inside the date range are kept, newest first.
    """
    visible_evaluation = exists().where(Evaluation.project_id == Project.id)
    if not caller.is_admin:
        visible_evaluation = visible_evaluation.where(Evaluation.created_by == caller.username)

    query = (
        visible_to(db.query(Project), Project, caller)
        .filter(visible_evaluation)
        .options(
            selectinload(Project.evaluations)
            .selectinload(Evaluation.category_scores)
            .selectinload(CategoryScore.category)
        )
    )
    if report_filter.project_id is not None:
        query = query.filter(Project.id == report_filter.project_id)

    rows: List[ReportRow] = []
    for project in query.order_by(Project.created_at.desc()).all():
        evaluations = [
            e for e in project.evaluations
            if _own_evaluation(e, caller) and _in_range(e, report_filter)
        ]
        evaluations.sort(key=lambda e: e.created_at, reverse=True)
        rows.extend(build_report_row(project, e) for e in evaluations)
    return rows


def list_report_projects(db: Session, caller: CallerContext) -> List[ReportProject]:
    """Visible projects that hold at least one evaluation."""
    has_evaluations = exists().where(Evaluation.project_id == Project.id)
    projects = (
        visible_to(db.query(Project), Project, caller)
        .filter(has_evaluations)
        .order_by(Project.name)
        .all()
    )
    return [ReportProject(id=str(p.id), name=p.name) for p in projects]
