"""Evaluation bundle persistence: header, category scores and screenshots."""
import uuid
from typing import Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from uxscore.auth.caller import CallerContext
from uxscore.models import Category, CategoryScore, Evaluation, Project
from uxscore.services.evaluation_form import EvaluationForm, ScoreEntry
from uxscore.utils.db import get_visible, parse_uuid, visible_to
from uxscore.utils.exceptions import ValidationError, handle_database_error
from uxscore.utils.logger import logger
from uxscore.utils.serialization import utcnow


def list_evaluations(db: Session, caller: CallerContext, project_id: Optional[str] = None) -> List[Evaluation]:
    """Visible evaluations, newest first, optionally for one project."""
    query = visible_to(db.query(Evaluation), Evaluation, caller).options(
        selectinload(Evaluation.category_scores)
    )
    if project_id:
        pid = parse_uuid(project_id, "project ID")
        if pid != uuid.UUID(int=0):
            query = query.filter(Evaluation.project_id == pid)
    return query.order_by(Evaluation.created_at.desc()).all()


def get_evaluation(db: Session, caller: CallerContext, evaluation_id: str) -> Evaluation:
    return get_visible(db, Evaluation, evaluation_id, caller, "Evaluation")


def _resolve_project(db: Session, caller: CallerContext, raw_project_id: str) -> Project:
    try:
        project_id = uuid.UUID(raw_project_id)
    except ValueError:
        raise ValidationError("Valid Project ID is required.")
    if project_id == uuid.UUID(int=0):
        raise ValidationError("Valid Project ID is required.")

    project = visible_to(db.query(Project), Project, caller).filter(Project.id == project_id).first()
    if project is None:
        raise ValidationError("Valid Project ID is required.")
    return project


def _check_categories(db: Session, entries: List[ScoreEntry]) -> None:
    wanted = {entry.category_id for entry in entries}
    if not wanted:
        return
    found = {row.id for row in db.query(Category.id).filter(Category.id.in_(wanted)).all()}
    missing = wanted - found
    if missing:
        raise ValidationError(f"Unknown category: {', '.join(sorted(str(m) for m in missing))}")


def _new_score(evaluation_id: uuid.UUID, entry: ScoreEntry) -> CategoryScore:
    return CategoryScore(
        id=uuid.uuid4(),
        evaluation_id=evaluation_id,
        category_id=entry.category_id,
        score=entry.score,
        comment=entry.comment,
        annotation=entry.annotation,
        screenshot=entry.screenshot,
    )


def create_evaluation(db: Session, caller: CallerContext, form: EvaluationForm) -> Evaluation:
    """
    Persist a new evaluation and all its valid scores in one transaction.

    Raises:
        ValidationError: For a missing/unknown project, missing URL or unknown category
    """
    project = _resolve_project(db, caller, form.project_id)
    if not form.website_url:
        raise ValidationError("Website URL is required.")
    _check_categories(db, form.scores)

    now = utcnow()
    evaluation = Evaluation(
        id=uuid.uuid4(),
        project_id=project.id,
        website_url=form.website_url,
        notes=form.notes,
        created_at=now,
        created_by=caller.username,
        updated_at=now,
        updated_by=caller.username,
    )
    for entry in form.scores:
        evaluation.category_scores.append(_new_score(evaluation.id, entry))

    try:
        db.add(evaluation)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create evaluation for project {project.id}: {e}", exc_info=True)
        raise handle_database_error(e, "create_evaluation")

    db.refresh(evaluation)
    logger.info(
        f"Created evaluation {evaluation.id} with {len(form.scores)} scores for project {project.id} by {caller.username}"
    )
    return evaluation


def update_evaluation(db: Session, caller: CallerContext, evaluation_id: str, form: EvaluationForm) -> Evaluation:
    """
    Replace an evaluation's header and scores in one transaction.

    All existing scores are deleted and the submitted set inserted. A new
    score without its own screenshot inherits the previous screenshot for
    the same category, and its annotation too when the new one is empty.
    """
    evaluation = get_evaluation(db, caller, evaluation_id)
    _check_categories(db, form.scores)

    previous: Dict[uuid.UUID, Tuple[bytes, Optional[str]]] = {
        cs.category_id: (cs.screenshot, cs.annotation)
        for cs in evaluation.category_scores
        if cs.screenshot is not None
    }

    try:
        if form.website_url:
            evaluation.website_url = form.website_url
        evaluation.notes = form.notes
        evaluation.updated_at = utcnow()
        evaluation.updated_by = caller.username

        evaluation.category_scores.clear()
        db.flush()

        for entry in form.scores:
            score = _new_score(evaluation.id, entry)
            if entry.screenshot is None and entry.category_id in previous:
                screenshot, annotation = previous[entry.category_id]
                score.screenshot = screenshot
                if not entry.annotation and annotation:
                    score.annotation = annotation
            evaluation.category_scores.append(score)

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update evaluation {evaluation_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_evaluation")

    db.refresh(evaluation)
    logger.info(f"Updated evaluation {evaluation.id} ({len(form.scores)} scores) by {caller.username}")
    return evaluation


def delete_evaluation(db: Session, caller: CallerContext, evaluation_id: str) -> None:
    """Delete a visible evaluation; its scores go with it."""
    evaluation = get_evaluation(db, caller, evaluation_id)
    try:
        db.delete(evaluation)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete evaluation {evaluation_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_evaluation")
    logger.info(f"Deleted evaluation {evaluation_id} by {caller.username}")
