"""Evaluation endpoints (multipart form with per-category screenshots)."""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from uxscore.auth.caller import CallerContext, get_caller
from uxscore.database import get_db
from uxscore.schemas.evaluation import EvaluationCreatedResponse, EvaluationResponse
from uxscore.services import evaluations as evaluation_service
from uxscore.services.evaluation_form import parse_evaluation_form

router = APIRouter(prefix="/api/evaluations", tags=["evaluations"])


@router.get("", response_model=list[EvaluationResponse])
async def get_evaluations(
    projectId: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[EvaluationResponse]:
    """
    List visible evaluations, newest first.

    Args:
        projectId: Optional project filter; the all-zero UUID means no filter
        db: Database session
        caller: Authenticated caller

    Returns:
        Evaluations with their category scores
    """
    evaluations = evaluation_service.list_evaluations(db, caller, projectId)
    return [EvaluationResponse.from_orm(e) for e in evaluations]


@router.get("/{evaluation_id}", response_model=EvaluationResponse)
async def get_evaluation(
    evaluation_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> EvaluationResponse:
    evaluation = evaluation_service.get_evaluation(db, caller, evaluation_id)
    return EvaluationResponse.from_orm(evaluation)


@router.post("", response_model=EvaluationCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_evaluation(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> EvaluationCreatedResponse:
    """
    Create an evaluation from a multipart form.

    Fields: ``projectId``, ``websiteUrl``, ``notes`` and indexed groups
    ``categoryScores[i].categoryId|score|comment|annotation|screenshot``.
    """
    async with request.form() as form:
        parsed = await parse_evaluation_form(form)

    evaluation = evaluation_service.create_evaluation(db, caller, parsed)
    response.headers["Location"] = f"/api/evaluations/{evaluation.id}"
    return EvaluationCreatedResponse.from_orm(evaluation)


@router.put("/{evaluation_id}")
async def update_evaluation(
    evaluation_id: str,
    request: Request,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> dict:
    """Replace an evaluation's header and its full set of scores."""
    async with request.form() as form:
        parsed = await parse_evaluation_form(form)

    evaluation_service.update_evaluation(db, caller, evaluation_id, parsed)
    return {"message": "Evaluation updated successfully"}


@router.delete("/{evaluation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_evaluation(
    evaluation_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> Response:
    evaluation_service.delete_evaluation(db, caller, evaluation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
