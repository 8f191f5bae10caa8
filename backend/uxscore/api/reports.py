"""Report endpoints: JSON, CSV and PDF views of the same rows."""
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from uxscore.auth.caller import CallerContext, get_caller
from uxscore.database import get_db
from uxscore.schemas.report import ReportProject, ReportRow
from uxscore.services.report_csv import render_csv
from uxscore.services.report_pdf import render_pdf
from uxscore.services.reports import ReportFilter, build_evaluation_report, list_report_projects
from uxscore.utils.db import parse_uuid
from uxscore.utils.logger import logger
from uxscore.utils.serialization import utcnow

router = APIRouter(prefix="/api/reports", tags=["reports"])


def report_filter(
    projectId: Optional[str] = Query(None),
    startDate: Optional[datetime] = Query(None),
    endDate: Optional[datetime] = Query(None),
) -> ReportFilter:
    """Query-string filter shared by every report format."""
    project_id = parse_uuid(projectId, "project ID") if projectId else None
    return ReportFilter(project_id=project_id, start_date=startDate, end_date=endDate)


def _attachment(content: bytes, media_type: str, extension: str) -> Response:
    filename = f"evaluation_report_{utcnow().strftime('%Y%m%d_%H%M%S')}.{extension}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/evaluation-report", response_model=list[ReportRow])
async def get_evaluation_report(
    filters: ReportFilter = Depends(report_filter),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[ReportRow]:
    """Report rows for the caller, newest evaluation first within each project."""
    return build_evaluation_report(db, caller, filters)


@router.get("/evaluation-report/csv")
async def export_csv(
    filters: ReportFilter = Depends(report_filter),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> Response:
    rows = build_evaluation_report(db, caller, filters)
    logger.info(f"CSV report with {len(rows)} evaluations for {caller.username}")
    return _attachment(render_csv(rows), "text/csv", "csv")


@router.get("/evaluation-report/pdf")
async def export_pdf(
    filters: ReportFilter = Depends(report_filter),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> Response:
    rows = build_evaluation_report(db, caller, filters)
    logger.info(f"PDF report with {len(rows)} evaluations for {caller.username}")
    return _attachment(render_pdf(rows), "application/pdf", "pdf")


@router.get("/projects", response_model=list[ReportProject])
async def get_report_projects(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[ReportProject]:
    """Visible projects that have at least one evaluation, by name."""
    return list_report_projects(db, caller)
