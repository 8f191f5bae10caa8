"""Projects API endpoints."""
import uuid
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from uxscore.auth.caller import CallerContext, get_caller, require_admin
from uxscore.database import get_db
from uxscore.models import Project
from uxscore.schemas.project import ProjectCreate, ProjectResponse, WebsiteItem
from uxscore.utils.db import get_visible, visible_to
from uxscore.utils.exceptions import handle_database_error
from uxscore.utils.logger import logger
from uxscore.utils.serialization import utcnow

router = APIRouter(prefix="/api/projects", tags=["projects"])


def _website_items(project: Project) -> list[WebsiteItem]:
    return [
        WebsiteItem(id=str(project.id), url=url, projectName=project.name)
        for url in project.websites or []
    ]


@router.get("", response_model=list[ProjectResponse])
async def get_projects(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[ProjectResponse]:
    """
    Get the projects visible to the caller, newest first.

    Args:
        db: Database session
        caller: Authenticated caller

    Returns:
        List of projects with their evaluation summaries
    """
    projects = (
        visible_to(db.query(Project), Project, caller)
        .options(selectinload(Project.evaluations))
        .order_by(Project.created_at.desc())
        .all()
    )
    return [ProjectResponse.from_orm(p) for p in projects]


@router.get("/websites", response_model=list[WebsiteItem])
async def get_all_websites(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[WebsiteItem]:
    """Every website of every visible project, flattened."""
    projects = visible_to(db.query(Project), Project, caller).order_by(Project.created_at.desc()).all()
    return [item for project in projects for item in _website_items(project)]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> ProjectResponse:
    project = get_visible(db, Project, project_id, caller, "Project")
    return ProjectResponse.from_orm(project)


@router.get("/{project_id}/websites", response_model=list[WebsiteItem])
async def get_project_websites(
    project_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> list[WebsiteItem]:
    project = get_visible(db, Project, project_id, caller, "Project")
    return _website_items(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreate,
    response: Response,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> ProjectResponse:
    """
    Create a new project owned by the caller.

    Args:
        payload: Project creation data
        response: Used to set the Location header
        db: Database session
        caller: Authenticated caller

    Returns:
        Created project
    """
    try:
        new_project = Project(
            id=uuid.uuid4(),
            name=payload.name,
            description=payload.description or "",
            websites=payload.websites or [],
            created_at=utcnow(),
            created_by=caller.username,
        )

        db.add(new_project)
        db.commit()
        db.refresh(new_project)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create project: {e}", exc_info=True)
        raise handle_database_error(e, "create_project")

    logger.info(f"Created project {new_project.id} by {caller.username}")
    response.headers["Location"] = f"/api/projects/{new_project.id}"
    return ProjectResponse.from_orm(new_project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> ProjectResponse:
    """
    Replace a project's name, description and websites.

    Args:
        project_id: The project to update
        payload: Updated project data
        db: Database session
        caller: Administrator making the change

    Returns:
        Updated project
    """
    project = get_visible(db, Project, project_id, caller, "Project")

    try:
        project.name = payload.name
        project.description = payload.description or ""
        project.websites = payload.websites or []
        project.updated_at = utcnow()
        project.updated_by = caller.username

        db.commit()
        db.refresh(project)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update project {project_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_project")

    logger.info(f"Updated project {project.id} by {caller.username}")
    return ProjectResponse.from_orm(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> Response:
    """
    Delete a project and all associated data.

    Args:
        project_id: The project to delete
        db: Database session
        caller: Administrator making the change
    """
    project = get_visible(db, Project, project_id, caller, "Project")

    try:
        # Cascade removes evaluations and their category scores
        db.delete(project)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete project {project_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_project")

    logger.info(f"Deleted project {project_id} by {caller.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
