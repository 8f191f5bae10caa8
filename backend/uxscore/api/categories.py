"""Category catalog endpoints."""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import not_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from uxscore.auth.caller import CallerContext, require_admin
from uxscore.constants import CATEGORY_IN_USE_MESSAGE
from uxscore.database import get_db
from uxscore.models import Category, CategoryScore
from uxscore.schemas.category import CategoryCreate, CategoryPublic, CategoryResponse
from uxscore.utils.db import get_by_id
from uxscore.utils.exceptions import InUseError
from uxscore.utils.logger import logger

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryPublic])
async def get_categories(db: Session = Depends(get_db)) -> list[CategoryPublic]:
    """Active categories in display order. Public."""
    categories = (
        db.query(Category)
        .filter(Category.is_active.is_(True))
        .order_by(Category.display_order)
        .all()
    )
    return [CategoryPublic.from_orm(c) for c in categories]


@router.get("/admin", response_model=list[CategoryResponse])
async def get_categories_admin(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> list[CategoryResponse]:
    """All categories, active or not, in display order."""
    categories = db.query(Category).order_by(Category.display_order).all()
    return [CategoryResponse.from_orm(c) for c in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> CategoryResponse:
    category = get_by_id(db, Category, category_id, "Category")
    return CategoryResponse.from_orm(category)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreate,
    response: Response,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> CategoryResponse:
    """
    Create a category.

    Args:
        payload: Name, description, active flag and display order
        response: Used to set the Location header
        db: Database session
        caller: Administrator making the change

    Returns:
        Created category
    """
    category = Category(
        name=payload.name,
        description=payload.description,
        is_active=payload.isActive,
        display_order=payload.displayOrder,
    )
    db.add(category)
    db.commit()
    db.refresh(category)

    logger.info(f"Created category {category.id} ({category.name}) by {caller.username}")
    response.headers["Location"] = f"/api/categories/{category.id}"
    return CategoryResponse.from_orm(category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> CategoryResponse:
    category = get_by_id(db, Category, category_id, "Category")

    category.name = payload.name
    category.description = payload.description
    category.is_active = payload.isActive
    category.display_order = payload.displayOrder
    db.commit()
    db.refresh(category)

    logger.info(f"Updated category {category.id} by {caller.username}")
    return CategoryResponse.from_orm(category)


@router.put("/{category_id}/toggle", response_model=CategoryResponse)
async def toggle_category(
    category_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> CategoryResponse:
    """Flip the active flag of a category with a single UPDATE."""
    category = get_by_id(db, Category, category_id, "Category")

    # Flipped in SQL; the loaded value is never written back
    db.query(Category).filter(Category.id == category.id).update(
        {Category.is_active: not_(Category.is_active)}, synchronize_session=False
    )
    db.commit()
    db.refresh(category)

    logger.info(f"Category {category.id} is now {'active' if category.is_active else 'inactive'}")
    return CategoryResponse.from_orm(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> Response:
    """
    Physically delete a category.

    Categories referenced by any category score are kept; deactivate them
    with the toggle endpoint instead.
    """
    category = get_by_id(db, Category, category_id, "Category")

    in_use = db.query(CategoryScore.id).filter(CategoryScore.category_id == category.id).first()
    if in_use:
        raise InUseError(CATEGORY_IN_USE_MESSAGE)

    try:
        db.delete(category)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise InUseError(CATEGORY_IN_USE_MESSAGE)

    logger.info(f"Deleted category {category_id} by {caller.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
