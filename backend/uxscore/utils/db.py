"""Database query utility functions."""
from typing import Optional, TypeVar, Type
from uuid import UUID
from sqlalchemy.orm import Query, Session

from uxscore.auth.caller import CallerContext
from uxscore.utils.exceptions import NotFoundError, ValidationError

T = TypeVar("T")


def parse_uuid(value: str | UUID | None, field: str = "ID") -> UUID:
    """
    Parse a UUID from user input.

    Args:
        value: UUID string or UUID object
        field: Field name used in the error message

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the value is not a UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field} format")


def visible_to(query: Query, model: Type[T], caller: CallerContext) -> Query:
    """
    Restrict a query to rows the caller may see.

    Admins see every row; everybody else only sees rows whose
    ``created_by`` matches their username.
    """
    if caller.is_admin:
        return query
    return query.filter(model.created_by == caller.username)


def get_visible(
    db: Session,
    model: Type[T],
    id_value: str | UUID,
    caller: CallerContext,
    resource: Optional[str] = None,
) -> T:
    """
    Get a row by ID under the visibility rule.

    Rows that exist but belong to someone else are reported exactly like
    rows that do not exist.

    Raises:
        NotFoundError: If the row is absent or not visible
    """
    resource = resource or model.__name__
    try:
        row_id = parse_uuid(id_value)
    except ValidationError:
        raise NotFoundError(resource)

    query = visible_to(db.query(model), model, caller)
    instance = query.filter(model.id == row_id).first()
    if not instance:
        raise NotFoundError(resource, str(row_id))
    return instance


def get_by_id(
    db: Session,
    model: Type[T],
    id_value: str | UUID,
    resource: Optional[str] = None,
) -> T:
    """
    Get a model instance by ID without any visibility scoping.

    Raises:
        NotFoundError: If no row has that ID
    """
    resource = resource or model.__name__
    try:
        row_id = parse_uuid(id_value)
    except ValidationError:
        raise NotFoundError(resource)

    instance = db.get(model, row_id)
    if not instance:
        raise NotFoundError(resource, str(row_id))
    return instance
