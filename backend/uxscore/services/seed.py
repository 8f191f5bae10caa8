"""Reference data seeding: canonical categories, roles and bootstrap users."""
from sqlalchemy.orm import Session

from uxscore.constants import BOOTSTRAP_USERS, SEEDED_CATEGORIES
from uxscore.models import Category
from uxscore.services import identity
from uxscore.utils.exceptions import IdentityError
from uxscore.utils.logger import logger


def seed_categories(db: Session) -> int:
    """
    Insert the ten canonical categories into an empty catalog.

    A catalog that already holds rows is left untouched, so admin edits and
    deletions survive restarts.

    Returns:
        Number of categories inserted
    """
    if db.query(Category.id).first() is not None:
        return 0

    for display_order, (category_id, name, description) in enumerate(SEEDED_CATEGORIES, start=1):
        db.add(
            Category(
                id=category_id,
                name=name,
                description=description,
                is_active=True,
                display_order=display_order,
            )
        )

    db.commit()
    logger.info(f"Seeded {len(SEEDED_CATEGORIES)} categories")
    return len(SEEDED_CATEGORIES)


def seed_users(db: Session) -> None:
    """Create the Admin/Evaluator roles and the bootstrap accounts if absent."""
    identity.ensure_roles(db)

    for username, email, password, role in BOOTSTRAP_USERS:
        if identity.find_by_username(db, username) is not None:
            continue
        try:
            user = identity.create_user(db, username, password, email=email, email_confirmed=True)
            identity.add_to_role(db, user, role)
            logger.info(f"{role} user '{username}' created successfully")
        except IdentityError as e:
            logger.error(f"Failed to create {role} user '{username}': {', '.join(e.errors)}")


def seed_all(db: Session, include_categories: bool = True) -> None:
    if include_categories:
        seed_categories(db)
    seed_users(db)
