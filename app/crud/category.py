"""
CRUD operations for job categories.
"""

import logging
from typing import List, Optional

from app.core.database import Database
from app.models.category import Category
from app.schemas.category import CategoryCreateRequest

logger = logging.getLogger(__name__)

# Demo categories inserted at startup. The job counts are display values and
# are not derived from stored jobs.
DEFAULT_CATEGORIES = [
    CategoryCreateRequest(name="Technology", icon="fa-laptop-code", job_count=1245),
    CategoryCreateRequest(name="Business", icon="fa-chart-line", job_count=879),
    CategoryCreateRequest(name="Design", icon="fa-paint-brush", job_count=623),
    CategoryCreateRequest(name="Marketing", icon="fa-bullhorn", job_count=542),
    CategoryCreateRequest(name="Healthcare", icon="fa-heartbeat", job_count=1032),
    CategoryCreateRequest(name="Education", icon="fa-graduation-cap", job_count=478),
    CategoryCreateRequest(name="Legal", icon="fa-gavel", job_count=326),
    CategoryCreateRequest(name="Hospitality", icon="fa-utensils", job_count=587),
]


def seed_defaults(db: Database) -> List[Category]:
    return [create(db, category_data) for category_data in DEFAULT_CATEGORIES]


def create(db: Database, category_data: CategoryCreateRequest) -> Category:
    category = db.categories.insert(
        lambda category_id: Category(id=category_id, **category_data.model_dump())
    )
    logger.debug(f"Created category {category.id}: {category.name}")
    return category


def get_by_id(db: Database, category_id: int) -> Optional[Category]:
    return db.categories.get(category_id)


def get_by_name(db: Database, name: str) -> Optional[Category]:
    """First category whose name equals `name` exactly."""
    return db.categories.find(lambda category: category.name == name)


def get_multi(db: Database) -> List[Category]:
    """All categories in insertion order."""
    return db.categories.all()


def increment_job_count(db: Database, category_id: int) -> Optional[Category]:
    """
    Add one to a category's job count.

    Args:
        db: Database
        category_id: Category ID to update

    Returns:
        Updated Category if found, None otherwise
    """
    category = db.categories.replace(
        category_id,
        lambda current: current.model_copy(update={"job_count": current.job_count + 1})
    )
    if category is not None:
        logger.debug(f"Category {category.name} job count is now {category.job_count}")
    return category
