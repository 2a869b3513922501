"""
CRUD operations for users.
"""

import logging
from typing import Optional

from app.core.database import Database
from app.models.user import User
from app.schemas.user import UserCreateRequest

logger = logging.getLogger(__name__)


def _builder(user_data: UserCreateRequest):
    def build(user_id: int) -> User:
        return User(id=user_id, **user_data.model_dump())
    return build


def create(db: Database, user_data: UserCreateRequest) -> User:
    """
    Store a new user without checking the username.

    Callers that need unique usernames should use `create_unique`.
    """
    user = db.users.insert(_builder(user_data))
    logger.info(f"Created user {user.id}: {user.username}")
    return user


def create_unique(db: Database, user_data: UserCreateRequest) -> Optional[User]:
    """
    Store a new user unless the username is already taken.

    The lookup and the insert happen under the users table lock, so two
    concurrent requests for the same username cannot both succeed.

    Args:
        db: Database
        user_data: Validated user creation data

    Returns:
        Created User, or None if a user with that username exists
    """
    user = db.users.insert_unless(
        lambda existing: existing.username == user_data.username,
        _builder(user_data),
    )
    if user is not None:
        logger.info(f"Created user {user.id}: {user.username}")
    return user


def get_by_id(db: Database, user_id: int) -> Optional[User]:
    return db.users.get(user_id)


def get_by_username(db: Database, username: str) -> Optional[User]:
    """Exact, case-sensitive username lookup."""
    return db.users.find(lambda user: user.username == username)
