"""
User endpoints.

- POST /users: Create an employer or job seeker account
- GET /users/{user_id}: Get a user by id
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, status

from app.core.database import Database, get_db
from app.core.deps import parse_id
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.common import ErrorResponse
from app.schemas.user import UserCreateRequest

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=User, responses={400: {"model": ErrorResponse}})
def create_user(
    request: UserCreateRequest,
    db: Database = Depends(get_db)
):
    """
    Create a new user.

    Usernames are unique (case-sensitive). The uniqueness check and the
    insert are a single atomic step in the store.
    """
    try:
        new_user = user_crud.create_unique(db, request)
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        raise HTTPException(status_code=500, detail="Failed to create user")

    if new_user is None:
        raise HTTPException(status_code=400, detail="Username already exists")

    return new_user


@router.get("/{user_id}", response_model=User, responses={404: {"model": ErrorResponse}})
def get_user(user_id: str, db: Database = Depends(get_db)):
    """Retrieve a user by ID."""
    try:
        user = user_crud.get_by_id(db, parse_id(user_id))
    except Exception as e:
        logger.error(f"Error retrieving user {user_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve user")

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user
