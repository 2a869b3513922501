"""
Pydantic schemas for user registration.
"""

from pydantic import Field
from typing import Optional

from app.models.user import UserType
from app.schemas.common import CamelModel


class UserCreateRequest(CamelModel):
    """Request schema for creating a user (employer or job seeker)."""
    username: str = Field(..., min_length=1)
    password: str
    email: str
    user_type: UserType
    company_name: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
