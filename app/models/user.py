"""
User record.

A user is either an employer (posts jobs) or a job seeker (applies to jobs).
Usernames are unique and case-sensitive.
"""

import enum
from typing import Optional
from app.models.base import Base


class UserType(str, enum.Enum):
    EMPLOYER = "employer"
    JOBSEEKER = "jobseeker"


class User(Base):
    id: int
    username: str
    password: str
    email: str
    user_type: UserType
    company_name: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', user_type={self.user_type.value})>"
