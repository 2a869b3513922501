"""
Application record.

Represents a job seeker's application to a job posting. The only mutation
an application supports is a status change.
"""

import enum
from datetime import datetime
from typing import Optional
from app.models.base import Base


class ApplicationStatus(str, enum.Enum):
    """
    Recognised application statuses:

    APPLIED -> REVIEWED -> INTERVIEW -> HIRED
                   ↓           ↓
                REJECTED    REJECTED
    """
    APPLIED = "applied"
    REVIEWED = "reviewed"
    INTERVIEW = "interview"
    REJECTED = "rejected"
    HIRED = "hired"


class Application(Base):
    id: int
    job_id: int
    user_id: int
    name: str
    email: str
    phone: str
    resume: str
    cover_letter: Optional[str] = None
    # Free text; status updates are stored as given
    status: str
    applied_date: datetime

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, status='{self.status}')>"
