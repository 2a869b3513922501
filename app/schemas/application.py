"""
Pydantic schemas for job applications.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, ensure_utc


class ApplicationCreateRequest(CamelModel):
    """Request schema for applying to a job"""
    job_id: int
    user_id: int
    name: str
    email: str
    phone: str
    resume: str
    cover_letter: Optional[str] = None
    status: Optional[str] = None
    applied_date: Optional[datetime] = None

    @field_validator("applied_date")
    @classmethod
    def normalize_applied_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


class ApplicationStatusUpdate(CamelModel):
    """Request body for PATCH /applications/{id}/status"""
    status: Optional[str] = None
