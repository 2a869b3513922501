from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.schemas.common import CamelModel, ensure_utc


class JobCreateRequest(CamelModel):
    """Schema for creating a new job posting"""
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary: Optional[str] = None
    job_type: str = Field(..., description="full-time, part-time, contract, ...")
    category: str = Field(..., description="Should match an existing category name")
    experience_level: str = Field(..., description="entry, mid or senior")
    skills: List[str]
    posted_date: Optional[datetime] = None
    employer_id: int

    @field_validator("posted_date")
    @classmethod
    def normalize_posted_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


class JobFilters(CamelModel):
    """
    Optional constraints for job search.

    Unset fields (None, empty string or empty list) impose no restriction;
    set fields are combined with AND.
    """
    search: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    job_type: Optional[List[str]] = None
    experience_level: Optional[List[str]] = None
    date_posted: Optional[str] = Field(None, description="last24h, last3d, last7d, last14d or all")
    salary_range: Optional[str] = Field(None, description="Minimum salary, e.g. $50,000")
