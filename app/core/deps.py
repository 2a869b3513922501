"""
FastAPI dependencies and request parsing helpers shared by the endpoints.
"""

from typing import List, Optional

from fastapi import Query

from app.schemas.job import JobFilters


def parse_id(raw: str) -> int:
    """
    Parse a path id.

    Raises:
        ValueError: If the value is not an integer
    """
    return int(raw)


def _split_list(raw: Optional[str]) -> Optional[List[str]]:
    if not raw:
        return None
    values = [value.strip() for value in raw.split(",") if value.strip()]
    return values or None


def get_job_filters(
    search: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
    job_type: Optional[str] = Query(None, alias="jobType", description="Comma-separated job types"),
    experience_level: Optional[str] = Query(None, alias="experienceLevel", description="Comma-separated levels"),
    date_posted: Optional[str] = Query(None, alias="datePosted"),
    salary_range: Optional[str] = Query(None, alias="salaryRange"),
) -> JobFilters:
    """Build JobFilters from the /jobs query string."""
    return JobFilters(
        search=search or None,
        location=location or None,
        category=category or None,
        job_type=_split_list(job_type),
        experience_level=_split_list(experience_level),
        date_posted=date_posted or None,
        salary_range=salary_range or None,
    )
