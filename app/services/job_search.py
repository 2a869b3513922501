"""
Job search predicates.

Each predicate takes a job and the active filters and returns True when the
job satisfies that one constraint (or the constraint is unset). `matches`
combines them with AND.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from app.models.job import Job
from app.schemas.job import JobFilters

# Window length for each recognised datePosted value
DATE_POSTED_WINDOWS = {
    "last24h": timedelta(days=1),
    "last3d": timedelta(days=3),
    "last7d": timedelta(days=7),
    "last14d": timedelta(days=14),
}

# First dollar amount in a salary string, e.g. "$50,000 - $70,000" -> "50,000"
SALARY_AMOUNT_RE = re.compile(r"\$(\d{1,3}(?:,\d{3})*)")


def parse_salary_floor(salary_range: str) -> Optional[int]:
    """
    Turn a salary filter value into a numeric threshold.

    All non-digit characters are dropped ("$55,000" -> 55000).
    Returns None when no digits remain.
    """
    digits = re.sub(r"\D", "", salary_range)
    return int(digits) if digits else None


def extract_min_salary(salary: Optional[str]) -> Optional[int]:
    """Return the first dollar amount in a job's salary text, or None."""
    if not salary:
        return None
    match = SALARY_AMOUNT_RE.search(salary)
    if not match:
        return None
    return int(match.group(1).replace(",", ""))


def matches_search(job: Job, filters: JobFilters) -> bool:
    if not filters.search:
        return True
    term = filters.search.lower()
    return (
        term in job.title.lower()
        or term in job.company.lower()
        or term in job.description.lower()
    )


def matches_location(job: Job, filters: JobFilters) -> bool:
    if not filters.location:
        return True
    return filters.location.lower() in job.location.lower()


def matches_category(job: Job, filters: JobFilters) -> bool:
    if not filters.category:
        return True
    return job.category == filters.category


def matches_job_type(job: Job, filters: JobFilters) -> bool:
    if not filters.job_type:
        return True
    return job.job_type in filters.job_type


def matches_experience_level(job: Job, filters: JobFilters) -> bool:
    if not filters.experience_level:
        return True
    return job.experience_level in filters.experience_level


def matches_date_posted(job: Job, filters: JobFilters, now: Optional[datetime] = None) -> bool:
    window = DATE_POSTED_WINDOWS.get(filters.date_posted or "")
    if window is None:
        # "all" and unknown values do not restrict
        return True
    now = now or datetime.now(timezone.utc)
    return job.posted_date >= now - window


def matches_salary_range(job: Job, filters: JobFilters) -> bool:
    if not filters.salary_range:
        return True
    floor = parse_salary_floor(filters.salary_range)
    job_min = extract_min_salary(job.salary)
    if floor is None or job_min is None:
        return False
    return job_min >= floor


PREDICATES: List[Callable[[Job, JobFilters], bool]] = [
    matches_search,
    matches_location,
    matches_category,
    matches_job_type,
    matches_experience_level,
    matches_date_posted,
    matches_salary_range,
]


def matches(job: Job, filters: JobFilters) -> bool:
    """True if the job satisfies every active filter."""
    return all(predicate(job, filters) for predicate in PREDICATES)


def search(jobs: List[Job], filters: Optional[JobFilters] = None) -> List[Job]:
    """
    Filter jobs and sort them by posted date, most recent first.

    Args:
        jobs: Candidate jobs, in any order
        filters: Optional constraints; None returns every job

    Returns:
        Matching jobs sorted by posted_date descending
    """
    if filters is not None:
        jobs = [job for job in jobs if matches(job, filters)]
    return sorted(jobs, key=lambda job: job.posted_date, reverse=True)
