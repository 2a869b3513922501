"""
CRUD operations for Job records.

Implements the Repository pattern to encapsulate all storage operations
for jobs, providing a clean interface for the API layer.
"""

import logging
from typing import List, Optional

from app.core.database import Database
from app.crud import category as category_crud
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobFilters
from app.services import job_search

logger = logging.getLogger(__name__)


def create(db: Database, job_data: JobCreateRequest) -> Job:
    """
    Store a new job and bump the job count of its category.

    The category is matched by exact name; if none matches, no counter
    changes.

    Args:
        db: Database
        job_data: Validated job data with posted_date already set

    Returns:
        Created Job instance with id
    """
    job = db.jobs.insert(lambda job_id: Job(id=job_id, **job_data.model_dump()))
    logger.info(f"Created job {job.id}: {job.title} ({job.category})")

    category = category_crud.get_by_name(db, job.category)
    if category:
        category_crud.increment_job_count(db, category.id)

    return job


def get_by_id(db: Database, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.jobs.get(job_id)


def get_multi(db: Database, filters: Optional[JobFilters] = None) -> List[Job]:
    """
    Retrieve jobs matching every supplied filter, most recent first.

    Args:
        db: Database
        filters: Optional search constraints

    Returns:
        List of Job instances sorted by posted_date descending
    """
    return job_search.search(db.jobs.all(), filters)


def get_by_employer(db: Database, employer_id: int) -> List[Job]:
    """Jobs posted by one employer, in insertion order."""
    return db.jobs.filter(lambda job: job.employer_id == employer_id)
