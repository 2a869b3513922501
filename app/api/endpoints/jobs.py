import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from app.core.database import Database, get_db
from app.core.deps import get_job_filters, parse_id
from app.crud import job as job_crud
from app.models.job import Job
from app.schemas.common import ErrorResponse
from app.schemas.job import JobCreateRequest, JobFilters

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Job])
def list_jobs(
    filters: JobFilters = Depends(get_job_filters),
    db: Database = Depends(get_db)
):
    """
    Search jobs, most recently posted first.

    Query parameters (all optional, combined with AND):
    - search: case-insensitive match on title, company or description
    - location: case-insensitive substring of the location
    - category: exact category name
    - jobType / experienceLevel: comma-separated list of accepted values
    - datePosted: last24h, last3d, last7d, last14d (anything else means all)
    - salaryRange: minimum salary, e.g. $50,000
    """
    try:
        return job_crud.get_multi(db, filters)
    except Exception as e:
        logger.error(f"Error searching jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve jobs")


@router.get("/{job_id}", response_model=Job, responses={404: {"model": ErrorResponse}})
def get_job(job_id: str, db: Database = Depends(get_db)):
    """Retrieve a job by ID."""
    try:
        job = job_crud.get_by_id(db, parse_id(job_id))
    except Exception as e:
        logger.error(f"Error retrieving job {job_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Job, responses={400: {"model": ErrorResponse}})
def create_job(
    request: JobCreateRequest,
    db: Database = Depends(get_db)
):
    """
    Create a new job posting.

    postedDate defaults to now. If the job's category matches an existing
    category name, that category's jobCount goes up by one.
    """
    try:
        if request.posted_date is None:
            request = request.model_copy(update={"posted_date": datetime.now(timezone.utc)})
        return job_crud.create(db, request)
    except Exception as e:
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job")
