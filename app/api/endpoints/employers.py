import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends

from app.core.database import Database, get_db
from app.core.deps import parse_id
from app.crud import job as job_crud
from app.models.job import Job

router = APIRouter(prefix="/employers", tags=["Employers"])
logger = logging.getLogger(__name__)


@router.get("/{employer_id}/jobs", response_model=List[Job])
def list_employer_jobs(employer_id: str, db: Database = Depends(get_db)):
    """List the jobs posted by an employer."""
    try:
        return job_crud.get_by_employer(db, parse_id(employer_id))
    except Exception as e:
        logger.error(f"Error retrieving jobs for employer {employer_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve employer jobs")
