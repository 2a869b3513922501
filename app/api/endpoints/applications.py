"""
Job application endpoints.

- POST /applications: Apply to a job
- GET /jobs/{job_id}/applications: Applications received for a job
- GET /users/{user_id}/applications: Applications submitted by a user
- PATCH /applications/{application_id}/status: Move an application along
"""

import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from app.core.database import Database, get_db
from app.core.deps import parse_id
from app.crud import application as application_crud
from app.models.application import Application, ApplicationStatus
from app.schemas.common import ErrorResponse
from app.schemas.application import ApplicationCreateRequest, ApplicationStatusUpdate

router = APIRouter(tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("/applications", status_code=status.HTTP_201_CREATED, response_model=Application)
def create_application(
    request: ApplicationCreateRequest,
    db: Database = Depends(get_db)
):
    """
    Submit an application.

    status defaults to "applied" and appliedDate to now. jobId and userId
    are stored as given.
    """
    try:
        defaults = {}
        if not request.status:
            defaults["status"] = ApplicationStatus.APPLIED.value
        if request.applied_date is None:
            defaults["applied_date"] = datetime.now(timezone.utc)
        if defaults:
            request = request.model_copy(update=defaults)
        return application_crud.create(db, request)
    except Exception as e:
        logger.error(f"Error creating application: {e}")
        raise HTTPException(status_code=500, detail="Failed to create application")


@router.get("/jobs/{job_id}/applications", response_model=List[Application])
def list_job_applications(job_id: str, db: Database = Depends(get_db)):
    try:
        return application_crud.get_by_job(db, parse_id(job_id))
    except Exception as e:
        logger.error(f"Error retrieving applications for job {job_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve job applications")


@router.get("/users/{user_id}/applications", response_model=List[Application])
def list_user_applications(user_id: str, db: Database = Depends(get_db)):
    try:
        return application_crud.get_by_user(db, parse_id(user_id))
    except Exception as e:
        logger.error(f"Error retrieving applications for user {user_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve user applications")


@router.patch(
    "/applications/{application_id}/status",
    response_model=Application,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_application_status(
    application_id: str,
    request: ApplicationStatusUpdate,
    db: Database = Depends(get_db)
):
    """
    Change the status of an application.

    Any non-empty status is accepted.
    """
    if not request.status:
        raise HTTPException(status_code=400, detail="Status is required")

    try:
        updated = application_crud.update_status(db, parse_id(application_id), request.status)
    except Exception as e:
        logger.error(f"Error updating application {application_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update application status")

    if not updated:
        raise HTTPException(status_code=404, detail="Application not found")

    return updated
