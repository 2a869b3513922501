"""
CRUD operations for job applications.
"""

import logging
from typing import List, Optional

from app.core.database import Database
from app.models.application import Application
from app.schemas.application import ApplicationCreateRequest

logger = logging.getLogger(__name__)


def create(db: Database, application_data: ApplicationCreateRequest) -> Application:
    """
    Store a new application.

    `status` and `applied_date` must already be filled in by the caller.
    """
    application = db.applications.insert(
        lambda application_id: Application(id=application_id, **application_data.model_dump())
    )
    logger.info(
        f"Created application {application.id} for job {application.job_id} "
        f"by user {application.user_id}"
    )
    return application


def get_by_job(db: Database, job_id: int) -> List[Application]:
    return db.applications.filter(lambda application: application.job_id == job_id)


def get_by_user(db: Database, user_id: int) -> List[Application]:
    return db.applications.filter(lambda application: application.user_id == user_id)


def get_by_id(db: Database, application_id: int) -> Optional[Application]:
    return db.applications.get(application_id)


def update_status(db: Database, application_id: int, status: str) -> Optional[Application]:
    """
    Replace the status of an application.

    The status is stored as given; it is not checked against ApplicationStatus.

    Args:
        db: Database
        application_id: Application ID to update
        status: New status

    Returns:
        Updated Application if found, None otherwise
    """
    application = db.applications.replace(
        application_id,
        lambda current: current.model_copy(update={"status": status})
    )
    if application is not None:
        logger.info(f"Application {application_id} status set to {status}")
    return application
