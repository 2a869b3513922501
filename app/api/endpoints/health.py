"""
Health check endpoint.
"""

import logging
from typing import Any, Dict
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status

from app.core.database import Database, get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check(db: Database = Depends(get_db)) -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running, with the number of stored
    records per entity.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "records": db.counts(),
    }
