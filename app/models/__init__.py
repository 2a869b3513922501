"""
Stored record models package.
"""

from app.models.user import User, UserType
from app.models.job import Job
from app.models.application import Application, ApplicationStatus
from app.models.category import Category

__all__ = ["User", "UserType", "Job", "Application", "ApplicationStatus", "Category"]
