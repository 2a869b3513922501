"""
CRUD operations (Create, Read, Update) for stored records.

This layer provides a clean separation between API routes and storage operations,
following the Repository pattern.
"""

from app.crud import user, job, application, category

__all__ = ["user", "job", "application", "category"]
