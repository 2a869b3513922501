"""
In-process record storage.

Each entity lives in a `Table`: an insertion-ordered id-to-record map with its
own id sequence. Data is kept in process memory only and is lost on restart.
"""

import logging
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from fastapi import Request

from app.models import Application, Category, Job, User
from app.models.base import Base

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)


class Table(Generic[RecordT]):
    """
    Id-to-record table with a monotonically increasing id sequence.

    Ids start at 1 and are never reused. Writes hold the table lock, since
    synchronous endpoints run concurrently in FastAPI's worker thread pool.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def _insert_locked(self, build: Callable[[int], RecordT]) -> RecordT:
        # The id is only consumed once the record has been built successfully
        record = build(self._next_id)
        self._next_id += 1
        self._rows[record.id] = record
        return record

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        """Build a record from the next id and store it."""
        with self._lock:
            return self._insert_locked(build)

    def insert_unless(
        self,
        conflict: Callable[[RecordT], bool],
        build: Callable[[int], RecordT]
    ) -> Optional[RecordT]:
        """
        Compare-and-insert: store a new record only if no existing row conflicts.

        Returns:
            The stored record, or None if a conflicting row exists
        """
        with self._lock:
            if any(conflict(row) for row in self._rows.values()):
                return None
            return self._insert_locked(build)

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._rows.get(record_id)

    def all(self) -> List[RecordT]:
        with self._lock:
            return list(self._rows.values())

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        return next((row for row in self.all() if predicate(row)), None)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [row for row in self.all() if predicate(row)]

    def replace(self, record_id: int, change: Callable[[RecordT], RecordT]) -> Optional[RecordT]:
        """
        Atomically replace a stored record with `change(record)`.

        Returns:
            The replacement record, or None if no record has that id
        """
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            updated = change(current)
            self._rows[record_id] = updated
            return updated


class Database:
    """Container for the four entity tables."""

    def __init__(self):
        self.users: Table[User] = Table("users")
        self.jobs: Table[Job] = Table("jobs")
        self.applications: Table[Application] = Table("applications")
        self.categories: Table[Category] = Table("categories")

    def counts(self) -> Dict[str, int]:
        return {
            table.name: len(table)
            for table in (self.users, self.jobs, self.applications, self.categories)
        }


def init_db(seed: bool = True) -> Database:
    """
    Create a new, empty database.

    Args:
        seed: Insert the fixed demo categories before returning

    Returns:
        Database instance ready to be shared by request handlers
    """
    from app.crud import category as category_crud

    db = Database()
    if seed:
        category_crud.seed_defaults(db)
        logger.info(f"Seeded {len(db.categories)} demo categories")
    return db


def get_db(request: Request) -> Database:
    """
    Dependency function returning the application's database.
    Used in FastAPI endpoints with Depends(get_db)
    """
    return request.app.state.db
