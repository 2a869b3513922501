from datetime import datetime
from typing import List, Optional
from app.models.base import Base


class Job(Base):
    """
    Job posting.

    `salary` is free text and may embed a range such as "$50,000 - $70,000".
    `category` should match a Category name; `employer_id` is not checked
    against the users table.
    """
    id: int
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary: Optional[str] = None
    job_type: str
    category: str
    experience_level: str
    skills: List[str]
    posted_date: datetime
    employer_id: int

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', category='{self.category}')>"
