from app.models.base import Base


class Category(Base):
    """Job category with a running count of jobs posted under its name."""
    id: int
    name: str
    icon: str
    job_count: int = 0

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}', job_count={self.job_count})>"
