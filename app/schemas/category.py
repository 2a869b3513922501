from pydantic import Field

from app.schemas.common import CamelModel


class CategoryCreateRequest(CamelModel):
    """Schema for creating a job category"""
    name: str = Field(..., min_length=1)
    icon: str
    job_count: int = Field(0, ge=0)
