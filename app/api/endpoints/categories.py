import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from app.core.database import Database, get_db
from app.core.deps import parse_id
from app.crud import category as category_crud
from app.models.category import Category
from app.schemas.common import ErrorResponse
from app.schemas.category import CategoryCreateRequest

router = APIRouter(prefix="/categories", tags=["Categories"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Category])
def list_categories(db: Database = Depends(get_db)):
    """List all job categories in creation order."""
    try:
        return category_crud.get_multi(db)
    except Exception as e:
        logger.error(f"Error retrieving categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")


@router.get("/{category_id}", response_model=Category, responses={404: {"model": ErrorResponse}})
def get_category(category_id: str, db: Database = Depends(get_db)):
    try:
        category = category_crud.get_by_id(db, parse_id(category_id))
    except Exception as e:
        logger.error(f"Error retrieving category {category_id!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve category")

    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    return category


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Category)
def create_category(
    request: CategoryCreateRequest,
    db: Database = Depends(get_db)
):
    """Create a job category. jobCount defaults to 0."""
    try:
        return category_crud.create(db, request)
    except Exception as e:
        logger.error(f"Error creating category: {e}")
        raise HTTPException(status_code=500, detail="Failed to create category")
