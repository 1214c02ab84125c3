# ============================================================================
# FILE: mjplayer/api/v1/endpoints/categories.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from mjplayer.db.session import get_db
from mjplayer.api.dependencies import get_current_user
from mjplayer.schemas.catalog import CategoryResponse
from mjplayer.services.category_service import category_service
from mjplayer.db.models.user import User

router = APIRouter()

@router.get("/", response_model=List[CategoryResponse])
async def list_categories(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """All categories, by name"""
    return category_service.list_categories(db)

@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    category = category_service.get_category(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category
