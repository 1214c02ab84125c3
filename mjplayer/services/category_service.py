# ============================================================================
# FILE: mjplayer/services/category_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from mjplayer.db.models.catalog import Category
from mjplayer.schemas.catalog import CategoryCreate, CategoryUpdate
import logging

logger = logging.getLogger(__name__)

class CategoryService:
    """Service layer for categories; writes are admin-only by policy"""
    
    def list_categories(self, db: Session) -> List[Category]:
        return db.query(Category).order_by(Category.name).all()
    
    def get_category(self, db: Session, category_id: str) -> Optional[Category]:
        return db.get(Category, category_id)
    
    def create_category(self, db: Session, category_data: CategoryCreate) -> Category:
        try:
            category = Category(name=category_data.name, description=category_data.description or None)
            db.add(category)
            db.commit()
            db.refresh(category)
            logger.info(f"Category created: {category.name}")
            return category
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating category: {e}")
            raise
    
    def update_category(self, db: Session, category_id: str, update_data: CategoryUpdate) -> Optional[Category]:
        category = self.get_category(db, category_id)
        if not category:
            return None
        
        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(category, field, value)
            db.commit()
            db.refresh(category)
            logger.info(f"Category updated: {category_id}")
            return category
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating category: {e}")
            raise
    
    def delete_category(self, db: Session, category_id: str) -> bool:
        """Delete a category; its songs stay, uncategorised"""
        category = self.get_category(db, category_id)
        if not category:
            return False
        
        try:
            db.delete(category)
            db.commit()
            logger.info(f"Category deleted: {category_id}")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting category: {e}")
            raise

# Create singleton instance
category_service = CategoryService()
