"""
Lookups API - Categories and tags
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from taskboard.database import get_db
from taskboard.models import Category, Tag
from taskboard.schemas import CategoryCreate, CategoryResponse, TagCreate, TagResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def _create_lookup(db: Session, model, data):
    """Insert a named lookup row; names are unique per table"""
    if db.query(model).filter(model.name == data.name).first():
        logger.warning(f"⚠️  {model.__name__} '{data.name}' already exists")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{model.__name__} '{data.name}' already exists",
        )
    row = model(name=data.name, color=data.color)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"✅ {model.__name__} created: {row.name}")
    return row


@router.get("/categories", response_model=List[CategoryResponse])
def get_categories(db: Session = Depends(get_db)):
    return db.query(Category).order_by(Category.name).all()


@router.post("/categories", response_model=CategoryResponse)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    return _create_lookup(db, Category, category_data)


@router.get("/tags", response_model=List[TagResponse])
def get_tags(db: Session = Depends(get_db)):
    return db.query(Tag).order_by(Tag.name).all()


@router.post("/tags", response_model=TagResponse)
def create_tag(tag_data: TagCreate, db: Session = Depends(get_db)):
    return _create_lookup(db, Tag, tag_data)
