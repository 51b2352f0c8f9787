# backend/routers/categories_router.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.session import commit_or_rollback, get_db
from models.category_model import Category
from models.user_model import User
from queries.category_queries import categories_with_active_counts
from routers.http_cache import cache_for
from schemas.categories import CategoryCreate, CategoryOut, CategoryWithCount
from services.auth import require_admin
from services.errors import InvalidArgument
from services.text_utils import slugify

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryWithCount])
def list_categories(response: Response, db: Session = Depends(get_db)):
    cache_for(response, 3600)
    return [
        CategoryWithCount.model_validate(c).model_copy(update={"listing_count": n})
        for c, n in categories_with_active_counts(db)
    ]


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(body: CategoryCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    slug = slugify(body.name)
    if not slug:
        raise InvalidArgument("Nama kategori tidak valid")
    if db.query(Category).filter(Category.slug == slug).count() > 0:
        raise InvalidArgument("Kategori sudah ada")
    if body.parent_id and db.get(Category, body.parent_id) is None:
        raise InvalidArgument("Kategori induk tidak ditemukan")

    c = Category(name=body.name, slug=slug, type=body.type, parent_id=body.parent_id or None)
    db.add(c)
    commit_or_rollback(db)
    db.refresh(c)
    return CategoryOut.model_validate(c)
