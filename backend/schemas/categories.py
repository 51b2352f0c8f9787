# backend/schemas/categories.py
from typing import NewType, Optional

from pydantic import constr

from models.enums import CategoryType
from schemas.base import CamelModel, ORMModel

CategoryName = NewType("CategoryName", constr(strip_whitespace=True, min_length=1, max_length=100))


class CategoryCreate(CamelModel):
    name: CategoryName
    type: CategoryType
    parent_id: Optional[str] = None


class CategoryOut(ORMModel):
    id: str
    name: str
    slug: str
    type: CategoryType
    parent_id: Optional[str] = None


class CategoryWithCount(CategoryOut):
    listing_count: int = 0
