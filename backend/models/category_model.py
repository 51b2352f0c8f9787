# backend/models/category_model.py
from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import CategoryType


class Category(Base):
    __tablename__ = "categories"

    id         = Column(String(36), primary_key=True, default=new_id)
    name       = Column(Unicode(100), nullable=False)
    slug       = Column(String(120), nullable=False, unique=True, index=True)
    type       = Column(enum_column_type(CategoryType), nullable=False)
    parent_id  = Column(String(36), ForeignKey("categories.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)

    parent   = relationship("Category", remote_side=[id])
    listings = relationship("Listing", back_populates="category")
