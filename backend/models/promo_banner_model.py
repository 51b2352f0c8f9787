# backend/models/promo_banner_model.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import new_id, utcnow


class PromoBanner(Base):
    __tablename__ = "promo_banners"
    id         = Column(String(36), primary_key=True, default=new_id)
    title      = Column(Unicode(255), nullable=False)
    subtitle   = Column(Unicode(255))
    image      = Column(Unicode(500), nullable=False)
    link       = Column(Unicode(500))
    position   = Column(String(32), nullable=False, default="hero")
    is_active  = Column(Boolean, nullable=False, default=True)
    order      = Column(Integer, nullable=False, default=0)
    start_date = Column(DateTime)   # NULL = open start
    end_date   = Column(DateTime)   # NULL = open end
    created_at = Column(DateTime, default=utcnow)
