# backend/models/listing_model.py
from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import ListingStatus, PriceType, PromotionStatus


class Listing(Base):
    __tablename__ = "listings"

    id          = Column(String(36), primary_key=True, default=new_id)
    slug        = Column(String(255), nullable=False, unique=True, index=True)
    title       = Column(Unicode(255), nullable=False)
    description = Column(UnicodeText, nullable=False)
    price       = Column(Numeric(14, 2), nullable=False)
    price_type  = Column(enum_column_type(PriceType), nullable=False, default=PriceType.FIXED)
    images      = Column(JSON, nullable=False, default=list)
    location    = Column(Unicode(255), nullable=False)
    phone       = Column(Unicode(32), nullable=False)
    status      = Column(enum_column_type(ListingStatus), nullable=False, default=ListingStatus.PENDING, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    views       = Column(Integer, nullable=False, default=0)
    user_id     = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)

    promotion_status   = Column(enum_column_type(PromotionStatus), nullable=False, default=PromotionStatus.NONE)
    promotion_days     = Column(Integer)
    promotion_price    = Column(Numeric(14, 2))
    promotion_priority = Column(Integer, nullable=False, default=0)
    promotion_start    = Column(DateTime)
    promotion_end      = Column(DateTime)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user      = relationship("User", back_populates="listings")
    category  = relationship("Category", back_populates="listings")
    promotion = relationship(
        "PromotionPayment", back_populates="listing", uselist=False, cascade="all, delete-orphan"
    )
