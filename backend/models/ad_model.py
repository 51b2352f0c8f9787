# backend/models/ad_model.py
from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import AdPaymentStatus, AdStatus, PaymentMethod


class Ad(Base):
    __tablename__ = "ads"

    id             = Column(String(36), primary_key=True, default=new_id)
    title          = Column(Unicode(255), nullable=False)
    description    = Column(UnicodeText)
    location       = Column(Unicode(255))
    price          = Column(Numeric(14, 2), nullable=False)
    start_date     = Column(DateTime, nullable=False)
    end_date       = Column(DateTime, nullable=False)
    provider_id    = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    listing_id     = Column(String(36), ForeignKey("listings.id", ondelete="SET NULL"), nullable=True)
    status         = Column(enum_column_type(AdStatus), nullable=False, default=AdStatus.PENDING_APPROVAL)
    payment_method = Column(enum_column_type(PaymentMethod), nullable=False, default=PaymentMethod.TRANSFER)
    payment_status = Column(enum_column_type(AdPaymentStatus), nullable=False, default=AdPaymentStatus.UNPAID)
    created_at     = Column(DateTime, default=utcnow)
    updated_at     = Column(DateTime, default=utcnow, onupdate=utcnow)

    provider = relationship("User", foreign_keys=[provider_id])
    listing  = relationship("Listing", foreign_keys=[listing_id])
    payment  = relationship("Payment", back_populates="ad", uselist=False, cascade="all, delete-orphan")
