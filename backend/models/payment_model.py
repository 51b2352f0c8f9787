# backend/models/payment_model.py
from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import PaymentMethod, PaymentStatus, PromotionPaymentStatus


class Payment(Base):
    """Proof/verification record of an ad payment (one per ad)."""
    __tablename__ = "payments"

    id          = Column(String(36), primary_key=True, default=new_id)
    ad_id       = Column(String(36), ForeignKey("ads.id"), nullable=False, unique=True)
    method      = Column(enum_column_type(PaymentMethod), nullable=False)
    proof_image = Column(Unicode(500))
    status      = Column(enum_column_type(PaymentStatus), nullable=False, default=PaymentStatus.VERIFICATION)
    verified_by = Column(String(36), ForeignKey("users.id"))
    verified_at = Column(DateTime)
    created_at  = Column(DateTime, default=utcnow)
    updated_at  = Column(DateTime, default=utcnow, onupdate=utcnow)

    ad = relationship("Ad", back_populates="payment")


class PromotionPayment(Base):
    """Payment record for promoting an existing listing (one per listing)."""
    __tablename__ = "promotion_payments"

    id               = Column(String(36), primary_key=True, default=new_id)
    listing_id       = Column(String(36), ForeignKey("listings.id"), nullable=False, unique=True)
    provider_id      = Column(String(36), ForeignKey("users.id"), nullable=False)
    amount           = Column(Numeric(14, 2), nullable=False)
    method           = Column(enum_column_type(PaymentMethod), nullable=False)
    proof_image      = Column(Unicode(500))
    status           = Column(enum_column_type(PromotionPaymentStatus), nullable=False,
                              default=PromotionPaymentStatus.PENDING)
    rejection_reason = Column(Unicode(500))
    verified_by      = Column(String(36), ForeignKey("users.id"))
    verified_at      = Column(DateTime)
    created_at       = Column(DateTime, default=utcnow)
    updated_at       = Column(DateTime, default=utcnow, onupdate=utcnow)

    listing = relationship("Listing", back_populates="promotion")
