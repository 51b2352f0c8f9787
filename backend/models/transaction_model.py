# backend/models/transaction_model.py
from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import UnicodeText

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import PaymentMethod, TransactionStatus


class Transaction(Base):
    __tablename__ = "transactions"
    id             = Column(String(36), primary_key=True, default=new_id)
    listing_id     = Column(String(36), ForeignKey("listings.id", ondelete="CASCADE"), nullable=False)
    customer_id    = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    provider_id    = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    amount         = Column(Numeric(14, 2), nullable=False)
    payment_method = Column(enum_column_type(PaymentMethod))
    notes          = Column(UnicodeText)
    status         = Column(enum_column_type(TransactionStatus), nullable=False, default=TransactionStatus.PENDING)
    created_at     = Column(DateTime, default=utcnow)
    updated_at     = Column(DateTime, default=utcnow, onupdate=utcnow)

    listing  = relationship("Listing")
    customer = relationship("User", foreign_keys=[customer_id])
    provider = relationship("User", foreign_keys=[provider_id])
