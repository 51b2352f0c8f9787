# backend/models/bank_account_model.py
from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import BankAccountType


class BankAccount(Base):
    __tablename__ = "bank_accounts"
    id             = Column(String(36), primary_key=True, default=new_id)
    name           = Column(Unicode(120), nullable=False)     # bank / e-wallet name
    account_number = Column(String(64), nullable=False)
    account_name   = Column(Unicode(255), nullable=False)
    type           = Column(enum_column_type(BankAccountType), nullable=False, default=BankAccountType.BANK)
    is_active      = Column(Boolean, nullable=False, default=True)
    is_default     = Column(Boolean, nullable=False, default=False)
    created_at     = Column(DateTime, default=utcnow)
