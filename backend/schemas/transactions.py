# backend/schemas/transactions.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from models.enums import PaymentMethod, TransactionStatus
from schemas.base import CamelModel, ORMModel
from schemas.listings import OwnerMini


class TransactionCreate(CamelModel):
    listing_id: str
    amount: float = Field(gt=0)
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class TransactionUpdate(CamelModel):
    status: str
    payment_method: Optional[PaymentMethod] = None


class TransactionOut(ORMModel):
    id: str
    listing_id: str
    customer_id: str
    provider_id: str
    amount: float
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
    status: TransactionStatus
    created_at: Optional[datetime] = None
    customer: Optional[OwnerMini] = None
    provider: Optional[OwnerMini] = None
