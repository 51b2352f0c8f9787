# backend/schemas/ads.py
from datetime import datetime
from typing import Optional

from pydantic import Field, constr

from models.enums import AdPaymentStatus, AdStatus, PaymentMethod, PaymentStatus
from schemas.base import CamelModel, ORMModel
from schemas.listings import OwnerMini


class AdCreate(CamelModel):
    title: constr(strip_whitespace=True, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    start_date: datetime
    end_date: datetime
    payment_method: PaymentMethod = PaymentMethod.TRANSFER
    listing_id: Optional[str] = None


class AdReview(CamelModel):
    action: str    # "approve" | "reject"


class AdVerify(CamelModel):
    status: str    # "PAID" | "REJECTED"


class ProofUpload(CamelModel):
    proof_image: constr(strip_whitespace=True, min_length=1)


class PaymentOut(ORMModel):
    id: str
    ad_id: str
    method: PaymentMethod
    proof_image: Optional[str] = None
    status: PaymentStatus
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ListingRef(ORMModel):
    id: str
    title: str
    slug: str


class AdOut(ORMModel):
    id: str
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    price: float
    start_date: datetime
    end_date: datetime
    provider_id: str
    listing_id: Optional[str] = None
    status: AdStatus
    payment_method: PaymentMethod
    payment_status: AdPaymentStatus
    created_at: Optional[datetime] = None
    provider: Optional[OwnerMini] = None
    listing: Optional[ListingRef] = None
    payment: Optional[PaymentOut] = None
