# backend/schemas/listings.py
from datetime import datetime
from typing import List, Literal, NewType, Optional

from pydantic import Field, constr

from models.enums import (
    CategoryType,
    ListingStatus,
    PaymentMethod,
    PriceType,
    PromotionPaymentStatus,
    PromotionStatus,
)
from schemas.base import CamelModel, ORMModel

Title = NewType("Title", constr(strip_whitespace=True, min_length=1, max_length=255))


class ListingCreate(CamelModel):
    title: Title
    description: constr(strip_whitespace=True, min_length=1)
    price: float = Field(gt=0)
    price_type: PriceType = PriceType.FIXED
    images: List[str] = []
    location: constr(strip_whitespace=True, min_length=1)
    phone: constr(strip_whitespace=True, min_length=1)
    # accepts either the category id or its slug
    category_id: constr(strip_whitespace=True, min_length=1)


class ListingUpdate(CamelModel):
    title: Optional[Title] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    price_type: Optional[PriceType] = None
    images: Optional[List[str]] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    category_id: Optional[str] = None


class ListingStatusUpdate(CamelModel):
    # validated against ListingStatus by the service so a bad value is an InvalidArgument
    status: str


class OwnerMini(ORMModel):
    id: str
    name: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    phone: Optional[str] = None
    is_verified: Optional[bool] = None


class CategoryMini(ORMModel):
    id: str
    name: str
    slug: Optional[str] = None
    type: Optional[CategoryType] = None


class PromotionPaymentOut(ORMModel):
    id: str
    listing_id: str
    amount: float
    method: PaymentMethod
    proof_image: Optional[str] = None
    status: PromotionPaymentStatus
    rejection_reason: Optional[str] = None
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ListingOut(ORMModel):
    id: str
    slug: str
    title: str
    description: str
    price: float
    price_type: PriceType
    images: List[str] = []
    location: str
    phone: str
    status: ListingStatus
    is_featured: bool
    views: int
    user_id: str
    category_id: str
    promotion_status: PromotionStatus
    promotion_days: Optional[int] = None
    promotion_price: Optional[float] = None
    promotion_priority: int = 0
    promotion_start: Optional[datetime] = None
    promotion_end: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListingDetail(ListingOut):
    user: Optional[OwnerMini] = None
    category: Optional[CategoryMini] = None
    promotion: Optional[PromotionPaymentOut] = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ListingPage(CamelModel):
    listings: List[ListingDetail]
    pagination: Pagination


class PromoteRequest(CamelModel):
    days: int = Field(ge=1, le=365)
    method: PaymentMethod = PaymentMethod.TRANSFER


class PromotionProofUpload(CamelModel):
    listing_id: str
    proof_image: constr(strip_whitespace=True, min_length=1)


class PromotionReview(CamelModel):
    action: Literal["approve", "reject"]
    reason: Optional[str] = None


class PromotionList(CamelModel):
    promotions: List[ListingDetail]
