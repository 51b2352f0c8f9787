# backend/routers/admin_listings_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from models.enums import PromotionStatus
from models.user_model import User
from queries import listing_queries
from schemas.listings import ListingDetail, ListingStatusUpdate, PromotionList, PromotionReview
from services import listing_service
from services.auth import require_admin

router = APIRouter(prefix="/admin", tags=["admin-listings"])


@router.get("/listings", response_model=List[ListingDetail])
def list_listings(
    status: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return [ListingDetail.model_validate(l) for l in listing_queries.admin_listings(db, status)]


@router.patch("/listings/{listing_id}", response_model=ListingDetail)
def set_listing_status(
    listing_id: str,
    body: ListingStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return ListingDetail.model_validate(listing_service.set_status(db, listing_id, body.status))


@router.get("/promotions", response_model=PromotionList)
def list_promotions(
    status: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    listings = listing_queries.promotions(db, status)
    return PromotionList(promotions=[ListingDetail.model_validate(l) for l in listings])


@router.post("/promotions/{listing_id}")
def review_promotion(
    listing_id: str,
    body: PromotionReview,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    listing = listing_service.review_promotion(db, admin, listing_id, body.action, body.reason)
    if listing.promotion_status == PromotionStatus.ACTIVE:
        return {
            "success": True,
            "message": "Promosi berhasil disetujui dan diaktifkan",
            "activeUntil": listing.promotion_end.isoformat(),
        }
    return {"success": True, "message": "Promosi telah ditolak"}
