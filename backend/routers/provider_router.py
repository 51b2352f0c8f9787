# backend/routers/provider_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.enums import PaymentMethod
from models.user_model import User
from queries.listing_queries import listings_of_owner
from schemas.base import ActionResult
from schemas.listings import (
    ListingDetail,
    ListingUpdate,
    PromoteRequest,
    PromotionPaymentOut,
    PromotionProofUpload,
)
from services import listing_service
from services.auth import require_provider, require_provider_or_admin

router = APIRouter(prefix="/provider", tags=["provider"])


@router.get("/listings", response_model=List[ListingDetail])
def my_listings(db: Session = Depends(get_db), user: User = Depends(require_provider_or_admin)):
    return [ListingDetail.model_validate(l) for l in listings_of_owner(db, user.id)]


@router.put("/listings/{listing_id}", response_model=ListingDetail)
def update_listing(
    listing_id: str,
    body: ListingUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(require_provider_or_admin),
):
    return ListingDetail.model_validate(listing_service.update_listing(db, user, listing_id, body))


@router.delete("/listings/{listing_id}", response_model=ActionResult)
def delete_listing(listing_id: str, db: Session = Depends(get_db), user: User = Depends(require_provider_or_admin)):
    listing_service.delete_listing(db, user, listing_id)
    return ActionResult(message="Listing berhasil dihapus")


@router.post("/listings/{listing_id}/promote")
def promote_listing(
    listing_id: str,
    body: PromoteRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_provider),
):
    payment = listing_service.request_promotion(db, user, listing_id, body.days, body.method)
    if body.method == PaymentMethod.COD:
        message = "Permintaan promosi telah diajukan dan menunggu persetujuan admin"
    else:
        message = "Silakan lakukan pembayaran untuk melanjutkan promosi"
    return {
        "success": True,
        "message": message,
        "payment": PromotionPaymentOut.model_validate(payment).model_dump(mode="json", by_alias=True),
    }


@router.post("/listings/{listing_id}/stop-promotion", response_model=ActionResult)
def stop_promotion(listing_id: str, db: Session = Depends(get_db), user: User = Depends(require_provider)):
    listing_service.stop_promotion(db, user, listing_id)
    return ActionResult(message="Promosi berhasil dihentikan")


@router.post("/promotions/upload-proof")
def upload_promotion_proof(
    body: PromotionProofUpload,
    db: Session = Depends(get_db),
    user: User = Depends(require_provider),
):
    payment = listing_service.upload_promotion_proof(db, user, body.listing_id, body.proof_image)
    return {
        "success": True,
        "message": "Bukti pembayaran telah diupload dan menunggu verifikasi admin",
        "proofUrl": payment.proof_image,
    }
