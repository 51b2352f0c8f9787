# backend/routers/admin_ads_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from schemas.ads import AdOut, AdReview, AdVerify
from services import payment_service
from services.auth import require_admin

router = APIRouter(prefix="/admin/ads", tags=["admin-ads"])


@router.get("/{ad_id}", response_model=AdOut)
def get_ad(ad_id: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return AdOut.model_validate(payment_service.get_ad(db, ad_id))


@router.patch("/{ad_id}", response_model=AdOut)
def review_ad(ad_id: str, body: AdReview, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return AdOut.model_validate(payment_service.review_ad(db, ad_id, body.action))


@router.post("/{ad_id}/verify", response_model=AdOut)
def verify_payment(ad_id: str, body: AdVerify, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return AdOut.model_validate(payment_service.verify(db, admin, ad_id, body.status))
