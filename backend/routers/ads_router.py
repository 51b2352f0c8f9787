# backend/routers/ads_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from schemas.ads import AdCreate, AdOut, PaymentOut, ProofUpload
from services import payment_service
from services.auth import get_current_user, require_provider_or_admin

router = APIRouter(prefix="/ads", tags=["ads"])


@router.get("", response_model=List[AdOut])
def list_ads(
    status: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    user: User = Depends(require_provider_or_admin),
):
    return [AdOut.model_validate(a) for a in payment_service.list_ads(db, user, status)]


@router.post("", response_model=AdOut, status_code=201)
def create_ad(body: AdCreate, db: Session = Depends(get_db), user: User = Depends(require_provider_or_admin)):
    return AdOut.model_validate(payment_service.create_ad(db, user, body))


@router.post("/{ad_id}/upload-proof", response_model=PaymentOut)
def upload_proof(
    ad_id: str,
    body: ProofUpload,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return PaymentOut.model_validate(payment_service.upload_proof(db, user, ad_id, body.proof_image))
