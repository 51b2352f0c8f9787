# backend/services/payment_service.py
"""Ads and their payment verification.

An ad goes PENDING_APPROVAL -> WAITING_PAYMENT (admin approve) -> ACTIVE once an
admin marks the payment PAID. The verdict applies to an ad in any status; a
rejected payment puts the ad in WAITING_PAYMENT so the provider can upload a
new proof.
"""
import logging
import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from config.settings import settings
from database.session import commit_or_rollback
from models.ad_model import Ad
from models.enums import AdPaymentStatus, AdStatus, PaymentMethod, PaymentStatus, Role
from models.listing_model import Listing
from models.payment_model import Payment
from models.user_model import User
from schemas.ads import AdCreate
from services.auth import has_role
from services.errors import Forbidden, InvalidArgument, InvalidState, NotFound
from services.lifecycle import ensure_transition, parse_status

logger = logging.getLogger(__name__)

VERIFY_DECISIONS = {"PAID", "REJECTED"}


def _ad_query(db: Session):
    return db.query(Ad).options(
        joinedload(Ad.provider),
        joinedload(Ad.listing),
        joinedload(Ad.payment),
    )


def get_ad(db: Session, ad_id: str) -> Ad:
    ad = _ad_query(db).filter(Ad.id == ad_id).first()
    if not ad:
        raise NotFound("Iklan tidak ditemukan")
    return ad


def list_ads(db: Session, user: User, status: Optional[str] = None) -> List[Ad]:
    q = _ad_query(db)
    # providers only ever see their own ads
    if has_role(user, Role.PROVIDER):
        q = q.filter(Ad.provider_id == user.id)
    if status:
        q = q.filter(Ad.status == parse_status(AdStatus, status))
    return q.order_by(Ad.created_at.desc()).all()


def create_ad(db: Session, user: User, body: AdCreate) -> Ad:
    if body.listing_id:
        listing = (
            db.query(Listing)
            .filter(Listing.id == body.listing_id, Listing.user_id == user.id)
            .first()
        )
        if not listing:
            raise InvalidArgument("Listing tidak ditemukan")

    days = math.ceil((body.end_date - body.start_date).total_seconds() / 86400)
    if days <= 0:
        raise InvalidArgument("Tanggal berakhir harus setelah tanggal mulai")

    ad = Ad(
        title=body.title,
        description=body.description,
        location=body.location,
        price=body.price if body.price is not None else days * settings.AD_PRICE_PER_DAY,
        start_date=body.start_date,
        end_date=body.end_date,
        payment_method=body.payment_method,
        status=AdStatus.PENDING_APPROVAL,
        payment_status=AdPaymentStatus.UNPAID,
        provider_id=user.id,
        listing_id=body.listing_id or None,
    )
    db.add(ad)
    commit_or_rollback(db)
    return get_ad(db, ad.id)


def review_ad(db: Session, ad_id: str, action: str) -> Ad:
    targets = {"approve": AdStatus.WAITING_PAYMENT, "reject": AdStatus.REJECTED}
    if action not in targets:
        raise InvalidArgument("Action tidak valid")
    ad = get_ad(db, ad_id)
    if ad.status != AdStatus.PENDING_APPROVAL:
        raise InvalidState("Iklan tidak dalam status menunggu persetujuan")
    ad.status = ensure_transition(ad.status, targets[action])
    commit_or_rollback(db)
    logger.info(f"Ad {ad_id} {action}d")
    return get_ad(db, ad_id)


def upload_proof(db: Session, user: User, ad_id: str, proof_image: str) -> Payment:
    ad = get_ad(db, ad_id)

    # state first: the outcome for a wrong-state ad does not depend on who asks
    if ad.status != AdStatus.WAITING_PAYMENT:
        raise InvalidState("Iklan tidak dalam status menunggu pembayaran")
    if ad.payment_method != PaymentMethod.TRANSFER:
        raise InvalidState("Metode pembayaran bukan transfer")
    if ad.provider_id != user.id:
        logger.warning(f"User {user.id} tried to upload proof for ad {ad_id}")
        raise Forbidden()

    payment = ad.payment
    if payment is None:
        payment = Payment(ad_id=ad.id, method=PaymentMethod.TRANSFER)
        db.add(payment)
    else:
        ensure_transition(payment.status, PaymentStatus.VERIFICATION)
    payment.proof_image = proof_image
    payment.status = PaymentStatus.VERIFICATION
    ad.payment_status = ensure_transition(ad.payment_status, AdPaymentStatus.VERIFICATION)

    commit_or_rollback(db)
    db.refresh(payment)
    return payment


def verify(db: Session, admin: User, ad_id: str, decision: str) -> Ad:
    if decision not in VERIFY_DECISIONS:
        raise InvalidArgument("Status verifikasi tidak valid")
    ad = get_ad(db, ad_id)

    payment = ad.payment
    if payment is None:
        # no proof uploaded (COD, or settled before an upload)
        payment = Payment(ad_id=ad.id, method=ad.payment_method, status=PaymentStatus.VERIFICATION)
        db.add(payment)
        ad.payment = payment

    if decision == "PAID":
        payment.status = ensure_transition(payment.status or PaymentStatus.VERIFICATION, PaymentStatus.PAID)
        payment.verified_by = admin.id
        payment.verified_at = datetime.utcnow()
        ad.status = ensure_transition(ad.status, AdStatus.ACTIVE)
        ad.payment_status = ensure_transition(ad.payment_status, AdPaymentStatus.PAID)
    else:
        payment.status = ensure_transition(payment.status or PaymentStatus.VERIFICATION,
                                           PaymentStatus.PAYMENT_REJECTED)
        payment.verified_by = admin.id
        payment.verified_at = None
        ad.status = ensure_transition(ad.status, AdStatus.WAITING_PAYMENT)
        ad.payment_status = ensure_transition(ad.payment_status, AdPaymentStatus.PAYMENT_REJECTED)

    # Payment and Ad are committed together
    commit_or_rollback(db)
    logger.info(f"Ad {ad_id} payment marked {decision} by admin {admin.id}")
    return get_ad(db, ad_id)
