# backend/services/listing_service.py
"""Listing moderation, provider listing CRUD and the promotion cycle."""
import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session, joinedload

from config.settings import settings
from database.session import commit_or_rollback
from models.category_model import Category
from models.enums import (
    ListingStatus,
    PaymentMethod,
    PromotionPaymentStatus,
    PromotionStatus,
    Role,
)
from models.listing_model import Listing
from models.payment_model import PromotionPayment
from models.user_model import User
from schemas.listings import ListingCreate, ListingUpdate
from services.auth import has_role
from services.errors import Forbidden, InvalidArgument, InvalidState, NotFound
from services.lifecycle import can_transition, ensure_transition, parse_status
from services.text_utils import unique_slug

logger = logging.getLogger(__name__)


def _detail_query(db: Session):
    return db.query(Listing).options(
        joinedload(Listing.user),
        joinedload(Listing.category),
        joinedload(Listing.promotion),
    )


def get_listing(db: Session, listing_id: str) -> Listing:
    listing = _detail_query(db).filter(Listing.id == listing_id).first()
    if not listing:
        raise NotFound("Listing tidak ditemukan")
    return listing


def get_listing_by_slug(db: Session, slug: str) -> Listing:
    listing = _detail_query(db).filter(Listing.slug == slug).first()
    if not listing:
        raise NotFound("Listing tidak ditemukan")
    return listing


def _ensure_owner(listing: Listing, user: User, allow_admin: bool = False) -> None:
    if allow_admin and has_role(user, Role.ADMIN):
        return
    if listing.user_id != user.id:
        logger.warning(f"User {user.id} tried to act on listing {listing.id} owned by {listing.user_id}")
        raise Forbidden("Listing bukan milik Anda")


def _resolve_category(db: Session, id_or_slug: str) -> Category:
    category = db.get(Category, id_or_slug)
    if category is None:
        category = db.query(Category).filter(Category.slug == id_or_slug).first()
    if category is None:
        raise InvalidArgument("Kategori tidak valid")
    return category


# ---------- moderation ----------

def set_status(db: Session, listing_id: str, new_status) -> Listing:
    target = parse_status(ListingStatus, new_status)
    listing = get_listing(db, listing_id)
    ensure_transition(listing.status, target)
    listing.status = target
    commit_or_rollback(db)
    logger.info(f"Listing {listing.id} status set to {target.value}")
    return get_listing(db, listing_id)


# ---------- provider CRUD ----------

def create_listing(db: Session, user: User, body: ListingCreate) -> Listing:
    category = _resolve_category(db, body.category_id)
    listing = Listing(
        title=body.title,
        slug=unique_slug(body.title),
        description=body.description,
        price=body.price,
        price_type=body.price_type,
        images=list(body.images),
        location=body.location,
        phone=body.phone,
        category_id=category.id,
        user_id=user.id,
        # admin-created listings skip moderation
        status=ListingStatus.ACTIVE if has_role(user, Role.ADMIN) else ListingStatus.PENDING,
    )
    db.add(listing)
    commit_or_rollback(db)
    db.refresh(listing)
    return listing


def update_listing(db: Session, user: User, listing_id: str, body: ListingUpdate) -> Listing:
    listing = get_listing(db, listing_id)
    _ensure_owner(listing, user, allow_admin=True)

    if body.category_id:
        listing.category_id = _resolve_category(db, body.category_id).id
    if body.title:
        listing.title = body.title
    if body.description:
        listing.description = body.description
    if body.price is not None:
        listing.price = body.price
    if body.price_type is not None:
        listing.price_type = body.price_type
    if body.images is not None:
        listing.images = list(body.images)
    if body.location:
        listing.location = body.location
    if body.phone:
        listing.phone = body.phone

    commit_or_rollback(db)
    return get_listing(db, listing_id)


def delete_listing(db: Session, user: User, listing_id: str) -> None:
    listing = get_listing(db, listing_id)
    _ensure_owner(listing, user, allow_admin=True)
    db.delete(listing)
    commit_or_rollback(db)
    logger.info(f"Listing {listing_id} deleted by {user.id}")


def increment_views(db: Session, slug: str) -> None:
    updated = (
        db.query(Listing)
        .filter(Listing.slug == slug)
        .update({Listing.views: Listing.views + 1}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        raise NotFound("Listing tidak ditemukan")
    commit_or_rollback(db)


# ---------- promotion cycle ----------

def request_promotion(db: Session, user: User, listing_id: str, days: int, method: PaymentMethod) -> PromotionPayment:
    if days < 1:
        raise InvalidArgument("Jumlah hari harus minimal 1")
    listing = get_listing(db, listing_id)
    _ensure_owner(listing, user)

    target = PromotionStatus.PENDING_APPROVAL if method == PaymentMethod.COD else PromotionStatus.WAITING_PAYMENT
    if listing.promotion_status == PromotionStatus.ACTIVE:
        raise InvalidState("Listing sudah dalam promosi aktif")
    ensure_transition(listing.promotion_status, target)

    total_price = days * settings.PROMOTION_PRICE_PER_DAY
    payment = listing.promotion
    if payment is None:
        payment = PromotionPayment(listing_id=listing.id, provider_id=user.id)
        db.add(payment)
    payment.amount = total_price
    payment.method = method
    payment.status = PromotionPaymentStatus.PENDING
    payment.proof_image = None
    payment.rejection_reason = None
    payment.verified_by = None
    payment.verified_at = None

    listing.promotion_status = target
    listing.promotion_days = days
    listing.promotion_price = total_price
    listing.promotion_priority = 0
    commit_or_rollback(db)
    db.refresh(payment)
    logger.info(f"Promotion requested for listing {listing.id}: {days} days via {method.value}")
    return payment


def upload_promotion_proof(db: Session, user: User, listing_id: str, proof_image: str) -> PromotionPayment:
    listing = get_listing(db, listing_id)
    _ensure_owner(listing, user)
    if listing.promotion is None:
        raise InvalidState("Tidak ada pembayaran yang pending")
    ensure_transition(listing.promotion_status, PromotionStatus.PAYMENT_UPLOADED,
                      "Promosi tidak dalam status menunggu pembayaran")

    listing.promotion.proof_image = proof_image
    listing.promotion.status = PromotionPaymentStatus.PENDING
    listing.promotion_status = PromotionStatus.PAYMENT_UPLOADED
    commit_or_rollback(db)
    db.refresh(listing.promotion)
    return listing.promotion


def review_promotion(db: Session, admin: User, listing_id: str, action: str, reason: str | None = None) -> Listing:
    listing = get_listing(db, listing_id)
    payment = listing.promotion
    now = datetime.utcnow()

    if action == "approve":
        ensure_transition(listing.promotion_status, PromotionStatus.ACTIVE)
        days = listing.promotion_days or settings.DEFAULT_PROMOTION_DAYS
        listing.promotion_status = PromotionStatus.ACTIVE
        listing.promotion_start = now
        listing.promotion_end = now + timedelta(days=days)
        listing.promotion_priority = 1
        if payment is not None:
            payment.status = PromotionPaymentStatus.VERIFIED
            payment.verified_by = admin.id
            payment.verified_at = now
    elif action == "reject":
        if not reason:
            raise InvalidArgument("Alasan penolakan wajib diisi")
        # an uploaded proof goes back for resubmission, a COD request is dropped
        if listing.promotion_status == PromotionStatus.PAYMENT_UPLOADED:
            target = PromotionStatus.WAITING_PAYMENT
        else:
            target = PromotionStatus.NONE
        ensure_transition(listing.promotion_status, target)
        listing.promotion_status = target
        listing.promotion_priority = 0
        if target == PromotionStatus.NONE:
            listing.promotion_days = None
            listing.promotion_price = None
        if payment is not None:
            payment.status = PromotionPaymentStatus.REJECTED
            payment.verified_by = admin.id
            payment.verified_at = now
            payment.rejection_reason = reason
    else:
        raise InvalidArgument("Aksi tidak valid")

    commit_or_rollback(db)
    logger.info(f"Promotion for listing {listing.id} {action}d by admin {admin.id}")
    return get_listing(db, listing_id)


def stop_promotion(db: Session, user: User, listing_id: str) -> Listing:
    listing = get_listing(db, listing_id)
    _ensure_owner(listing, user)
    if not can_transition(listing.promotion_status, PromotionStatus.STOPPED):
        raise Forbidden("Listing tidak dalam promosi aktif")

    listing.promotion_status = PromotionStatus.STOPPED
    listing.promotion_end = datetime.utcnow()
    if listing.promotion is not None:
        listing.promotion.status = PromotionPaymentStatus.VERIFIED
    commit_or_rollback(db)
    logger.info(f"Promotion for listing {listing.id} stopped by owner")
    return listing
