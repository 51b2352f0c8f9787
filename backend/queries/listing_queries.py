# backend/queries/listing_queries.py
import math
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session, joinedload

from models.category_model import Category
from models.enums import CategoryType, ListingStatus, PromotionStatus
from models.listing_model import Listing
from services.lifecycle import parse_status

SORTS = {
    "newest": Listing.created_at.desc(),
    "price_asc": Listing.price.asc(),
    "price_desc": Listing.price.desc(),
    "popular": Listing.views.desc(),
}

PENDING_PROMOTION = (
    PromotionStatus.PENDING_APPROVAL,
    PromotionStatus.WAITING_PAYMENT,
    PromotionStatus.PAYMENT_UPLOADED,
)

MAX_PAGE_SIZE = 50


def _with_relations(q):
    return q.options(
        joinedload(Listing.user),
        joinedload(Listing.category),
        joinedload(Listing.promotion),
    )


def search_listings(
    db: Session,
    query: str = "",
    category_id: Optional[str] = None,
    category_type: Optional[str] = None,
    location: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    user_id: Optional[str] = None,
    status: Optional[str] = None,
    sort_by: str = "newest",
    page: int = 1,
    limit: int = 12,
    now: Optional[datetime] = None,
) -> Tuple[List[Listing], int]:
    """Public search. Without an owner filter only ACTIVE listings are visible;
    running promotions are listed before everything else."""
    now = now or datetime.utcnow()
    q = db.query(Listing)

    if user_id:
        q = q.filter(Listing.user_id == user_id)
    if status:
        q = q.filter(Listing.status == parse_status(ListingStatus, status))
    elif not user_id:
        q = q.filter(Listing.status == ListingStatus.ACTIVE)

    if query:
        term = query.lower()
        q = q.filter(or_(
            func.lower(Listing.title).contains(term, autoescape=True),
            func.lower(Listing.description).contains(term, autoescape=True),
        ))
    if category_id:
        q = q.filter(Listing.category_id == category_id)
    if category_type:
        q = q.join(Category, Category.id == Listing.category_id).filter(
            Category.type == parse_status(CategoryType, category_type)
        )
    if location:
        q = q.filter(func.lower(Listing.location).contains(location.lower(), autoescape=True))
    if min_price is not None:
        q = q.filter(Listing.price >= min_price)
    if max_price is not None:
        q = q.filter(Listing.price <= max_price)

    total = q.count()

    promoted_first = case(
        (and_(Listing.promotion_status == PromotionStatus.ACTIVE, Listing.promotion_end > now), 1),
        else_=0,
    ).desc()
    page = max(page, 1)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)
    listings = (
        _with_relations(q)
        .order_by(promoted_first, SORTS.get(sort_by, SORTS["newest"]))
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return listings, total


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def listings_of_owner(db: Session, user_id: str) -> List[Listing]:
    return (
        _with_relations(db.query(Listing))
        .filter(Listing.user_id == user_id)
        .order_by(Listing.created_at.desc())
        .all()
    )


def admin_listings(db: Session, status: Optional[str] = None) -> List[Listing]:
    q = _with_relations(db.query(Listing))
    if status:
        q = q.filter(Listing.status == parse_status(ListingStatus, status))
    return q.order_by(Listing.created_at.desc()).all()


def promotions(db: Session, status: Optional[str] = None) -> List[Listing]:
    """Listings with any promotion activity, filtered by ``pending``/``active``
    or an exact promotion status."""
    q = _with_relations(db.query(Listing)).filter(Listing.promotion_status != PromotionStatus.NONE)
    if status == "pending":
        q = q.filter(Listing.promotion_status.in_(PENDING_PROMOTION))
    elif status == "active":
        q = q.filter(Listing.promotion_status == PromotionStatus.ACTIVE)
    elif status:
        q = q.filter(Listing.promotion_status == parse_status(PromotionStatus, status))
    return q.order_by(Listing.updated_at.desc()).all()
