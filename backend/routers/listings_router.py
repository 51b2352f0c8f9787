# backend/routers/listings_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from queries.listing_queries import MAX_PAGE_SIZE, search_listings, total_pages
from routers.http_cache import cache_for
from schemas.base import ActionResult
from schemas.listings import ListingCreate, ListingDetail, ListingOut, ListingPage, Pagination
from services import listing_service
from services.auth import require_provider_or_admin

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("", response_model=ListingPage)
def list_listings(
    response: Response,
    q: str = Query(default=""),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    type: Optional[str] = Query(default=None),
    location: Optional[str] = Query(default=None),
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    status: Optional[str] = Query(default=None),
    sort_by: str = Query(default="newest", alias="sortBy"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    listings, total = search_listings(
        db,
        query=q,
        category_id=category_id,
        category_type=type,
        location=location,
        min_price=min_price,
        max_price=max_price,
        user_id=user_id,
        status=status,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )
    cache_for(response, 60)
    return ListingPage(
        listings=[ListingDetail.model_validate(l) for l in listings],
        pagination=Pagination(page=page, limit=limit, total=total, total_pages=total_pages(total, limit)),
    )


@router.post("", response_model=ListingOut, status_code=201)
def create_listing(
    body: ListingCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_provider_or_admin),
):
    return ListingOut.model_validate(listing_service.create_listing(db, user, body))


@router.get("/{slug}", response_model=ListingDetail)
def get_listing(slug: str, db: Session = Depends(get_db)):
    return ListingDetail.model_validate(listing_service.get_listing_by_slug(db, slug))


@router.post("/{slug}", response_model=ActionResult)
def record_view(slug: str, db: Session = Depends(get_db)):
    listing_service.increment_views(db, slug)
    return ActionResult(message="ok")
