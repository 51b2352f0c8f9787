# backend/queries/stats_queries.py
import asyncio
import logging
from typing import Callable

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import func
from sqlalchemy.orm import Session

from models.category_model import Category
from models.enums import ListingStatus, Role
from models.listing_model import Listing
from models.user_model import User
from schemas.stats import StatsOut

logger = logging.getLogger(__name__)


def _count(session_factory: Callable[[], Session], build) -> int:
    # one session per count: sessions are not shared across threads
    db = session_factory()
    try:
        return int(build(db).scalar() or 0)
    finally:
        db.close()


def _providers(db: Session):
    return db.query(func.count(User.id)).filter(User.role == Role.PROVIDER)


def _active_listings(db: Session):
    return db.query(func.count(Listing.id)).filter(Listing.status == ListingStatus.ACTIVE)


def _users(db: Session):
    return db.query(func.count(User.id))


def _categories(db: Session):
    return db.query(func.count(Category.id))


async def collect_stats(session_factory: Callable[[], Session]) -> StatsOut:
    """Homepage counters, fetched concurrently. Raises if any count fails."""
    providers, active_listings, users, categories = await asyncio.gather(
        run_in_threadpool(_count, session_factory, _providers),
        run_in_threadpool(_count, session_factory, _active_listings),
        run_in_threadpool(_count, session_factory, _users),
        run_in_threadpool(_count, session_factory, _categories),
    )
    return StatsOut(
        providers=providers,
        active_listings=active_listings,
        users=users,
        categories=categories,
    )
