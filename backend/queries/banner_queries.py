# backend/queries/banner_queries.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models.promo_banner_model import PromoBanner


def active_banners(db: Session, position: str = "hero", now: Optional[datetime] = None) -> List[PromoBanner]:
    """Banners that are switched on and whose [start_date, end_date] window
    contains ``now``; a NULL bound leaves that side open."""
    now = now or datetime.utcnow()
    return (
        db.query(PromoBanner)
        .filter(
            PromoBanner.is_active.is_(True),
            PromoBanner.position == position,
            or_(PromoBanner.start_date.is_(None), PromoBanner.start_date <= now),
            or_(PromoBanner.end_date.is_(None), PromoBanner.end_date >= now),
        )
        .order_by(PromoBanner.order.asc())
        .all()
    )


def all_banners(db: Session) -> List[PromoBanner]:
    return db.query(PromoBanner).order_by(PromoBanner.order.asc()).all()
