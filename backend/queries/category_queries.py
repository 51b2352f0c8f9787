# backend/queries/category_queries.py
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.category_model import Category
from models.enums import ListingStatus
from models.listing_model import Listing


def categories_with_active_counts(db: Session) -> List[Tuple[Category, int]]:
    """Categories by name, each paired with its number of ACTIVE listings."""
    counts = dict(
        db.query(Listing.category_id, func.count(Listing.id))
        .filter(Listing.status == ListingStatus.ACTIVE)
        .group_by(Listing.category_id)
        .all()
    )
    categories = db.query(Category).order_by(Category.name.asc()).all()
    return [(c, int(counts.get(c.id, 0))) for c in categories]
