# backend/queries/village_queries.py
from collections import OrderedDict
from typing import Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from models.village_model import Village

SEARCH_LIMIT = 20
BROWSE_LIMIT = 100


def search_villages(
    db: Session,
    district: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Village]:
    """Active villages for the location pickers.

    A search term narrows by case-insensitive name substring and caps the
    result at 20 rows; browsing without one is capped at 100.
    """
    q = db.query(Village).filter(Village.is_active.is_(True))
    if district:
        q = q.filter(Village.district == district)
    term = (search or "").strip()
    if term:
        q = q.filter(func.lower(Village.name).contains(term.lower(), autoescape=True))

    q = q.order_by(Village.district.asc(), Village.order.asc(), Village.name.asc())
    return q.limit(SEARCH_LIMIT if term else BROWSE_LIMIT).all()


def group_by_district(villages: List[Village]) -> Dict[str, List[Village]]:
    grouped: Dict[str, List[Village]] = OrderedDict()
    for v in villages:
        grouped.setdefault(v.district, []).append(v)
    return grouped


def admin_list_villages(
    db: Session,
    district: Optional[str] = None,
    active: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Village]:
    q = db.query(Village)
    if district:
        q = q.filter(Village.district == district)
    if active is not None:
        q = q.filter(Village.is_active.is_(active))
    if search:
        term = search.lower()
        q = q.filter(or_(
            func.lower(Village.name).contains(term, autoescape=True),
            func.lower(Village.district).contains(term, autoescape=True),
        ))
    return q.order_by(Village.order.asc(), Village.name.asc()).all()


def list_districts(db: Session) -> List[str]:
    rows = db.query(Village.district).distinct().order_by(Village.district.asc()).all()
    return [d for (d,) in rows]
