# backend/routers/villages_router.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import commit_or_rollback, get_db
from models.user_model import User
from models.village_model import Village
from queries.village_queries import admin_list_villages, group_by_district, list_districts, search_villages
from schemas.base import ActionResult
from schemas.villages import AdminVillageList, VillageCreate, VillageFull, VillageLookup, VillageOut, VillageUpdate
from services.auth import require_admin
from services.errors import NotFound

logger = logging.getLogger(__name__)

router = APIRouter(tags=["villages"])


def _get_village(db: Session, village_id: str) -> Village:
    v = db.get(Village, village_id)
    if not v:
        raise NotFound("Desa tidak ditemukan")
    return v


@router.get("/villages", response_model=VillageLookup)
def lookup_villages(
    district: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    villages = search_villages(db, district=district, search=search)
    grouped = group_by_district(villages)
    return VillageLookup(
        villages=[VillageOut.model_validate(v) for v in villages],
        grouped={d: [VillageOut.model_validate(v) for v in vs] for d, vs in grouped.items()},
    )


@router.get("/admin/villages", response_model=AdminVillageList)
def admin_villages(
    district: Optional[str] = Query(default=None),
    active: Optional[bool] = Query(default=None),
    search: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    villages = admin_list_villages(db, district=district, active=active, search=search)
    return AdminVillageList(
        villages=[VillageFull.model_validate(v) for v in villages],
        districts=list_districts(db),
    )


@router.get("/admin/villages/districts", response_model=List[str])
def districts(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return list_districts(db)


@router.post("/admin/villages", response_model=VillageFull, status_code=201)
def create_village(body: VillageCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    v = Village(**body.model_dump())
    db.add(v)
    commit_or_rollback(db)
    db.refresh(v)
    logger.info(f"Village created: {v.name} ({v.district})")
    return VillageFull.model_validate(v)


@router.put("/admin/villages/{village_id}", response_model=VillageFull)
def update_village(
    village_id: str,
    body: VillageUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    v = _get_village(db, village_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is None and field in ("name", "district", "is_active", "order"):
            continue
        setattr(v, field, value)
    commit_or_rollback(db)
    db.refresh(v)
    return VillageFull.model_validate(v)


@router.delete("/admin/villages/{village_id}", response_model=ActionResult)
def delete_village(village_id: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    v = _get_village(db, village_id)
    db.delete(v)
    commit_or_rollback(db)
    return ActionResult(message="Desa berhasil dihapus")
