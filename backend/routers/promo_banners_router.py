# backend/routers/promo_banners_router.py
from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from database.session import commit_or_rollback, get_db
from models.promo_banner_model import PromoBanner
from models.user_model import User
from queries.banner_queries import active_banners, all_banners
from routers.http_cache import cache_for
from schemas.base import ActionResult
from schemas.promo_banners import BannerCreate, BannerOut, BannerUpdate
from services.auth import require_admin
from services.errors import InvalidArgument, NotFound

router = APIRouter(tags=["promo-banners"])


def _get_banner(db: Session, banner_id: str) -> PromoBanner:
    b = db.get(PromoBanner, banner_id)
    if not b:
        raise NotFound("Banner tidak ditemukan")
    return b


def _check_window(b: PromoBanner) -> None:
    if b.start_date and b.end_date and b.end_date < b.start_date:
        raise InvalidArgument("Tanggal berakhir harus setelah tanggal mulai")


@router.get("/promo-banners", response_model=List[BannerOut])
def public_banners(response: Response, position: str = Query(default="hero"), db: Session = Depends(get_db)):
    cache_for(response, 300)
    return [BannerOut.model_validate(b) for b in active_banners(db, position)]


@router.get("/admin/promo-banners", response_model=List[BannerOut])
def list_banners(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return [BannerOut.model_validate(b) for b in all_banners(db)]


@router.post("/admin/promo-banners", response_model=BannerOut, status_code=201)
def create_banner(body: BannerCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    b = PromoBanner(**body.model_dump())
    _check_window(b)
    db.add(b)
    commit_or_rollback(db)
    db.refresh(b)
    return BannerOut.model_validate(b)


@router.put("/admin/promo-banners/{banner_id}", response_model=BannerOut)
def update_banner(
    banner_id: str,
    body: BannerUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    b = _get_banner(db, banner_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        # dates may be cleared explicitly, everything else keeps its value on null
        if value is None and field not in ("subtitle", "link", "start_date", "end_date"):
            continue
        setattr(b, field, value)
    _check_window(b)
    commit_or_rollback(db)
    db.refresh(b)
    return BannerOut.model_validate(b)


@router.delete("/admin/promo-banners/{banner_id}", response_model=ActionResult)
def delete_banner(banner_id: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    db.delete(_get_banner(db, banner_id))
    commit_or_rollback(db)
    return ActionResult(message="Banner berhasil dihapus")
