# backend/routers/admin_users_router.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from database.session import commit_or_rollback, get_db
from models.enums import Role
from models.listing_model import Listing
from models.user_model import User
from schemas.base import ActionResult
from schemas.users import UserOut, UserUpdate
from services.auth import hash_password, require_admin
from services.errors import InvalidArgument, NotFound
from services.lifecycle import parse_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin-users"])


def _get_user(db: Session, user_id: str) -> User:
    u = db.get(User, user_id)
    if not u:
        raise NotFound("User tidak ditemukan")
    return u


def _with_count(db: Session, u: User) -> UserOut:
    count = db.query(func.count(Listing.id)).filter(Listing.user_id == u.id).scalar()
    return UserOut.model_validate(u).model_copy(update={"listing_count": int(count or 0)})


@router.get("", response_model=List[UserOut])
def list_users(
    role: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    q = db.query(User)
    if role:
        q = q.filter(User.role == parse_status(Role, role))
    return [UserOut.model_validate(u) for u in q.order_by(User.created_at.desc()).all()]


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return _with_count(db, _get_user(db, user_id))


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    body: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    u = _get_user(db, user_id)
    if u.id == admin.id and body.role is not None and body.role != Role.ADMIN:
        raise InvalidArgument("Tidak dapat mengubah role admin milik sendiri")

    if body.name is not None:
        u.name = body.name
    if body.phone is not None:
        u.phone = body.phone
    if body.role is not None:
        u.role = body.role
    if body.is_verified is not None:
        u.is_verified = body.is_verified
    if body.password:
        u.password = hash_password(body.password)

    commit_or_rollback(db)
    db.refresh(u)
    return UserOut.model_validate(u)


@router.delete("/{user_id}", response_model=ActionResult)
def delete_user(user_id: str, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    u = _get_user(db, user_id)
    if u.id == admin.id:
        raise InvalidArgument("Tidak dapat menghapus akun sendiri")
    # listings go with the user (relationship cascade)
    db.delete(u)
    commit_or_rollback(db)
    logger.info(f"User {user_id} deleted by admin {admin.id}")
    return ActionResult(message="User berhasil dihapus")
