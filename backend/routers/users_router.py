# backend/routers/users_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.session import commit_or_rollback, get_db
from models.enums import Role
from models.user_model import User
from schemas.users import (
    LoginPayload,
    RegisterPayload,
    RegisterResponse,
    TokenResponse,
    UserOut,
    UserSummary,
)
from services.auth import authenticate_user, create_access_token, get_current_user, hash_password
from services.errors import InvalidArgument, Unauthorized

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register_user(body: RegisterPayload, db: Session = Depends(get_db)):
    email = body.email.lower()
    if db.query(User).filter(User.email == email).count() > 0:
        raise InvalidArgument("Email sudah terdaftar")

    role = Role(body.role)
    u = User(
        email=email,
        password=hash_password(body.password),
        name=body.name,
        phone=body.phone,
        role=role,
        # providers are verified by an admin, regular users are trusted right away
        is_verified=role != Role.PROVIDER,
    )
    db.add(u)
    try:
        commit_or_rollback(db)
    except IntegrityError:
        # a concurrent registration won the unique email
        raise InvalidArgument("Email sudah terdaftar")
    db.refresh(u)
    logger.info(f"Registered {role.value} account {u.id}")
    return RegisterResponse(user=UserSummary.model_validate(u))


@router.post("/login", response_model=TokenResponse)
def login(body: LoginPayload, db: Session = Depends(get_db)):
    u = authenticate_user(db, body.email.lower(), body.password)
    if not u:
        raise Unauthorized("Email atau password salah")
    return TokenResponse(access_token=create_access_token(u), user=UserSummary.model_validate(u))


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return UserOut.model_validate(current_user)
