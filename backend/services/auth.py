# backend/services/auth.py
"""Identity: password hashing, bearer tokens and role gates."""
import binascii
import hashlib
import hmac
import logging
import os
from datetime import datetime, timedelta
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from config.settings import settings
from database.session import get_db
from models.enums import Role
from models.user_model import User
from services.errors import Forbidden, Unauthorized

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# Stored format: "pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>"
_PBKDF2_PREFIX = "pbkdf2_sha256"
_PBKDF2_ITERATIONS = 100_000
_PBKDF2_SALT_BYTES = 16


def hash_password(password: str) -> str:
    salt = os.urandom(_PBKDF2_SALT_BYTES)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{_PBKDF2_PREFIX}${_PBKDF2_ITERATIONS}${binascii.hexlify(salt).decode()}${binascii.hexlify(dk).decode()}"


def verify_password(password: str, encoded: Optional[str]) -> bool:
    if not encoded:
        return False
    try:
        prefix, iter_str, salt_hex, hash_hex = encoded.split("$", 3)
        if prefix != _PBKDF2_PREFIX:
            return False
        salt = binascii.unhexlify(salt_hex)
        expected = binascii.unhexlify(hash_hex)
        iterations = int(iter_str)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(dk, expected)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": user.id,
        "role": Role(user.role).value,
        "verified": bool(user.is_verified),
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password):
        logger.warning(f"Authentication failed for {email}")
        return None
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise Unauthorized()
    try:
        payload = jwt.decode(credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT validation error: {e}")
        raise Unauthorized()
    user_id = payload.get("sub")
    user = db.get(User, user_id) if user_id else None
    if user is None:
        raise Unauthorized()
    return user


def has_role(user: User, *roles: Role) -> bool:
    return Role(user.role) in roles


def require_roles(*roles: Role) -> Callable[..., User]:
    """Dependency factory: the caller must be authenticated with one of ``roles``."""
    allowed = frozenset(roles)

    def _dependency(user: User = Depends(get_current_user)) -> User:
        if Role(user.role) not in allowed:
            logger.warning(f"User {user.id} with role {user.role} denied (needs {sorted(r.value for r in allowed)})")
            raise Forbidden()
        return user

    return _dependency


require_admin = require_roles(Role.ADMIN)
require_provider = require_roles(Role.PROVIDER)
require_provider_or_admin = require_roles(Role.PROVIDER, Role.ADMIN)
