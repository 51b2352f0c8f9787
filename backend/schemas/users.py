# backend/schemas/users.py
from datetime import datetime
from typing import Literal, NewType, Optional

from pydantic import EmailStr, constr

from models.enums import Role
from schemas.base import CamelModel, ORMModel

Password = NewType("Password", constr(min_length=6, max_length=128))
Name = NewType("Name", constr(strip_whitespace=True, min_length=1, max_length=255))
Phone = NewType("Phone", constr(strip_whitespace=True, min_length=6, max_length=32))


class RegisterPayload(CamelModel):
    email: EmailStr
    password: Password
    name: Name
    phone: Phone
    # ADMIN accounts are never self-registered
    role: Literal["USER", "PROVIDER"] = "USER"


class UserSummary(ORMModel):
    id: str
    email: str
    name: str
    role: Role


class RegisterResponse(CamelModel):
    message: str = "Registrasi berhasil"
    user: UserSummary


class LoginPayload(CamelModel):
    email: EmailStr
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSummary


class UserOut(ORMModel):
    id: str
    email: str
    name: str
    phone: Optional[str] = None
    avatar: Optional[str] = None
    role: Role
    is_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    listing_count: Optional[int] = None


class UserUpdate(CamelModel):
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    role: Optional[Role] = None
    is_verified: Optional[bool] = None
    password: Optional[Password] = None
