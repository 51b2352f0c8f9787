# backend/schemas/promo_banners.py
from datetime import datetime
from typing import Optional

from pydantic import constr

from schemas.base import CamelModel, ORMModel


class BannerCreate(CamelModel):
    title: constr(strip_whitespace=True, min_length=1, max_length=255)
    subtitle: Optional[str] = None
    image: constr(strip_whitespace=True, min_length=1)
    link: Optional[str] = None
    position: str = "hero"
    is_active: bool = True
    order: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class BannerUpdate(CamelModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    position: Optional[str] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class BannerOut(ORMModel):
    id: str
    title: str
    subtitle: Optional[str] = None
    image: str
    link: Optional[str] = None
    position: str
    is_active: bool
    order: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
