# backend/schemas/site_settings.py
from typing import Optional

from schemas.base import CamelModel, ORMModel


class SiteSettingsOut(ORMModel):
    id: str
    site_name: str
    logo: Optional[str] = None


class SiteSettingsUpdate(CamelModel):
    site_name: Optional[str] = None
    logo: Optional[str] = None
