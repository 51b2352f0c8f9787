# backend/models/site_settings_model.py
from sqlalchemy import Column, DateTime, String
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import utcnow

SITE_SETTINGS_ID = "site_settings"


class SiteSettings(Base):
    __tablename__ = "site_settings"
    id         = Column(String(32), primary_key=True, default=SITE_SETTINGS_ID)
    site_name  = Column(Unicode(255), nullable=False)
    logo       = Column(Unicode(500))
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
