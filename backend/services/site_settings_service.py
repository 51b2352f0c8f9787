# backend/services/site_settings_service.py
from sqlalchemy.orm import Session

from config.settings import settings
from database.session import commit_or_rollback
from models.site_settings_model import SITE_SETTINGS_ID, SiteSettings
from schemas.site_settings import SiteSettingsUpdate


def default_settings() -> SiteSettings:
    # transient, never added to the session
    return SiteSettings(id=SITE_SETTINGS_ID, site_name=settings.SITE_NAME, logo=None)


def read_settings(db: Session) -> SiteSettings:
    """Public read: falls back to defaults without writing."""
    return db.get(SiteSettings, SITE_SETTINGS_ID) or default_settings()


def get_or_create_settings(db: Session) -> SiteSettings:
    row = db.get(SiteSettings, SITE_SETTINGS_ID)
    if row is None:
        row = SiteSettings(id=SITE_SETTINGS_ID, site_name=settings.SITE_NAME)
        db.add(row)
        commit_or_rollback(db)
        db.refresh(row)
    return row


def update_settings(db: Session, body: SiteSettingsUpdate) -> SiteSettings:
    row = db.get(SiteSettings, SITE_SETTINGS_ID)
    if row is None:
        row = SiteSettings(id=SITE_SETTINGS_ID, site_name=body.site_name or settings.SITE_NAME, logo=body.logo)
        db.add(row)
    else:
        fields = body.model_dump(exclude_unset=True)
        if "site_name" in fields and body.site_name:
            row.site_name = body.site_name
        if "logo" in fields:
            row.logo = body.logo
    commit_or_rollback(db)
    db.refresh(row)
    return row
