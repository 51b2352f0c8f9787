# backend/routers/site_settings_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from schemas.site_settings import SiteSettingsOut, SiteSettingsUpdate
from services import site_settings_service
from services.auth import require_admin

router = APIRouter(tags=["site-settings"])


@router.get("/site-settings", response_model=SiteSettingsOut)
def public_settings(db: Session = Depends(get_db)):
    return SiteSettingsOut.model_validate(site_settings_service.read_settings(db))


@router.get("/admin/site-settings", response_model=SiteSettingsOut)
def admin_settings(db: Session = Depends(get_db)):
    # readable without a session so the header can render the logo
    return SiteSettingsOut.model_validate(site_settings_service.get_or_create_settings(db))


@router.put("/admin/site-settings", response_model=SiteSettingsOut)
def update_settings(body: SiteSettingsUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return SiteSettingsOut.model_validate(site_settings_service.update_settings(db, body))
