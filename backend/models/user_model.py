# backend/models/user_model.py
from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from database.session import Base
from models.base import enum_column_type, new_id, utcnow
from models.enums import Role


class User(Base):
    __tablename__ = "users"
    id          = Column(String(36), primary_key=True, default=new_id)
    email       = Column(Unicode(255), unique=True, nullable=False, index=True)
    password    = Column(String(255), nullable=False)
    name        = Column(Unicode(255), nullable=False)
    phone       = Column(Unicode(32))
    avatar      = Column(Unicode(500))
    role        = Column(enum_column_type(Role), nullable=False, default=Role.USER)
    is_verified = Column(Boolean, nullable=False, default=False)
    created_at  = Column(DateTime, default=utcnow)
    updated_at  = Column(DateTime, default=utcnow, onupdate=utcnow)

    listings = relationship("Listing", back_populates="user", cascade="all, delete-orphan")
