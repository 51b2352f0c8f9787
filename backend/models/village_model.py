# backend/models/village_model.py
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base
from models.base import new_id


class Village(Base):
    __tablename__ = "villages"
    id          = Column(String(36), primary_key=True, default=new_id)
    name        = Column(Unicode(255), nullable=False)
    district    = Column(Unicode(255), nullable=False, index=True)
    description = Column(UnicodeText)
    population  = Column(Integer)
    area        = Column(Unicode(64))
    order       = Column(Integer, nullable=False, default=0)
    is_active   = Column(Boolean, nullable=False, default=True)
