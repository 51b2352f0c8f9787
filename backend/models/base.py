# backend/models/base.py
import uuid
from datetime import datetime

from sqlalchemy import Enum as SAEnum


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.utcnow()


def enum_column_type(enum_cls):
    # VARCHAR + CHECK instead of a native enum so SQLite and PostgreSQL behave the same
    return SAEnum(enum_cls, native_enum=False, length=20, validate_strings=True)
