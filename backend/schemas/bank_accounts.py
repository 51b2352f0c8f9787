# backend/schemas/bank_accounts.py
from datetime import datetime
from typing import Optional

from pydantic import constr

from models.enums import BankAccountType
from schemas.base import CamelModel, ORMModel


class BankAccountCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=120)
    account_number: constr(strip_whitespace=True, min_length=1, max_length=64)
    account_name: constr(strip_whitespace=True, min_length=1, max_length=255)
    type: BankAccountType = BankAccountType.BANK
    is_default: bool = False


class BankAccountUpdate(CamelModel):
    is_active: Optional[bool] = None
    is_default: Optional[bool] = None


class BankAccountOut(ORMModel):
    id: str
    name: str
    account_number: str
    account_name: str
    type: BankAccountType
    is_active: bool
    is_default: bool
    created_at: Optional[datetime] = None
