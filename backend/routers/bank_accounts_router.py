# backend/routers/bank_accounts_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from schemas.bank_accounts import BankAccountCreate, BankAccountOut, BankAccountUpdate
from schemas.base import ActionResult
from services import bank_account_service
from services.auth import require_admin

router = APIRouter(tags=["bank-accounts"])


@router.get("/bank-accounts", response_model=List[BankAccountOut])
def active_accounts(db: Session = Depends(get_db)):
    """Accounts shown on the payment page."""
    return [BankAccountOut.model_validate(a) for a in bank_account_service.list_accounts(db, active_only=True)]


@router.get("/admin/bank-accounts", response_model=List[BankAccountOut])
def all_accounts(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return [BankAccountOut.model_validate(a) for a in bank_account_service.list_accounts(db)]


@router.post("/admin/bank-accounts", response_model=BankAccountOut, status_code=201)
def create_account(body: BankAccountCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return BankAccountOut.model_validate(bank_account_service.create_account(db, body))


@router.get("/admin/bank-accounts/{account_id}", response_model=BankAccountOut)
def get_account(account_id: str, db: Session = Depends(get_db)):
    # read is open, the payment page links straight to one account
    return BankAccountOut.model_validate(bank_account_service.get_account(db, account_id))


@router.patch("/admin/bank-accounts/{account_id}", response_model=BankAccountOut)
def update_account(
    account_id: str,
    body: BankAccountUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return BankAccountOut.model_validate(bank_account_service.update_account(db, account_id, body))


@router.delete("/admin/bank-accounts/{account_id}", response_model=ActionResult)
def delete_account(account_id: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    bank_account_service.delete_account(db, account_id)
    return ActionResult(message="Rekening berhasil dihapus")
