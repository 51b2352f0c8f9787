# backend/services/bank_account_service.py
import logging
from typing import List

from sqlalchemy.orm import Session

from database.session import commit_or_rollback
from models.bank_account_model import BankAccount
from schemas.bank_accounts import BankAccountCreate, BankAccountUpdate
from services.errors import NotFound

logger = logging.getLogger(__name__)


def _ordered(q):
    return q.order_by(BankAccount.is_default.desc(), BankAccount.created_at.desc())


def list_accounts(db: Session, active_only: bool = False) -> List[BankAccount]:
    q = db.query(BankAccount)
    if active_only:
        q = q.filter(BankAccount.is_active.is_(True))
    return _ordered(q).all()


def get_account(db: Session, account_id: str) -> BankAccount:
    account = db.get(BankAccount, account_id)
    if not account:
        raise NotFound("Rekening tidak ditemukan")
    return account


def _clear_other_defaults(db: Session, keep_id: str | None) -> None:
    q = db.query(BankAccount).filter(BankAccount.is_default.is_(True))
    if keep_id:
        q = q.filter(BankAccount.id != keep_id)
    q.update({BankAccount.is_default: False}, synchronize_session="fetch")


def create_account(db: Session, body: BankAccountCreate) -> BankAccount:
    account = BankAccount(
        name=body.name,
        account_number=body.account_number,
        account_name=body.account_name,
        type=body.type,
        is_default=body.is_default,
    )
    db.add(account)
    if body.is_default:
        db.flush()
        _clear_other_defaults(db, account.id)
    # clear + insert commit together
    commit_or_rollback(db)
    db.refresh(account)
    return account


def update_account(db: Session, account_id: str, body: BankAccountUpdate) -> BankAccount:
    account = get_account(db, account_id)
    if body.is_active is not None:
        account.is_active = body.is_active
    if body.is_default is not None:
        if body.is_default:
            _clear_other_defaults(db, account.id)
        account.is_default = body.is_default
    commit_or_rollback(db)
    db.refresh(account)
    if body.is_default:
        logger.info(f"Bank account {account.id} set as default")
    return account


def delete_account(db: Session, account_id: str) -> None:
    account = get_account(db, account_id)
    db.delete(account)
    commit_or_rollback(db)
