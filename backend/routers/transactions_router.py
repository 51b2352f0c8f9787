# backend/routers/transactions_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from schemas.transactions import TransactionCreate, TransactionOut, TransactionUpdate
from services import transaction_service
from services.auth import get_current_user

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionOut])
def list_transactions(
    status: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return [TransactionOut.model_validate(t) for t in transaction_service.list_transactions(db, user, status)]


@router.post("", response_model=TransactionOut, status_code=201)
def create_transaction(body: TransactionCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return TransactionOut.model_validate(transaction_service.create_transaction(db, user, body))


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(transaction_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return TransactionOut.model_validate(transaction_service.get_transaction(db, user, transaction_id))


@router.put("/{transaction_id}", response_model=TransactionOut)
def update_transaction(
    transaction_id: str,
    body: TransactionUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return TransactionOut.model_validate(transaction_service.update_transaction(db, user, transaction_id, body))
