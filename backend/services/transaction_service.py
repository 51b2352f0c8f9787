# backend/services/transaction_service.py
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from database.session import commit_or_rollback
from models.enums import ListingStatus, Role, TransactionStatus
from models.listing_model import Listing
from models.transaction_model import Transaction
from models.user_model import User
from schemas.transactions import TransactionCreate, TransactionUpdate
from services.auth import has_role
from services.errors import Forbidden, InvalidArgument, NotFound
from services.lifecycle import ensure_transition, parse_status

logger = logging.getLogger(__name__)


def _query(db: Session):
    return db.query(Transaction).options(
        joinedload(Transaction.customer),
        joinedload(Transaction.provider),
    )


def get_transaction(db: Session, user: User, transaction_id: str) -> Transaction:
    tx = _query(db).filter(Transaction.id == transaction_id).first()
    if not tx:
        raise NotFound("Transaksi tidak ditemukan")
    if not has_role(user, Role.ADMIN) and user.id not in (tx.customer_id, tx.provider_id):
        raise Forbidden()
    return tx


def list_transactions(db: Session, user: User, status: Optional[str] = None) -> List[Transaction]:
    q = _query(db)
    if not has_role(user, Role.ADMIN):
        q = q.filter(or_(Transaction.customer_id == user.id, Transaction.provider_id == user.id))
    if status:
        q = q.filter(Transaction.status == parse_status(TransactionStatus, status))
    return q.order_by(Transaction.created_at.desc()).all()


def create_transaction(db: Session, user: User, body: TransactionCreate) -> Transaction:
    listing = db.get(Listing, body.listing_id)
    if not listing or listing.status != ListingStatus.ACTIVE:
        raise NotFound("Listing tidak ditemukan")
    if listing.user_id == user.id:
        raise InvalidArgument("Tidak dapat bertransaksi dengan listing sendiri")

    tx = Transaction(
        listing_id=listing.id,
        customer_id=user.id,
        provider_id=listing.user_id,
        amount=body.amount,
        payment_method=body.payment_method,
        notes=body.notes,
        status=TransactionStatus.PENDING,
    )
    db.add(tx)
    commit_or_rollback(db)
    logger.info(f"Transaction {tx.id} created for listing {listing.id}")
    return get_transaction(db, user, tx.id)


def update_transaction(db: Session, user: User, transaction_id: str, body: TransactionUpdate) -> Transaction:
    tx = get_transaction(db, user, transaction_id)
    target = parse_status(TransactionStatus, body.status)

    # the customer can only back out; progress is driven by the provider
    if user.id == tx.customer_id and not has_role(user, Role.ADMIN) and target != TransactionStatus.CANCELLED:
        raise Forbidden()

    tx.status = ensure_transition(TransactionStatus(tx.status), target)
    if body.payment_method is not None:
        tx.payment_method = body.payment_method
    commit_or_rollback(db)
    logger.info(f"Transaction {tx.id} moved to {target.value} by {user.id}")
    return get_transaction(db, user, tx.id)
