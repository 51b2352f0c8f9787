# backend/services/lifecycle.py
"""Legal status transitions for every lifecycle in the system.

All status writes go through ``ensure_transition`` so a route can never move
an entity along an edge that is not listed here.
"""
import logging
from enum import Enum
from typing import Dict, FrozenSet, Type, TypeVar

from models.enums import (
    AdPaymentStatus,
    AdStatus,
    ListingStatus,
    PaymentStatus,
    PromotionStatus,
    TransactionStatus,
)
from services.errors import InvalidArgument, InvalidState

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_ALL_LISTING = frozenset(ListingStatus)

# Moderation: an admin may put a listing in any status.
LISTING_TRANSITIONS: Dict[ListingStatus, FrozenSet[ListingStatus]] = {
    s: _ALL_LISTING for s in ListingStatus
}

PROMOTION_TRANSITIONS: Dict[PromotionStatus, FrozenSet[PromotionStatus]] = {
    PromotionStatus.NONE: frozenset({PromotionStatus.PENDING_APPROVAL, PromotionStatus.WAITING_PAYMENT}),
    PromotionStatus.PENDING_APPROVAL: frozenset({PromotionStatus.ACTIVE, PromotionStatus.NONE}),
    PromotionStatus.WAITING_PAYMENT: frozenset({PromotionStatus.PAYMENT_UPLOADED}),
    # a proof may be replaced until the admin reviews it
    PromotionStatus.PAYMENT_UPLOADED: frozenset({PromotionStatus.ACTIVE, PromotionStatus.WAITING_PAYMENT,
                                                PromotionStatus.PAYMENT_UPLOADED}),
    PromotionStatus.ACTIVE: frozenset({PromotionStatus.STOPPED}),
    # terminal for the cycle; a new request starts the next one
    PromotionStatus.STOPPED: frozenset({PromotionStatus.PENDING_APPROVAL, PromotionStatus.WAITING_PAYMENT}),
}

_VERIFIED_AD = frozenset({AdStatus.ACTIVE, AdStatus.WAITING_PAYMENT})

# Payment verification settles an ad from any status: PAID makes it ACTIVE,
# REJECTED sends it back to WAITING_PAYMENT.
AD_TRANSITIONS: Dict[AdStatus, FrozenSet[AdStatus]] = {
    AdStatus.PENDING_APPROVAL: frozenset({AdStatus.WAITING_PAYMENT, AdStatus.REJECTED}) | _VERIFIED_AD,
    AdStatus.WAITING_PAYMENT: _VERIFIED_AD,
    AdStatus.ACTIVE: _VERIFIED_AD,
    AdStatus.REJECTED: _VERIFIED_AD,
}

_VERDICT_AD_PAYMENT = frozenset({AdPaymentStatus.PAID, AdPaymentStatus.PAYMENT_REJECTED})

AD_PAYMENT_TRANSITIONS: Dict[AdPaymentStatus, FrozenSet[AdPaymentStatus]] = {
    AdPaymentStatus.UNPAID: frozenset({AdPaymentStatus.VERIFICATION}) | _VERDICT_AD_PAYMENT,
    # re-uploading before the admin acts keeps it in VERIFICATION
    AdPaymentStatus.VERIFICATION: frozenset({AdPaymentStatus.VERIFICATION}) | _VERDICT_AD_PAYMENT,
    AdPaymentStatus.PAYMENT_REJECTED: frozenset({AdPaymentStatus.VERIFICATION}) | _VERDICT_AD_PAYMENT,
    AdPaymentStatus.PAID: _VERDICT_AD_PAYMENT,
}

PAYMENT_TRANSITIONS: Dict[PaymentStatus, FrozenSet[PaymentStatus]] = {
    PaymentStatus.VERIFICATION: frozenset({PaymentStatus.PAID, PaymentStatus.PAYMENT_REJECTED,
                                           PaymentStatus.VERIFICATION}),
    PaymentStatus.PAYMENT_REJECTED: frozenset({PaymentStatus.VERIFICATION, PaymentStatus.PAID,
                                               PaymentStatus.PAYMENT_REJECTED}),
    PaymentStatus.PAID: frozenset({PaymentStatus.PAID, PaymentStatus.PAYMENT_REJECTED}),
}

TRANSACTION_TRANSITIONS: Dict[TransactionStatus, FrozenSet[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset({TransactionStatus.CONFIRMED, TransactionStatus.CANCELLED}),
    TransactionStatus.CONFIRMED: frozenset({TransactionStatus.IN_PROGRESS, TransactionStatus.CANCELLED}),
    TransactionStatus.IN_PROGRESS: frozenset({TransactionStatus.COMPLETED, TransactionStatus.CANCELLED}),
    TransactionStatus.COMPLETED: frozenset(),
    TransactionStatus.CANCELLED: frozenset(),
}

_TABLES = {
    ListingStatus: LISTING_TRANSITIONS,
    PromotionStatus: PROMOTION_TRANSITIONS,
    AdStatus: AD_TRANSITIONS,
    AdPaymentStatus: AD_PAYMENT_TRANSITIONS,
    PaymentStatus: PAYMENT_TRANSITIONS,
    TransactionStatus: TRANSACTION_TRANSITIONS,
}


def parse_status(enum_cls: Type[E], value) -> E:
    """Coerce a raw request value into ``enum_cls`` or raise InvalidArgument."""
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgument("Status tidak valid")


def can_transition(current: Enum, target: Enum) -> bool:
    table = _TABLES[type(target)]
    return target in table.get(type(target)(current), frozenset())


def ensure_transition(current: Enum, target: Enum, message: str | None = None) -> Enum:
    if not can_transition(current, target):
        logger.info(f"Rejected {type(target).__name__} transition {getattr(current, 'value', current)} -> {target.value}")
        raise InvalidState(
            message or f"Tidak dapat mengubah status dari {getattr(current, 'value', current)} ke {target.value}"
        )
    return target
