import pytest

from models.enums import AdPaymentStatus, AdStatus, ListingStatus, PromotionStatus, TransactionStatus
from services.errors import InvalidArgument, InvalidState
from services.lifecycle import can_transition, ensure_transition, parse_status


def test_promotion_cycle_edges():
    assert can_transition(PromotionStatus.NONE, PromotionStatus.WAITING_PAYMENT)
    assert can_transition(PromotionStatus.NONE, PromotionStatus.PENDING_APPROVAL)
    assert can_transition(PromotionStatus.WAITING_PAYMENT, PromotionStatus.PAYMENT_UPLOADED)
    assert can_transition(PromotionStatus.PAYMENT_UPLOADED, PromotionStatus.ACTIVE)
    assert can_transition(PromotionStatus.ACTIVE, PromotionStatus.STOPPED)
    assert can_transition(PromotionStatus.STOPPED, PromotionStatus.WAITING_PAYMENT)


def test_promotion_cannot_skip_payment():
    assert not can_transition(PromotionStatus.WAITING_PAYMENT, PromotionStatus.ACTIVE)
    assert not can_transition(PromotionStatus.NONE, PromotionStatus.STOPPED)
    assert not can_transition(PromotionStatus.PENDING_APPROVAL, PromotionStatus.STOPPED)


def test_rejected_ad_only_leaves_through_payment_verification():
    assert not can_transition(AdStatus.REJECTED, AdStatus.PENDING_APPROVAL)
    assert not can_transition(AdStatus.ACTIVE, AdStatus.REJECTED)
    assert can_transition(AdStatus.REJECTED, AdStatus.ACTIVE)
    assert can_transition(AdStatus.ACTIVE, AdStatus.WAITING_PAYMENT)


def test_proofs_can_be_replaced_before_review():
    assert can_transition(AdPaymentStatus.VERIFICATION, AdPaymentStatus.VERIFICATION)
    assert can_transition(PromotionStatus.PAYMENT_UPLOADED, PromotionStatus.PAYMENT_UPLOADED)


def test_listing_moderation_allows_any_status():
    for current in ListingStatus:
        for target in ListingStatus:
            assert can_transition(current, target)


def test_transaction_flow():
    assert can_transition(TransactionStatus.PENDING, TransactionStatus.CONFIRMED)
    assert can_transition(TransactionStatus.IN_PROGRESS, TransactionStatus.CANCELLED)
    assert not can_transition(TransactionStatus.PENDING, TransactionStatus.COMPLETED)
    assert not can_transition(TransactionStatus.COMPLETED, TransactionStatus.CANCELLED)


def test_ensure_transition_raises_invalid_state():
    with pytest.raises(InvalidState):
        ensure_transition(PromotionStatus.NONE, PromotionStatus.ACTIVE)
    assert ensure_transition(AdStatus.PENDING_APPROVAL, AdStatus.WAITING_PAYMENT) == AdStatus.WAITING_PAYMENT


def test_parse_status():
    assert parse_status(ListingStatus, "ACTIVE") is ListingStatus.ACTIVE
    with pytest.raises(InvalidArgument):
        parse_status(ListingStatus, "BOGUS")
