from models.enums import PromotionPaymentStatus, PromotionStatus, Role
from models.listing_model import Listing


def _promote(client, headers, listing_id, days=7, method="TRANSFER"):
    return client.post(f"/api/provider/listings/{listing_id}/promote", json={"days": days, "method": method},
                       headers=headers)


def test_transfer_promotion_full_cycle(client, db, admin, provider, auth, make_listing):
    listing = make_listing(provider)
    h = auth(provider)

    r = _promote(client, h, listing.id, days=5)
    assert r.status_code == 200
    assert r.json()["payment"]["amount"] == 5000

    r = client.post("/api/provider/promotions/upload-proof",
                    json={"listingId": listing.id, "proofImage": "https://img/p.jpg"}, headers=h)
    assert r.status_code == 200
    assert r.json()["proofUrl"] == "https://img/p.jpg"

    r = client.post(f"/api/admin/promotions/{listing.id}", json={"action": "approve"}, headers=auth(admin))
    assert r.status_code == 200
    assert "activeUntil" in r.json()

    db.expire_all()
    fresh = db.get(Listing, listing.id)
    assert fresh.promotion_status == PromotionStatus.ACTIVE
    assert fresh.promotion_priority == 1
    assert fresh.promotion.status == PromotionPaymentStatus.VERIFIED
    assert (fresh.promotion_end - fresh.promotion_start).days == 5

    r = client.post(f"/api/provider/listings/{listing.id}/stop-promotion", headers=h)
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Promosi berhasil dihentikan"}
    db.expire_all()
    assert db.get(Listing, listing.id).promotion_status == PromotionStatus.STOPPED


def test_cod_promotion_goes_to_approval(client, db, provider, auth, make_listing):
    listing = make_listing(provider)
    r = _promote(client, auth(provider), listing.id, method="COD")
    assert r.status_code == 200
    db.expire_all()
    assert db.get(Listing, listing.id).promotion_status == PromotionStatus.PENDING_APPROVAL


def test_approve_without_proof_fails(client, db, admin, provider, auth, make_listing):
    listing = make_listing(provider)
    _promote(client, auth(provider), listing.id)
    r = client.post(f"/api/admin/promotions/{listing.id}", json={"action": "approve"}, headers=auth(admin))
    assert r.status_code == 400
    db.expire_all()
    assert db.get(Listing, listing.id).promotion_status == PromotionStatus.WAITING_PAYMENT


def test_reject_uploaded_proof_returns_to_waiting_payment(client, db, admin, provider, auth, make_listing):
    listing = make_listing(provider)
    h = auth(provider)
    _promote(client, h, listing.id)
    client.post("/api/provider/promotions/upload-proof", json={"listingId": listing.id, "proofImage": "a.jpg"},
                headers=h)

    r = client.post(f"/api/admin/promotions/{listing.id}", json={"action": "reject"}, headers=auth(admin))
    assert r.status_code == 400  # reason is required

    r = client.post(f"/api/admin/promotions/{listing.id}", json={"action": "reject", "reason": "Bukti buram"},
                    headers=auth(admin))
    assert r.status_code == 200
    db.expire_all()
    fresh = db.get(Listing, listing.id)
    assert fresh.promotion_status == PromotionStatus.WAITING_PAYMENT
    assert fresh.promotion.rejection_reason == "Bukti buram"


def test_stop_when_not_active_fails_without_mutation(client, db, provider, auth, make_listing):
    listing = make_listing(provider)
    h = auth(provider)
    _promote(client, h, listing.id)

    r = client.post(f"/api/provider/listings/{listing.id}/stop-promotion", headers=h)
    assert r.status_code == 403
    assert r.json() == {"error": "Listing tidak dalam promosi aktif"}

    db.expire_all()
    fresh = db.get(Listing, listing.id)
    assert fresh.promotion_status == PromotionStatus.WAITING_PAYMENT
    assert fresh.promotion_end is None
    assert fresh.promotion.status == PromotionPaymentStatus.PENDING


def test_promote_someone_elses_listing(client, make_user, provider, auth, make_listing):
    listing = make_listing(provider)
    other = make_user(Role.PROVIDER)
    r = _promote(client, auth(other), listing.id)
    assert r.status_code == 403


def test_admin_promotion_list_groups(client, admin, provider, auth, make_listing):
    waiting = make_listing(provider)
    make_listing(provider)
    _promote(client, auth(provider), waiting.id)

    r = client.get("/api/admin/promotions", params={"status": "pending"}, headers=auth(admin))
    assert r.status_code == 200
    assert [p["id"] for p in r.json()["promotions"]] == [waiting.id]


def test_promotion_proof_can_be_replaced_before_review(client, db, provider, auth, make_listing):
    listing = make_listing(provider)
    h = auth(provider)
    _promote(client, h, listing.id)
    for proof in ("lama.jpg", "baru.jpg"):
        r = client.post("/api/provider/promotions/upload-proof",
                        json={"listingId": listing.id, "proofImage": proof}, headers=h)
        assert r.status_code == 200

    db.expire_all()
    fresh = db.get(Listing, listing.id)
    assert fresh.promotion_status == PromotionStatus.PAYMENT_UPLOADED
    assert fresh.promotion.proof_image == "baru.jpg"
