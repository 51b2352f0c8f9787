from datetime import datetime, timedelta

from models.enums import ListingStatus, PromotionStatus, Role
from models.listing_model import Listing


def test_provider_listing_starts_pending(client, db, provider, category, auth):
    body = {
        "title": "Tenun Ikat Sabu",
        "description": "Kain tenun asli",
        "price": 250000,
        "location": "Seba",
        "phone": "6281200000000",
        "categoryId": category.slug,
    }
    r = client.post("/api/listings", json=body, headers=auth(provider))
    assert r.status_code == 201
    data = r.json()
    assert data["status"] == "PENDING"
    assert data["slug"].startswith("tenun-ikat-sabu")
    assert data["categoryId"] == category.id


def test_admin_listing_is_active(client, admin, category, auth):
    body = {"title": "Ikan Kering", "description": "d", "price": 1, "location": "Seba",
            "phone": "6281200000000", "categoryId": category.id}
    r = client.post("/api/listings", json=body, headers=auth(admin))
    assert r.json()["status"] == "ACTIVE"


def test_user_cannot_create_listing(client, make_user, category, auth):
    user = make_user(Role.USER)
    body = {"title": "X", "description": "d", "price": 1, "location": "Seba",
            "phone": "6281200000000", "categoryId": category.id}
    assert client.post("/api/listings", json=body, headers=auth(user)).status_code == 403


def test_unknown_category(client, provider, auth):
    body = {"title": "X", "description": "d", "price": 1, "location": "Seba",
            "phone": "6281200000000", "categoryId": "tidak-ada"}
    r = client.post("/api/listings", json=body, headers=auth(provider))
    assert r.status_code == 400


def test_search_shows_only_active_and_promoted_first(client, provider, make_listing):
    now = datetime.utcnow()
    make_listing(provider, title="Kelapa Biasa")
    promoted = make_listing(
        provider,
        title="Kelapa Promo",
        promotion_status=PromotionStatus.ACTIVE,
        promotion_start=now - timedelta(days=1),
        promotion_end=now + timedelta(days=3),
    )
    make_listing(provider, title="Kelapa Pending", status=ListingStatus.PENDING)
    make_listing(provider, title="Kelapa Baru")

    r = client.get("/api/listings", params={"q": "kelapa"})
    assert r.status_code == 200
    data = r.json()
    assert data["pagination"]["total"] == 3
    assert data["listings"][0]["id"] == promoted.id
    assert "Kelapa Pending" not in [l["title"] for l in data["listings"]]
    assert "s-maxage=60" in r.headers["cache-control"]


def test_search_pagination(client, provider, make_listing):
    for _ in range(5):
        make_listing(provider)
    r = client.get("/api/listings", params={"page": 2, "limit": 2})
    p = r.json()["pagination"]
    assert p == {"page": 2, "limit": 2, "total": 5, "totalPages": 3}
    assert len(r.json()["listings"]) == 2


def test_detail_and_view_counter(client, db, provider, make_listing):
    listing = make_listing(provider)
    r = client.get(f"/api/listings/{listing.slug}")
    assert r.status_code == 200
    assert r.json()["user"]["id"] == provider.id

    assert client.post(f"/api/listings/{listing.slug}").json()["success"] is True
    db.expire_all()
    assert db.get(Listing, listing.id).views == 1

    assert client.get("/api/listings/tidak-ada").status_code == 404


def test_owner_update_and_delete(client, db, make_user, provider, auth, make_listing):
    listing = make_listing(provider)
    listing_id = listing.id
    other = make_user(Role.PROVIDER)

    r = client.put(f"/api/provider/listings/{listing_id}", json={"price": 99000}, headers=auth(other))
    assert r.status_code == 403

    r = client.put(f"/api/provider/listings/{listing_id}", json={"price": 99000}, headers=auth(provider))
    assert r.status_code == 200
    assert r.json()["price"] == 99000

    r = client.delete(f"/api/provider/listings/{listing_id}", headers=auth(provider))
    assert r.status_code == 200
    db.expire_all()
    assert db.get(Listing, listing_id) is None


def test_admin_moderates_status(client, db, admin, provider, auth, make_listing):
    listing = make_listing(provider, status=ListingStatus.PENDING)
    r = client.patch(f"/api/admin/listings/{listing.id}", json={"status": "ACTIVE"}, headers=auth(admin))
    assert r.status_code == 200
    assert r.json()["status"] == "ACTIVE"

    r = client.patch(f"/api/admin/listings/{listing.id}", json={"status": "DELETED_FOREVER"}, headers=auth(admin))
    assert r.status_code == 400
    assert r.json() == {"error": "Status tidak valid"}
