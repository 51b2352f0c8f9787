from models.category_model import Category
from models.enums import CategoryType, ListingStatus


def test_counts_include_active_listings_only(client, db, provider, category, make_listing):
    other = Category(name="Jasa Lainnya", slug="jasa-lainnya", type=CategoryType.JASA)
    db.add(other)
    db.commit()

    make_listing(provider)
    make_listing(provider)
    make_listing(provider, status=ListingStatus.PENDING)
    make_listing(provider, status=ListingStatus.INACTIVE)

    r = client.get("/api/categories")
    assert r.status_code == 200
    counts = {c["slug"]: c["listingCount"] for c in r.json()}
    assert counts == {"hasil-pertanian": 2, "jasa-lainnya": 0}
    assert "s-maxage=3600" in r.headers["cache-control"]


def test_categories_are_ordered_by_name(client, db):
    for name, slug in (("Transportasi", "transportasi"), ("Kerajinan Tangan", "kerajinan-tangan")):
        db.add(Category(name=name, slug=slug, type=CategoryType.JASA))
    db.commit()
    assert [c["name"] for c in client.get("/api/categories").json()] == ["Kerajinan Tangan", "Transportasi"]


def test_admin_creates_category_with_slug(client, admin, auth):
    r = client.post("/api/categories", json={"name": "Salon & Kecantikan", "type": "JASA"}, headers=auth(admin))
    assert r.status_code == 201
    assert r.json()["slug"] == "salon-kecantikan"

    r = client.post("/api/categories", json={"name": "Salon & Kecantikan", "type": "JASA"}, headers=auth(admin))
    assert r.status_code == 400


def test_provider_cannot_create_category(client, provider, auth):
    r = client.post("/api/categories", json={"name": "Baru", "type": "JASA"}, headers=auth(provider))
    assert r.status_code == 403
