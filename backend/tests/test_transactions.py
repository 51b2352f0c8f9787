from models.enums import Role


def _create(client, headers, listing_id, amount=15000):
    return client.post("/api/transactions", json={"listingId": listing_id, "amount": amount}, headers=headers)


def test_customer_creates_and_provider_progresses(client, make_user, provider, auth, make_listing):
    listing = make_listing(provider)
    customer = make_user(Role.USER)

    r = _create(client, auth(customer), listing.id)
    assert r.status_code == 201
    tx = r.json()
    assert tx["status"] == "PENDING"
    assert tx["providerId"] == provider.id

    for status in ("CONFIRMED", "IN_PROGRESS", "COMPLETED"):
        r = client.put(f"/api/transactions/{tx['id']}", json={"status": status}, headers=auth(provider))
        assert r.status_code == 200
        assert r.json()["status"] == status

    r = client.put(f"/api/transactions/{tx['id']}", json={"status": "CANCELLED"}, headers=auth(provider))
    assert r.status_code == 400


def test_cannot_skip_steps(client, make_user, provider, auth, make_listing):
    listing = make_listing(provider)
    tx = _create(client, auth(make_user()), listing.id).json()
    r = client.put(f"/api/transactions/{tx['id']}", json={"status": "COMPLETED"}, headers=auth(provider))
    assert r.status_code == 400


def test_customer_may_only_cancel(client, make_user, provider, auth, make_listing):
    listing = make_listing(provider)
    customer = make_user()
    tx = _create(client, auth(customer), listing.id).json()

    r = client.put(f"/api/transactions/{tx['id']}", json={"status": "CONFIRMED"}, headers=auth(customer))
    assert r.status_code == 403
    r = client.put(f"/api/transactions/{tx['id']}", json={"status": "CANCELLED"}, headers=auth(customer))
    assert r.status_code == 200


def test_own_listing_is_rejected(client, provider, auth, make_listing):
    listing = make_listing(provider)
    assert _create(client, auth(provider), listing.id).status_code == 400


def test_outsiders_cannot_read(client, make_user, provider, admin, auth, make_listing):
    listing = make_listing(provider)
    tx = _create(client, auth(make_user()), listing.id).json()

    assert client.get(f"/api/transactions/{tx['id']}", headers=auth(make_user())).status_code == 403
    assert client.get(f"/api/transactions/{tx['id']}", headers=auth(admin)).status_code == 200
    assert [t["id"] for t in client.get("/api/transactions", headers=auth(provider)).json()] == [tx["id"]]
