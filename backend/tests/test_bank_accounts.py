from models.bank_account_model import BankAccount


def _create(client, headers, name, default=False, active=True):
    r = client.post(
        "/api/admin/bank-accounts",
        json={"name": name, "accountNumber": "123", "accountName": "SABUConnect", "isDefault": default},
        headers=headers,
    )
    assert r.status_code == 201
    account = r.json()
    if not active:
        client.patch(f"/api/admin/bank-accounts/{account['id']}", json={"isActive": False}, headers=headers)
    return account


def _defaults(db):
    db.expire_all()
    return [a.id for a in db.query(BankAccount).filter(BankAccount.is_default.is_(True))]


def test_single_default_after_create(client, db, admin, auth):
    h = auth(admin)
    first = _create(client, h, "BRI", default=True)
    second = _create(client, h, "BNI", default=True)
    assert _defaults(db) == [second["id"]]
    assert first["id"] != second["id"]


def test_single_default_after_update(client, db, admin, auth):
    h = auth(admin)
    a = _create(client, h, "BRI", default=True)
    b = _create(client, h, "DANA")
    r = client.patch(f"/api/admin/bank-accounts/{b['id']}", json={"isDefault": True}, headers=h)
    assert r.status_code == 200
    assert _defaults(db) == [b["id"]]

    r = client.patch(f"/api/admin/bank-accounts/{a['id']}", json={"isDefault": True}, headers=h)
    assert _defaults(db) == [a["id"]]


def test_public_list_shows_active_default_first(client, admin, auth):
    h = auth(admin)
    _create(client, h, "BNI")
    default = _create(client, h, "BRI", default=True)
    _create(client, h, "Mandiri", active=False)

    r = client.get("/api/bank-accounts")
    assert r.status_code == 200
    names = [a["name"] for a in r.json()]
    assert names[0] == "BRI"
    assert "Mandiri" not in names
    assert r.json()[0]["id"] == default["id"]


def test_delete_missing_account(client, admin, auth):
    r = client.delete("/api/admin/bank-accounts/nope", headers=auth(admin))
    assert r.status_code == 404
    assert r.json() == {"error": "Rekening tidak ditemukan"}


def test_get_single_account_is_public(client, admin, auth):
    account = _create(client, auth(admin), "BRI")
    r = client.get(f"/api/admin/bank-accounts/{account['id']}")
    assert r.status_code == 200
    assert r.json()["accountName"] == "SABUConnect"


def test_mutations_require_admin(client, provider, auth):
    r = client.post(
        "/api/admin/bank-accounts",
        json={"name": "BRI", "accountNumber": "1", "accountName": "x"},
        headers=auth(provider),
    )
    assert r.status_code == 403


def test_failed_default_flip_changes_nothing(client, db, admin, auth, monkeypatch):
    from fastapi.testclient import TestClient
    from sqlalchemy.orm import Session

    from main import app

    h = auth(admin)
    a = _create(client, h, "BRI", default=True)
    b = _create(client, h, "DANA")

    def broken_commit(self):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(Session, "commit", broken_commit)
    r = TestClient(app, raise_server_exceptions=False).patch(
        f"/api/admin/bank-accounts/{b['id']}", json={"isDefault": True}, headers=h
    )
    monkeypatch.undo()

    assert r.status_code == 500
    assert _defaults(db) == [a["id"]]
