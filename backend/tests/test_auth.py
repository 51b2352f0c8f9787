from models.enums import Role
from models.user_model import User


def _register(client, **overrides):
    body = {"email": "baru@sabuconnect.id", "password": "rahasia1", "name": "Baru", "phone": "6281299999999"}
    body.update(overrides)
    return client.post("/api/auth/register", json=body)


def test_register_user_is_verified(client, db):
    r = _register(client)
    assert r.status_code == 201
    assert r.json()["user"]["role"] == "USER"
    u = db.query(User).filter(User.email == "baru@sabuconnect.id").one()
    assert u.is_verified is True
    assert u.password != "rahasia1"


def test_register_provider_starts_unverified(client, db):
    r = _register(client, role="PROVIDER")
    assert r.status_code == 201
    u = db.query(User).filter(User.email == "baru@sabuconnect.id").one()
    assert u.role == Role.PROVIDER
    assert u.is_verified is False


def test_register_admin_is_rejected(client, db):
    r = _register(client, role="ADMIN")
    assert r.status_code == 400
    assert "error" in r.json()
    assert db.query(User).count() == 0


def test_duplicate_email_is_rejected_without_new_row(client, db):
    assert _register(client).status_code == 201
    r = _register(client, name="Lain")
    assert r.status_code == 400
    assert r.json() == {"error": "Email sudah terdaftar"}
    assert db.query(User).filter(User.email == "baru@sabuconnect.id").count() == 1


def test_login_and_me(client):
    _register(client)
    r = client.post("/api/auth/login", json={"email": "baru@sabuconnect.id", "password": "rahasia1"})
    assert r.status_code == 200
    token = r.json()["accessToken"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "baru@sabuconnect.id"


def test_login_wrong_password(client):
    _register(client)
    r = client.post("/api/auth/login", json={"email": "baru@sabuconnect.id", "password": "salah123"})
    assert r.status_code == 401


def test_missing_token_is_401(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/admin/users").status_code == 401


def test_garbage_token_is_401(client):
    r = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_wrong_role_is_403(client, make_user, auth):
    user = make_user(Role.USER)
    r = client.get("/api/admin/users", headers=auth(user))
    assert r.status_code == 403
    assert r.json() == {"error": "Akses ditolak"}


def test_admin_cannot_delete_self(client, admin, auth):
    r = client.delete(f"/api/admin/users/{admin.id}", headers=auth(admin))
    assert r.status_code == 400


def test_racing_duplicate_registration_is_400(client, db, make_user, monkeypatch):
    from sqlalchemy.orm import Query

    make_user(email="baru@sabuconnect.id")
    # both requests passed the existence check; the unique index decides
    monkeypatch.setattr(Query, "count", lambda self: 0)
    r = _register(client)
    monkeypatch.undo()

    assert r.status_code == 400
    assert r.json() == {"error": "Email sudah terdaftar"}
    assert db.query(User).filter(User.email == "baru@sabuconnect.id").count() == 1
