import os
import tempfile

# must be set before config.settings is imported
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.gettempdir(), "sabuconnect_import.db")
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SECRET_KEY"] = "test-secret"

import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import models  # noqa: F401
from database.session import Base, get_db, get_session_factory
from main import app
from models.category_model import Category
from models.enums import CategoryType, ListingStatus, Role
from models.listing_model import Listing
from models.user_model import User
from services.auth import create_access_token, hash_password

_seq = itertools.count(1)


@pytest.fixture
def engine(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(role: Role = Role.USER, email: str | None = None, password: str = "secret123", verified: bool = True):
        n = next(_seq)
        u = User(
            email=email or f"user{n}@sabuconnect.id",
            password=hash_password(password),
            name=f"User {n}",
            phone="6281200000000",
            role=role,
            is_verified=verified,
        )
        db.add(u)
        db.commit()
        db.refresh(u)
        return u
    return _make


@pytest.fixture
def auth():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user)}"}
    return _headers


@pytest.fixture
def admin(make_user):
    return make_user(Role.ADMIN)


@pytest.fixture
def provider(make_user):
    return make_user(Role.PROVIDER)


@pytest.fixture
def category(db):
    c = Category(name="Hasil Pertanian", slug="hasil-pertanian", type=CategoryType.PRODUK)
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


@pytest.fixture
def make_listing(db, category):
    def _make(owner: User, status: ListingStatus = ListingStatus.ACTIVE, title: str | None = None, **extra):
        n = next(_seq)
        listing = Listing(
            title=title or f"Listing {n}",
            slug=f"listing-{n}",
            description="Deskripsi",
            price=15000,
            images=[],
            location="Seba",
            phone="6281200000000",
            category_id=extra.pop("category_id", category.id),
            user_id=owner.id,
            status=status,
            **extra,
        )
        db.add(listing)
        db.commit()
        db.refresh(listing)
        return listing
    return _make
