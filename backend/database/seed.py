# backend/database/seed.py
"""Demo data for a fresh SABUConnect database.

Safe to run more than once: every row is looked up by its natural key first.
Run with ``python -m database.seed`` from the backend directory.
"""
import logging

from sqlalchemy.orm import Session

from config.logger import setup_logging
import models  # noqa: F401
from database.session import Base, SessionLocal, commit_or_rollback, engine
from models.category_model import Category
from models.enums import CategoryType, ListingStatus, PriceType, Role
from models.listing_model import Listing
from models.promo_banner_model import PromoBanner
from models.user_model import User
from models.village_model import Village
from services.auth import hash_password

logger = logging.getLogger(__name__)

DEMO_USERS = [
    # email, password, name, phone, role, verified
    ("admin@sabuconnect.id", "admin123", "Administrator", "6281234567890", Role.ADMIN, True),
    ("provider@sabuconnect.id", "provider123", "Toko Sabu", "6289876543210", Role.PROVIDER, True),
    ("user@sabuconnect.id", "user123", "Ahmad Wijaya", "6285123456789", Role.USER, False),
]

CATEGORIES = [
    ("Konstruksi & Bangunan", "konstruksi-bangunan", CategoryType.JASA),
    ("Reparasi & Montir", "reparasi-montir", CategoryType.JASA),
    ("Servis Elektronik", "servis-elektronik", CategoryType.JASA),
    ("Salon & Kecantikan", "salon-kecantikan", CategoryType.JASA),
    ("Pendidikan & Les Privat", "pendidikan-les-privat", CategoryType.JASA),
    ("Kesehatan & Fitness", "kesehatan-fitness", CategoryType.JASA),
    ("Transportasi", "transportasi", CategoryType.JASA),
    ("Layanan Rumah Tangga", "layanan-rumah-tangga", CategoryType.JASA),
    ("Fotografi & Videografi", "fotografi-videografi", CategoryType.JASA),
    ("Jasa Lainnya", "jasa-lainnya", CategoryType.JASA),
    ("Hasil Pertanian", "hasil-pertanian", CategoryType.PRODUK),
    ("Hasil Laut & Perikanan", "hasil-laut-perikanan", CategoryType.PRODUK),
    ("Kerajinan Tangan", "kerajinan-tangan", CategoryType.PRODUK),
    ("Makanan & Minuman", "makanan-minuman", CategoryType.PRODUK),
    ("Pakaian & Tekstil", "pakaian-tekstil", CategoryType.PRODUK),
    ("Tanaman & Bibit", "tanaman-bibit", CategoryType.PRODUK),
    ("Ternak & Peternakan", "ternak-peternakan", CategoryType.PRODUK),
    ("Produk Lainnya", "produk-lainnya", CategoryType.PRODUK),
]

VILLAGES = {
    "Sabu Barat": ["Menia", "Mebba", "Delo", "Raedewa", "Titinalede"],
    "Sabu Tengah": ["Eimadake", "Loborui", "Eikare", "Matei"],
    "Sabu Timur": ["Bolou", "Limagu", "Keduru", "Eiada"],
    "Sabu Liae": ["Eilogo", "Raenyale", "Mehona", "Ledetadu"],
    "Hawu Mehara": ["Lobohede", "Ledeana", "Gurimonearu", "Daieko"],
    "Raijua": ["Ledeke", "Kolorame", "Bellu", "Ballu"],
}

LISTINGS = [
    dict(
        title="Kelapa Bali Kualitas Premium",
        slug="kelapa-bali-sabu-raijua",
        description="Kelapa bali segar langsung dari petani Sabu Raijua. Kualitas premium, cocok untuk "
                    "kopra, minyak kelapa, atau konsumsi langsung.",
        price=15000,
        price_type=PriceType.FIXED,
        category_type=CategoryType.PRODUK,
    ),
    dict(
        title="Jasa Bangun Rumah & Renovasi",
        slug="jasa-bangun-rumah",
        description="Jasa pembangunan rumah, renovasi, dan perbaikan bangunan di seluruh wilayah "
                    "Sabu Raijua. Gratis konsultasi dan survey lokasi.",
        price=500000,
        price_type=PriceType.STARTING_FROM,
        category_type=CategoryType.JASA,
    ),
]

BANNERS = [
    ("Selamat Datang di SABUConnect", "Platform Layanan & Ekonomi Digital Sabu Raijua",
     "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=1200&h=400&fit=crop", "/search"),
    ("Promo Produk Lokal", "Dukung produk asli Sabu Raijua",
     "https://images.unsplash.com/photo-1488459716781-31db52582fe9?w=1200&h=400&fit=crop", "/search?type=PRODUK"),
    ("Jasa Terpercaya", "Temukan jasa profesional di sekitar Anda",
     "https://images.unsplash.com/photo-1581578731117-e0a820139a29?w=1200&h=400&fit=crop", "/search?type=JASA"),
]


def _seed_users(db: Session) -> dict:
    users = {}
    for email, password, name, phone, role, verified in DEMO_USERS:
        u = db.query(User).filter(User.email == email).first()
        if not u:
            u = User(email=email, password=hash_password(password), name=name, phone=phone,
                     role=role, is_verified=verified)
            db.add(u)
            logger.info(f"Created {role.value.lower()}: {email}")
        users[role] = u
    db.flush()
    return users


def _seed_categories(db: Session) -> None:
    for name, slug, ctype in CATEGORIES:
        if not db.query(Category).filter(Category.slug == slug).first():
            db.add(Category(name=name, slug=slug, type=ctype))
    db.flush()


def _seed_villages(db: Session) -> None:
    for district, names in VILLAGES.items():
        for order, name in enumerate(names, start=1):
            exists = db.query(Village).filter(Village.district == district, Village.name == name).first()
            if not exists:
                db.add(Village(name=name, district=district, order=order, is_active=True))


def _seed_listings(db: Session, provider: User) -> None:
    for item in LISTINGS:
        if db.query(Listing).filter(Listing.slug == item["slug"]).first():
            continue
        category = db.query(Category).filter(Category.type == item["category_type"]).order_by(Category.name).first()
        if not category:
            continue
        db.add(Listing(
            title=item["title"],
            slug=item["slug"],
            description=item["description"],
            price=item["price"],
            price_type=item["price_type"],
            images=[],
            location="Seba, Sabu Barat",
            phone=provider.phone,
            category_id=category.id,
            user_id=provider.id,
            status=ListingStatus.ACTIVE,
            is_featured=True,
        ))


def _seed_banners(db: Session) -> None:
    for order, (title, subtitle, image, link) in enumerate(BANNERS, start=1):
        if not db.query(PromoBanner).filter(PromoBanner.title == title).first():
            db.add(PromoBanner(title=title, subtitle=subtitle, image=image, link=link,
                               position="hero", is_active=True, order=order))


def seed(db: Session) -> None:
    users = _seed_users(db)
    _seed_categories(db)
    _seed_villages(db)
    _seed_listings(db, users[Role.PROVIDER])
    _seed_banners(db)
    commit_or_rollback(db)


def main() -> None:
    setup_logging()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed(db)
        logger.info("Seeding completed")
        logger.info("Admin: admin@sabuconnect.id / admin123")
        logger.info("Provider: provider@sabuconnect.id / provider123")
        logger.info("User: user@sabuconnect.id / user123")
    finally:
        db.close()


if __name__ == "__main__":
    main()
