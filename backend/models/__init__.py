# backend/models/__init__.py
from .user_model import User
from .category_model import Category
from .listing_model import Listing
from .village_model import Village
from .ad_model import Ad
from .payment_model import Payment, PromotionPayment
from .bank_account_model import BankAccount
from .promo_banner_model import PromoBanner
from .site_settings_model import SiteSettings, SITE_SETTINGS_ID
from .transaction_model import Transaction
