# backend/schemas/__init__.py
from .base import ActionResult, CamelModel, ORMModel
from .users import (
    RegisterPayload, RegisterResponse, LoginPayload, TokenResponse,
    UserSummary, UserOut, UserUpdate,
)
from .categories import CategoryCreate, CategoryOut, CategoryWithCount
from .listings import (
    ListingCreate, ListingUpdate, ListingStatusUpdate, ListingOut, ListingDetail,
    ListingPage, Pagination, PromoteRequest, PromotionProofUpload, PromotionReview,
    PromotionList, PromotionPaymentOut, OwnerMini, CategoryMini,
)
from .ads import AdCreate, AdReview, AdVerify, ProofUpload, PaymentOut, AdOut
from .villages import VillageOut, VillageFull, VillageCreate, VillageUpdate, VillageLookup, AdminVillageList
from .bank_accounts import BankAccountCreate, BankAccountUpdate, BankAccountOut
from .promo_banners import BannerCreate, BannerUpdate, BannerOut
from .site_settings import SiteSettingsOut, SiteSettingsUpdate
from .stats import StatsOut
from .transactions import TransactionCreate, TransactionUpdate, TransactionOut

__all__ = [
    "ActionResult", "CamelModel", "ORMModel",
    # users
    "RegisterPayload", "RegisterResponse", "LoginPayload", "TokenResponse",
    "UserSummary", "UserOut", "UserUpdate",
    # categories
    "CategoryCreate", "CategoryOut", "CategoryWithCount",
    # listings / promotions
    "ListingCreate", "ListingUpdate", "ListingStatusUpdate", "ListingOut", "ListingDetail",
    "ListingPage", "Pagination", "PromoteRequest", "PromotionProofUpload", "PromotionReview",
    "PromotionList", "PromotionPaymentOut", "OwnerMini", "CategoryMini",
    # ads
    "AdCreate", "AdReview", "AdVerify", "ProofUpload", "PaymentOut", "AdOut",
    # geo
    "VillageOut", "VillageFull", "VillageCreate", "VillageUpdate", "VillageLookup", "AdminVillageList",
    # reference data
    "BankAccountCreate", "BankAccountUpdate", "BankAccountOut",
    "BannerCreate", "BannerUpdate", "BannerOut",
    "SiteSettingsOut", "SiteSettingsUpdate",
    "StatsOut",
    "TransactionCreate", "TransactionUpdate", "TransactionOut",
]
