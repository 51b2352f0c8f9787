# backend/gateway/gateway_router.py
from fastapi import APIRouter

# public + authenticated business routers
from routers.users_router import router as users_router
from routers.categories_router import router as categories_router
from routers.listings_router import router as listings_router
from routers.provider_router import router as provider_router
from routers.ads_router import router as ads_router
from routers.transactions_router import router as transactions_router

# reference data (public read, admin write)
from routers.villages_router import router as villages_router
from routers.bank_accounts_router import router as bank_accounts_router
from routers.promo_banners_router import router as promo_banners_router
from routers.site_settings_router import router as site_settings_router
from routers.stats_router import router as stats_router

# admin-only
from routers.admin_users_router import router as admin_users_router
from routers.admin_listings_router import router as admin_listings_router
from routers.admin_ads_router import router as admin_ads_router

gateway_router = APIRouter()

gateway_router.include_router(users_router)           # /api/auth/...
gateway_router.include_router(categories_router)      # /api/categories
gateway_router.include_router(listings_router)        # /api/listings/...
gateway_router.include_router(provider_router)        # /api/provider/...
gateway_router.include_router(ads_router)             # /api/ads/...
gateway_router.include_router(transactions_router)    # /api/transactions/...

gateway_router.include_router(villages_router)        # /api/villages, /api/admin/villages/...
gateway_router.include_router(bank_accounts_router)   # /api/bank-accounts, /api/admin/bank-accounts/...
gateway_router.include_router(promo_banners_router)   # /api/promo-banners, /api/admin/promo-banners/...
gateway_router.include_router(site_settings_router)   # /api/site-settings, /api/admin/site-settings
gateway_router.include_router(stats_router)           # /api/stats

gateway_router.include_router(admin_users_router)     # /api/admin/users/...
gateway_router.include_router(admin_listings_router)  # /api/admin/listings/..., /api/admin/promotions/...
gateway_router.include_router(admin_ads_router)       # /api/admin/ads/...
