# backend/schemas/stats.py
from schemas.base import CamelModel


class StatsOut(CamelModel):
    providers: int = 0
    active_listings: int = 0
    users: int = 0
    categories: int = 0
