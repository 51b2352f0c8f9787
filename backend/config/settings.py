# backend/config/settings.py
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = ""
    DB_NAME: str = ""
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_PORT: str = "5432"

    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    # 30 days, same lifetime as the web session cookie
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    AUTO_CREATE_TABLES: bool = True

    SITE_NAME: str = "SABUConnect"
    PROMOTION_PRICE_PER_DAY: int = 1000
    DEFAULT_PROMOTION_DAYS: int = 7
    AD_PRICE_PER_DAY: int = 10000

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not all([self.DB_HOST, self.DB_NAME, self.DB_USER, self.DB_PASSWORD]):
            raise RuntimeError(
                "Missing DB env vars (DATABASE_URL or DB_HOST/DB_NAME/DB_USER/DB_PASSWORD)."
            )
        return (
            f"postgresql+psycopg2://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
