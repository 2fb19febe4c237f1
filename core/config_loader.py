import secrets
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Flow3 Strategic Planning"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # every route is mounted under f"{BASE_PATH}api"
    BASE_PATH: str = "/"

    DATABASE_URL: str = "sqlite:///./db/flow3.db"

    # JWT
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30

    # comma separated
    BACKEND_CORS_ORIGINS: str = ""

    # seeded on first boot, rotate after deployment
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "123456"
    DEFAULT_ADMIN_EMAIL: str = "admin@flow3.com"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("BASE_PATH")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        v = "/" + v.strip("/")
        return v if v == "/" else v + "/"

    @property
    def api_prefix(self) -> str:
        return f"{self.BASE_PATH}api"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip().strip("/") for o in self.BACKEND_CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
