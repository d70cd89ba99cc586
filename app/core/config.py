from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "sunnah-foundation-site"
    LOG_LEVEL: str = "INFO"

    ADMIN_JWT_TTL_MINUTES: int = 1440
    ADMIN_JWT_SECRET: str = "change_me_admin"

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    DATABASE_URL: str
    REDIS_URL: str

    EMAIL_PROVIDER: str = "dummy"  # dummy | smtp | service
    EMAIL_SERVICE_URL: str = "http://email-service:8010"
    INTERNAL_SERVICE_TOKEN: str = "change_me_internal_service_token"
    EMAIL_FROM_ADDRESS: str = "noreply@sunnahfoundation.org"
    EMAIL_FROM_NAME: str = "Sunnah Foundation"
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    SMTP_USE_SSL: bool = False

    NEWSLETTER_FROM_NAME: str = "Sunnah Foundation Newsletter"
    NEWSLETTER_BATCH_SIZE: int = 1000
    NEWSLETTER_ASYNC: bool = False

    PUBLIC_FORM_RATE_LIMIT: int = 10
    PUBLIC_FORM_RATE_LIMIT_WINDOW_SECONDS: int = 600

    ADMIN_BOOTSTRAP_ENABLED: bool = True
    ADMIN_BOOTSTRAP_USERNAME: str = "admin"
    ADMIN_BOOTSTRAP_PASSWORD: str = "adminPassword123"

    # Compose/infra vars that may exist in shared .env
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "sunnah"

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
