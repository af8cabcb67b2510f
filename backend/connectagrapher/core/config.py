from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator
from typing import Any, ClassVar
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # Database URL
    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'studio.db'}"

    # CORS origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    # Public site URL used in email links
    APP_URL: str = "https://connectagrapher.com"
    EMAIL_DOMAIN: str = "connectagrapher.com"
    BRAND_NAME: str = "ConnectAGrapher"

    # Default currency code used across the application
    DEFAULT_CURRENCY: str = "USD"

    LOG_LEVEL: str = "INFO"

    # Shared secret for the admin surface, sent as X-Admin-Token
    ADMIN_API_TOKEN: str = ""

    # Email transport: "smtp", "resend" or "" (log only)
    EMAIL_TRANSPORT: str = ""
    RESEND_API_KEY: str = ""
    RESEND_API_URL: str = "https://api.resend.com/emails"

    # SMTP email settings
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 25
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""

    # Lemon Squeezy checkout collaborator
    LEMONSQUEEZY_API_KEY: str = ""
    LEMONSQUEEZY_API_URL: str = "https://api.lemonsqueezy.com/v1"
    LEMONSQUEEZY_STORE_ID: str = ""
    LEMONSQUEEZY_VARIANT_ID: str = ""

    # Email Dev Mode: log full rendered bodies for local testing
    EMAIL_DEV_MODE: bool = False

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("EMAIL_TRANSPORT", mode="before")
    def normalize_transport(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("APP_URL", mode="before")
    def strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(cls, values: "Settings") -> "Settings":
        if values.CORS_ALLOW_ALL:
            values.CORS_ORIGINS = ["*"]
        return values

    @model_validator(mode="after")
    def infer_email_transport(cls, values: "Settings") -> "Settings":
        """Pick the Resend transport when only an API key was provided."""
        if not values.EMAIL_TRANSPORT and values.RESEND_API_KEY:
            values.EMAIL_TRANSPORT = "resend"
        return values


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
