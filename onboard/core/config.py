# File: onboard/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [i.strip() for i in value.split(",") if i.strip()]


class ConfigurationError(RuntimeError):
    """Raised at startup when the environment is not usable."""


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Onboard Path API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    environment: str = os.getenv("ENVIRONMENT", "development")
    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGIN", "http://localhost:3000"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./data/onboard.db")

    # Auth
    jwt_secret: Optional[str] = os.getenv("JWT_SECRET") or None
    jwt_expires_minutes: int = int(os.getenv("JWT_EXPIRES_MINUTES", str(60 * 24 * 7)))  # 7d
    algorithm: str = "HS256"

    # Text completion
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY") or None
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
    openai_timeout_seconds: float = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return _split_csv(v)
        if isinstance(v, list):
            return v
        return []

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def signing_secret(self) -> str:
        return self.jwt_secret or "dev-secret-key"

    def validate_for_startup(self) -> None:
        """
        Fail fast when production is missing its secrets.
        """
        if not self.is_production:
            return
        missing = []
        if not self.jwt_secret:
            missing.append("JWT_SECRET")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings()
