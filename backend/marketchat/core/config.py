"""
Application configuration using pydantic-settings.

WHAT: Centralized config from environment variables
WHY: Type-safe, validated config with sensible defaults
HOW: Pydantic BaseSettings reads from .env and environment
"""

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App metadata
    APP_NAME: str = "Marketchat"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Negotiation chat
    REPLY_DELAY_SECONDS: float = 1.5  # simulated supplier "typing" time
    LOW_OFFER_RATIO: float = 0.75  # below this share of MRP the offer is rejected
    ACCEPT_OFFER_RATIO: float = 0.90  # at or above this share of MRP the deal closes
    CURRENCY_SYMBOL: str = "₹"
    ALLOW_OFFERS_AFTER_DEAL: bool = False

    # Deal reveal placeholders
    SUPPLIER_CONTACT: str = "9876543210"
    DEAL_DISTANCE: str = "5 km"

    # CORS - accepts comma-separated string or list
    CORS_ORIGINS: str = "http://localhost:3000"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, list):
            return ",".join(v)
        return v

    @field_validator("ACCEPT_OFFER_RATIO")
    @classmethod
    def validate_accept_ratio(cls, v: float, info) -> float:
        """Ensure the accept threshold is not below the reject threshold."""
        low = info.data.get("LOW_OFFER_RATIO")
        if low is not None and v < low:
            raise ValueError("ACCEPT_OFFER_RATIO must be >= LOW_OFFER_RATIO")
        return v

    def get_cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "./data/logs/app.log"

    class Config:
        # Look for .env in project root first, then backend/.env
        env_file = [
            str(Path(__file__).parent.parent.parent.parent / ".env"),
            str(Path(__file__).parent.parent.parent / ".env"),
        ]
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Singleton instance
settings = Settings()
