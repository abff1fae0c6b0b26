# storefront/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # Uniform price of every t-shirt, in cents
    UNIT_PRICE_CENTS: int = 1000

    # Shipping tier costs, in cents
    SHIPPING_EXPRESS_CENTS: int = 500
    SHIPPING_STANDARD_CENTS: int = 200
    SHIPPING_PICKUP_CENTS: int = 0

    # Optional frontend origin allowed by CORS
    FRONTEND_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    # Oldest audit entries are dropped past this size
    AUDIT_LOG_LIMIT: int = 500

    class Config:
        env_file: ClassVar[str] = str(env_path)

settings = Settings()
