"""
Configuration module for the pharmacy tracker.

Defaults match the store's business rules; environment variables or a
``.env`` file may override them.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application settings
    app_name: str = Field(default="Pharmacy Inventory & Sales Tracker")

    # Logging settings
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or console

    # Business rules
    low_stock_threshold: int = Field(default=5, ge=0)
    near_expiry_days: int = Field(default=90, ge=1)
    allow_expired_sales: bool = Field(default=False)

    # Display settings
    currency_symbol: str = Field(default="$")

    # Chart settings
    sales_chart_days: int = Field(default=7, ge=1)
    near_expiry_limit: int = Field(default=10, ge=1)
    category_chart_limit: int = Field(default=8, ge=1)

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
