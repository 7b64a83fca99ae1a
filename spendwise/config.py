"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./spendwise.db"

    # Service
    service_name: str = "spendwise"
    log_level: str = "INFO"

    # Workspace defaults (applied when a workspace does not override them)
    default_currency: str = "ILS"
    default_monthly_budget: float = 5200.0
    default_weekly_budget: float = 1300.0
    budget_start_day: int = 1  # 1-28 recommended
    week_start_day_of_week: int = 0  # 0=Sunday .. 6=Saturday

    # Purchases at or above this share of the weekly budget count as "big"
    big_purchase_ratio: float = 0.25

    # Public read-only links
    public_token_length: int = 12

    supported_languages: List[str] = ["en", "ru", "de"]


settings = Settings()
