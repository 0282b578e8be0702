"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fynp-gateway"
    log_level: str = "INFO"

    # Eligibility
    foir_ceiling_ratio: float = 0.55  # Fixed obligation to income ratio

    # Loan configuration sliders
    loan_amount_min: float = 50_000
    loan_amount_max: float = 1_000_000
    loan_amount_step: float = 1_000
    tenure_months_min: int = 6
    tenure_months_max: int = 60
    default_processing_fee: float = 1_499


settings = Settings()
