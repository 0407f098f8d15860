"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Loan bounds (EUR / months, inclusive)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60

    # Applicant age at the end of the loan, ~78 years
    max_age_months: int = 935

    # Interest rates per credit segment
    interest_rate_segment_1: float = 0.05
    interest_rate_segment_2: float = 0.04
    interest_rate_segment_3: float = 0.03

    # Service
    service_name: str = "decision-engine"
    log_level: str = "INFO"


settings = Settings()
