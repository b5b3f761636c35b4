from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RTO_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Simulated market snapshot location
    market_city: str = "Austin"
    market_state: str = "TX"
    market_zip_code: str = "78701"

    # Rent-to-equity percentages compared by the scenarios endpoint
    scenario_percentages: list[Decimal] = [Decimal("15"), Decimal("25"), Decimal("35")]


settings = Settings()
