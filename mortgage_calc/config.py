from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Loan defaults applied when the form leaves a field blank
    default_term_years: int = 30
    default_pmi_equity_pct: Decimal = Decimal("0.22")

    # Longest term the form accepts; longer terms are clamped to it
    max_term_years: int = 50

    # Categories summed into running totals for the cumulative chart.
    # HOA, property tax and insurance stay flat recurring charges.
    cumulative_categories: list[str] = ["principal", "interest", "pmi"]

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
