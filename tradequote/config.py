from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "TradeQuote"
    LOG_LEVEL: str = "INFO"

    # Intl-style formatting locale for money strings
    CURRENCY_LOCALE: str = "en_US"
    DEFAULT_CURRENCY: str = "CAD"

    # Pricing defaults used when a request leaves a field out
    DEFAULT_LABOR_RATE: float = 95.00
    DEFAULT_MATERIAL_MARKUP_PCT: float = 25.0
    DEFAULT_TAX_PCT: float = 5.0
    DEFAULT_DISCOUNT_PCT: float = 0.0
    DEFAULT_DEPOSIT_PCT: float = 40.0

    class Config:
        env_file = ".env"


settings = Settings()
