from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration for the payment reports service."""

    store_backend: str = "memory"  # options: memory, mongo
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "payments"
    revenue_collection: str = "revenue_payment_reports"
    cdma_collection: str = "cdma_payment_reports"
    display_timezone: str = "Asia/Kolkata"
    default_lookback_hours: int = 2
    seed_demo_records: int = 0
    log_level: str = "INFO"


settings = Settings()
