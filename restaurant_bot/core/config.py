from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DATA_STORE: str = "memory"  # "memory" | "postgres"
    DATABASE_URL: str | None = None
    DB_POOL_MIN_SIZE: int = 2
    DB_POOL_MAX_SIZE: int = 10
    SEED_SAMPLE_DATA: bool = True

    SESSION_STORE: str = "memory"  # "memory" | "json"
    SESSION_DATA_DIR: str = "./data/sessions"

    LISTING_LIMIT: int = 5
    RESERVATION_PARTY_SIZE: int = 4


settings = Settings()
