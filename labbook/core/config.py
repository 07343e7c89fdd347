from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Lab Equipment Booking"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_FILE: str = "./data/labbook.json"
    SEED_ASSETS: bool = True

    CORS_ALLOW_ORIGINS: list[str] = ["*"]


settings = Settings()
