from pydantic_settings import BaseSettings, SettingsConfigDict

from navigator.models.models import TravelMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"

    DEFAULT_TRAVEL_MODE: TravelMode = TravelMode.WALKING

settings = Settings()
