"""
Application settings from environment variables.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Flight data source
    flight_csv_path: str = "data/flightdata.csv"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_allow_origins: list[str] = ["*"]

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        # logging only knows upper-case level names
        return value.strip().upper()


settings = Settings()
