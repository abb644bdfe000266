"""Application settings loaded from environment variables."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_NAME = "Real Estate Intelligence"
SERVICE_VERSION = "5.0.0"

_DEFAULT_CORS_ORIGINS = (
    "https://infinityxoneintelligence.com,"
    "https://www.infinityxoneintelligence.com,"
    "http://localhost:3000,"
    "http://localhost:5173"
)


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Gateway configuration. All values come from environment variables."""

    # Google Cloud
    google_cloud_project: str = Field(default="infinity-x-one-systems")
    google_cloud_region: str = Field(default="us-east1")
    gcs_bucket_name: str = Field(default="real-estate-intelligence")
    google_application_credentials: str = Field(default="/app/credentials.json")

    # Google Sheets
    google_sheets_id: str = Field(default="1G4ACS7NJRBcE8XyhU4V2un5xPIm_b90fPi2Rt4iMs4k")

    # Generative model
    default_model: str = Field(default="gemini-2.0-flash-exp")

    # Runtime
    environment: str = Field(default="production")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # HTTP
    cors_origins: str = Field(default=_DEFAULT_CORS_ORIGINS)
    max_body_bytes: int = Field(default=10 * 1024 * 1024)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def get_cors_origins(self) -> list[str]:
        """Parse CORS_ORIGINS into a list of origins."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
