"""Configuration from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment.

    All settings can be overridden via environment variables or a .env file.
    """

    # Catalog file loaded when no --file is given
    CATALOG_PATH: str = "courses.csv"

    # Console output
    COURSE_LIST_HEADING: str = "Computer Science Course List"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


settings = Settings()
