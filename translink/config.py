from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Translink"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Database settings
    database_url: str = "sqlite:///./translink.db"

    # Language settings
    # Single canonical fallback for every caller that needs a source language
    default_source_language: str = "fr"
    default_target_languages: list[str] = ["en"]
    language_settings_option: str = "translink_language_settings"

    # Attribute keys written on content records start with this prefix
    meta_prefix: str = "_translink_"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRANSLINK_",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
