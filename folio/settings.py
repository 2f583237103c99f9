from functools import cached_property
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from folio.schemas.meta import SiteDefaults


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site defaults for page metadata
    SITE_TITLE: str = "Isidro Salcedo"
    SITE_DESCRIPTION: str = "Software engineer writing about streaming, fintech and the web."
    SITE_IMAGE: str = "/static/images/site-preview.svg"
    SITE_NAME: str = "Isidro Salcedo"
    BASE_URL: str = "http://localhost:8000"
    TWITTER_HANDLE: str = "@issalcedo"

    # About page
    AUTHOR_NAME: str = "Isidro Salcedo"
    TWITTER_URL: str = "https://twitter.com/issalcedo"

    # Content and output locations
    POSTS_DIR: str = "content/posts"
    STATIC_DIR: str = "static"
    BUILD_DIR: str = "build"

    # Logging
    LOG_LEVEL: str = "INFO"

    @cached_property
    def site_defaults(self) -> SiteDefaults:
        return SiteDefaults(
            title=self.SITE_TITLE,
            description=self.SITE_DESCRIPTION,
            image=self.SITE_IMAGE,
            base_url=self.BASE_URL.rstrip("/"),
            site_name=self.SITE_NAME,
            twitter_handle=self.TWITTER_HANDLE or None,
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
