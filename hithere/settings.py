from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_ROOT: str = "posts"
    CATALOG_FILE: str = "config.json"

    # Site
    SITE_TITLE: str = "Hi There"
    SITE_DESCRIPTION: str = "A blog post about common topic in web development"
    EDIT_BASE_URL: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def catalog_path(self) -> Path:
        return Path(self.CONTENT_ROOT) / self.CATALOG_FILE


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
