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

    # Prismic
    PRISMIC_API_ENDPOINT: str = "https://spacetraveling.cdn.prismic.io/api/v2"
    PRISMIC_ACCESS_TOKEN: str = ""
    PRISMIC_TIMEOUT: float = 10.0

    # Blog
    SITE_NAME: str = "spacetraveling"
    POSTS_DOCUMENT_TYPE: str = "posts"
    POSTS_PAGE_SIZE: int = 2

    # Comments (utterances)
    UTTERANC_GITHUB_REPO: str = ""
    COMMENTS_THEME: str = "dark-blue"

    # Dates
    DATE_LOCALE: str = "pt_BR"
    DISPLAY_TIMEZONE: str = "UTC"

    # Preview
    PREVIEW_COOKIE_NAME: str = "spacetraveling_preview"

    # Cache windows, in seconds
    LIST_REVALIDATE_SECONDS: int = 60
    POST_REVALIDATE_SECONDS: int = 60 * 5

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def prismic_search_url(self) -> str:
        return f"{self.PRISMIC_API_ENDPOINT.rstrip('/')}/documents/search"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
