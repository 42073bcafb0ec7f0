from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from techtrail.schemas.blog import SiteMetadata


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site metadata
    SITE_TITLE: str = "Nelson Ochoa"
    SITE_AUTHOR: str = "Nelson Ochoa"
    AUTHOR_SUMMARY: str = (
        "We are what we repeatedly do. Excellence then, is not an act, "
        "but a habit. - Aristotle"
    )
    SITE_DESCRIPTION: str = "- A blog by Nelson Ochoa"
    SITE_URL: str = "http://localhost:8000"
    TWITTER_HANDLE: str = "nelsonochoam"

    # Content
    CONTENT_DIR: str = "content/blog"
    ASSETS_DIR: str = "content/assets"
    HERO_IMAGE: str = "welcome.png"
    EXCERPT_LENGTH: int = 140
    DATE_FORMAT: str = "%B %d, %Y"
    INCLUDE_DRAFTS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Optional key guarding the JSON API; empty disables the check
    BLOG_API_KEY: str = ""

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def assets_path(self) -> Path:
        return Path(self.ASSETS_DIR)

    @property
    def site_metadata(self) -> SiteMetadata:
        return SiteMetadata(
            title=self.SITE_TITLE,
            author=self.SITE_AUTHOR,
            summary=self.AUTHOR_SUMMARY,
            description=self.SITE_DESCRIPTION,
            siteUrl=self.SITE_URL,
            twitter=self.TWITTER_HANDLE,
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
