"""Application settings and configuration"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "GitHub Wrapped"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # GitHub GraphQL API
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_GRAPHQL_URL: str = "https://api.github.com/graphql"

    # GitHub client resilience controls
    GITHUB_TIMEOUT_SECONDS: float = 30.0
    GITHUB_MAX_RETRIES: int = 3
    GITHUB_BACKOFF_BASE_SECONDS: float = 1.0
    GITHUB_BACKOFF_MAX_SECONDS: float = 16.0
    GITHUB_RATE_LIMIT_BUFFER_SECONDS: int = 2

    USER_AGENT: str = "GitHubWrapped/1.0"

    # Fetch window (single page, no pagination)
    WRAPPED_REPOSITORY_LIMIT: int = 100
    WRAPPED_LANGUAGES_PER_REPOSITORY: int = 10

    # Presentation
    WRAPPED_SLIDE_REPOS: int = 3  # Repos listed on the top-repos slide

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
