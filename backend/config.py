"""Centralized configuration — all env vars in one place."""

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.port: int = int(os.getenv("PORT", "8080"))
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "https://socialagechecker.com").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # YouTube Data API v3
        self.youtube_api_key: str | None = os.getenv("YOUTUBE_API_KEY")
        self.youtube_api_base_url: str = os.getenv(
            "YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3"
        )
        self.upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars."""
        required = ["YOUTUBE_API_KEY"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "YOUTUBE_API_KEY": "youtube_api_key",
    }
    return mapping.get(env_var, env_var.lower())
