"""
Application Settings & Configuration

Centralized configuration management using Pydantic.
All settings loaded from environment variables with type validation.

Features:
- Type-safe configuration with Pydantic
- Environment-based settings (12-factor app)
- Answer service settings (Perplexity chat completions)
- Extraction tunables (team name limits, fallback sizes, confidence defaults)
- Security helpers (mask sensitive data)

Usage:
    >>> from config.settings import settings
    >>> print(settings.PERPLEXITY_MODEL)
    'sonar-pro'
    >>> print(settings.mask_sensitive('PERPLEXITY_API_KEY'))
    'pplx-abcde...wxyz'
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """
    Main application settings loaded from environment variables.

    All settings can be overridden via environment variables. None of them
    are required at import time: the research boundary checks for the API
    key only when a request payload is actually built.
    """

    # ========================================================================
    # ENVIRONMENT
    # ========================================================================
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Enable debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # ========================================================================
    # ANSWER SERVICE (PERPLEXITY)
    # ========================================================================
    PERPLEXITY_API_KEY: Optional[str] = Field(
        default=None,
        description="Perplexity API key (required only for outbound requests)"
    )
    PERPLEXITY_API_URL: str = Field(
        default="https://api.perplexity.ai/chat/completions",
        description="Chat completions endpoint"
    )
    PERPLEXITY_MODEL: str = Field(default="sonar-pro", description="Answer model identifier")
    PERPLEXITY_TEMPERATURE: float = Field(default=0.2, ge=0.0, le=2.0)
    PERPLEXITY_TOP_P: float = Field(default=0.9, ge=0.0, le=1.0)
    PERPLEXITY_RECENCY_FILTER: str = Field(
        default="week",
        description="Search recency window passed to the answer service"
    )

    # ========================================================================
    # EXTRACTION TUNABLES
    # ========================================================================
    MAX_TEAM_NAME_LENGTH: int = Field(
        default=50,
        description="Longest accepted team name after trimming",
        ge=2
    )
    FALLBACK_MATCHUP_LIMIT: int = Field(
        default=16,
        description="Maximum 'A vs B' hits used by the whole-text fallback",
        ge=1
    )
    DEFAULT_CONFIDENCE: int = Field(
        default=70,
        description="Confidence used when a prediction block omits it",
        ge=0,
        le=100
    )
    SENTIMENT_CONFIDENCE: int = Field(
        default=60,
        description="Confidence assigned to sentiment-derived picks",
        ge=0,
        le=100
    )
    SENTIMENT_WINDOW: int = Field(
        default=100,
        description="Characters inspected either side of a 'favored' phrase",
        ge=1
    )

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def mask_sensitive(self, key: str) -> str:
        """
        Mask sensitive values for safe logging.

        Shows first 10 and last 4 characters, masks the middle.

        Args:
            key: Setting attribute name (e.g., 'PERPLEXITY_API_KEY')

        Returns:
            Masked string (e.g., "pplx-abcde...wxyz")
        """
        value = getattr(self, key, None)
        if value and isinstance(value, str) and len(value) > 14:
            return f"{value[:10]}...{value[-4:]}"
        return "***"

    def has_research_api_key(self) -> bool:
        """True when an answer service key is configured and non-blank."""
        return bool(self.PERPLEXITY_API_KEY and self.PERPLEXITY_API_KEY.strip())

    # ========================================================================
    # PYDANTIC CONFIGURATION
    # ========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance (singleton).

    Uses @lru_cache to ensure only one Settings instance per application.

    Returns:
        Settings instance
    """
    return Settings()


# ============================================================================
# INITIALIZATION & EXPORTS
# ============================================================================

# Global singleton instance
settings = get_settings()


__all__ = [
    "Settings",
    "settings",
    "get_settings",
]
