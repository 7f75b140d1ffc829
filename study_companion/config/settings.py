"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider credentials (primary first, then secondary)
    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key (primary provider)",
        validation_alias="ANTHROPIC_API_KEY",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key (secondary provider)",
        validation_alias="OPENAI_API_KEY",
    )

    # Model Configuration
    anthropic_model: str = Field(
        default="claude-3-5-sonnet-20241022",
        description="Anthropic model identifier",
        validation_alias="ANTHROPIC_MODEL",
    )
    openai_model: str = Field(
        default="gpt-4",
        description="OpenAI model identifier",
        validation_alias="OPENAI_MODEL",
    )

    # Generation Settings
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Sampling temperature for every generation call",
        validation_alias="TEMPERATURE",
    )

    # Exam thresholds
    points_tolerance: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Allowed deviation of exam total points before rebalancing",
        validation_alias="POINTS_TOLERANCE",
    )
    hard_fraction_limit: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Max share of high-point exam questions before flagging imbalance",
        validation_alias="HARD_FRACTION_LIMIT",
    )
    easy_fraction_floor: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Min share of low-point exam questions before flagging imbalance",
        validation_alias="EASY_FRACTION_FLOOR",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def has_provider_credentials(self) -> bool:
        """True when at least one live provider key is configured."""
        return bool(self.anthropic_api_key or self.openai_api_key)


# Built once by the entry point and passed explicitly to the provider client
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
