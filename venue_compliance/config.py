"""Application configuration with validation."""
from typing import Literal, Optional
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Venue Compliance Scoring"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Per-brand scoring config file (JSON); overrides the values below
    SCORE_CONFIG_PATH: Optional[str] = None

    # Sub-score weights
    W_VISIBILITY: float = Field(default=0.40, ge=0.0, le=1.0)
    W_POP: float = Field(default=0.30, ge=0.0, le=1.0)
    W_STOCK: float = Field(default=0.20, ge=0.0, le=1.0)
    W_KNOWLEDGE: float = Field(default=0.10, ge=0.0, le=1.0)

    # Venue tiers
    STRATEGIC_MIN_SCORE: int = Field(default=85, ge=0, le=100)
    STRATEGIC_LABEL: str = "Estratégico"
    STRATEGIC_COLOR: str = "#2ecc71"
    OPPORTUNITY_MIN_SCORE: int = Field(default=60, ge=0, le=100)
    OPPORTUNITY_LABEL: str = "Oportunidad"
    OPPORTUNITY_COLOR: str = "#f1c40f"
    RISK_MIN_SCORE: int = Field(default=0, ge=0, le=100)
    RISK_LABEL: str = "Riesgo"
    RISK_COLOR: str = "#e74c3c"

    @model_validator(mode="after")
    def validate_score_weights(self):
        """Validate sub-score weights sum to 1.0."""
        total = sum(self.score_weights.values())
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Score weights must sum to 1.0, got {total}")
        return self

    @property
    def score_weights(self) -> dict:
        """Get sub-score weights keyed by sub-score name."""
        return {
            "visibility": self.W_VISIBILITY,
            "pop": self.W_POP,
            "stock": self.W_STOCK,
            "knowledge": self.W_KNOWLEDGE,
        }

    @property
    def score_thresholds(self) -> dict:
        """Get tier thresholds keyed by tier name."""
        return {
            "strategic": {
                "min": self.STRATEGIC_MIN_SCORE,
                "label": self.STRATEGIC_LABEL,
                "color": self.STRATEGIC_COLOR,
            },
            "opportunity": {
                "min": self.OPPORTUNITY_MIN_SCORE,
                "label": self.OPPORTUNITY_LABEL,
                "color": self.OPPORTUNITY_COLOR,
            },
            "risk": {
                "min": self.RISK_MIN_SCORE,
                "label": self.RISK_LABEL,
                "color": self.RISK_COLOR,
            },
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
