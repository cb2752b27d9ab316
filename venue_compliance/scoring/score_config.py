"""
Score Configuration
venue_compliance/scoring/score_config.py

Weights and tier thresholds consumed by ComplianceScorer.

    weights:    visibility 0.40, pop 0.30, stock 0.20, knowledge 0.10  (sum = 1.0)
    thresholds: strategic >= 85, opportunity >= 60, risk >= 0

A ScoreConfig is validated once when it is built. A config whose weights do
not sum to 1.0, or whose tier minimums are not strictly descending, is
rejected instead of producing skewed scores.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from venue_compliance.config import Settings, get_settings
from venue_compliance.core.exceptions import ScoringConfigurationException
from venue_compliance.models.enumerations import VenueTier

logger = structlog.get_logger(__name__)

WEIGHT_SUM_TOLERANCE = 0.001


class ScoreWeights(BaseModel):
    """Relative weight of each sub-score in the global score."""

    model_config = ConfigDict(frozen=True)

    visibility: float = Field(default=0.40, ge=0.0, le=1.0)
    pop: float = Field(default=0.30, ge=0.0, le=1.0)
    stock: float = Field(default=0.20, ge=0.0, le=1.0)
    knowledge: float = Field(default=0.10, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_sum(self):
        """Validate weights sum to 1.0."""
        total = self.visibility + self.pop + self.stock + self.knowledge
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Score weights must sum to 1.0, got {total}")
        return self


class TierThreshold(BaseModel):
    """Minimum global score of a tier plus how the dashboard shows it."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(..., ge=0, le=100)
    label: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)


class TierThresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategic: TierThreshold = TierThreshold(min=85, label="Estratégico", color="#2ecc71")
    opportunity: TierThreshold = TierThreshold(min=60, label="Oportunidad", color="#f1c40f")
    risk: TierThreshold = TierThreshold(min=0, label="Riesgo", color="#e74c3c")

    @model_validator(mode="after")
    def validate_order(self):
        """Tier minimums must be strictly descending: strategic > opportunity > risk."""
        if not self.strategic.min > self.opportunity.min > self.risk.min:
            raise ValueError(
                "Tier minimums must satisfy strategic > opportunity > risk, got "
                f"{self.strategic.min} / {self.opportunity.min} / {self.risk.min}"
            )
        return self


class ScoreConfig(BaseModel):
    """Complete scoring configuration (one per brand, or per test)."""

    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = ScoreWeights()
    thresholds: TierThresholds = TierThresholds()

    def ordered_tiers(self) -> List[Tuple[VenueTier, TierThreshold]]:
        """Tiers sorted highest minimum first, the order they are evaluated in."""
        tiers = [
            (VenueTier.STRATEGIC, self.thresholds.strategic),
            (VenueTier.OPPORTUNITY, self.thresholds.opportunity),
            (VenueTier.RISK, self.thresholds.risk),
        ]
        return sorted(tiers, key=lambda item: item[1].min, reverse=True)


DEFAULT_SCORE_CONFIG = ScoreConfig()


def load_score_config(settings: Optional[Settings] = None) -> ScoreConfig:
    """
    Build the active ScoreConfig.

    A JSON file named by SCORE_CONFIG_PATH wins over the individual
    W_* / *_MIN_SCORE settings.

    Args:
        settings: Settings to read from (defaults to get_settings())

    Returns:
        Validated ScoreConfig

    Raises:
        ScoringConfigurationException: file unreadable or values invalid
    """
    settings = settings or get_settings()

    if settings.SCORE_CONFIG_PATH:
        path = Path(settings.SCORE_CONFIG_PATH)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ScoringConfigurationException(
                f"Cannot read scoring config file: {e}", source=str(path)
            ) from e
        try:
            config = ScoreConfig.model_validate_json(raw)
        except ValidationError as e:
            raise ScoringConfigurationException(str(e), source=str(path)) from e
        logger.info("score_config_loaded", source=str(path))
        return config

    try:
        config = ScoreConfig(
            weights=ScoreWeights(**settings.score_weights),
            thresholds=TierThresholds(
                **{
                    name: TierThreshold(**values)
                    for name, values in settings.score_thresholds.items()
                }
            ),
        )
    except ValidationError as e:
        raise ScoringConfigurationException(str(e), source="settings") from e

    logger.info("score_config_loaded", source="settings", weights=settings.score_weights)
    return config
