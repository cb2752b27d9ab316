"""
Dependencies - Venue Compliance Scoring
venue_compliance/core/dependencies.py

FastAPI dependency injection for the scorer and submission service.
"""

from functools import lru_cache

from venue_compliance.scoring.compliance_scorer import ComplianceScorer
from venue_compliance.scoring.score_config import load_score_config
from venue_compliance.services.inspection_scoring_service import InspectionScoringService


@lru_cache()
def get_compliance_scorer() -> ComplianceScorer:
    """Get cached ComplianceScorer built from the active configuration."""
    return ComplianceScorer(load_score_config())


@lru_cache()
def get_inspection_scoring_service() -> InspectionScoringService:
    """Get cached InspectionScoringService sharing the cached scorer."""
    return InspectionScoringService(get_compliance_scorer())
