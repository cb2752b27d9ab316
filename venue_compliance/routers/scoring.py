"""
routers/scoring.py - Compliance Scoring Endpoints

Endpoints:
  GET  /api/v1/scoring/config                 - Active weights and tier thresholds
  POST /api/v1/scoring/score                  - Score one set of inspection answers
  GET  /api/v1/scoring/classify/{score}       - Tier for a global score
  POST /api/v1/scoring/inspections/preview    - Score a full submission, no persistence
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Dict
import logging

from venue_compliance.core.dependencies import (
    get_compliance_scorer,
    get_inspection_scoring_service,
)
from venue_compliance.models.inspection import InspectionInput, ScoreResponse, VenueStatus
from venue_compliance.models.submission import InspectionSubmission, ScoredInspection
from venue_compliance.scoring.compliance_scorer import ComplianceScorer
from venue_compliance.scoring.score_config import TierThreshold
from venue_compliance.services.inspection_scoring_service import InspectionScoringService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scoring", tags=["Compliance Scoring"])


class ScoreConfigResponse(BaseModel):
    weights: Dict[str, float]
    total_weight: float
    thresholds: Dict[str, TierThreshold]


@router.get("/config", response_model=ScoreConfigResponse, summary="Active scoring configuration")
async def get_score_config(scorer: ComplianceScorer = Depends(get_compliance_scorer)):
    weights = scorer.config.weights.model_dump()
    return ScoreConfigResponse(
        weights=weights,
        total_weight=round(sum(weights.values()), 4),
        thresholds={tier.value: threshold for tier, threshold in scorer.config.ordered_tiers()},
    )


@router.post("/score", response_model=ScoreResponse, summary="Score inspection answers")
async def score_inspection(
    data: InspectionInput,
    scorer: ComplianceScorer = Depends(get_compliance_scorer),
):
    breakdown = scorer.compute_global_score(data)
    return ScoreResponse(
        breakdown=breakdown,
        venue_status=scorer.classify_venue(breakdown.global_score),
        global_score=breakdown.global_score,
    )


@router.get("/classify/{score}", response_model=VenueStatus, summary="Classify a global score")
async def classify_score(
    score: int,
    scorer: ComplianceScorer = Depends(get_compliance_scorer),
):
    return scorer.classify_venue(score)


@router.post(
    "/inspections/preview",
    response_model=ScoredInspection,
    summary="Score a submitted inspection without saving it",
)
async def preview_inspection(
    submission: InspectionSubmission,
    service: InspectionScoringService = Depends(get_inspection_scoring_service),
):
    logger.info(f"Previewing inspection for venue {submission.venue_id}")
    return service.score_submission(submission)
