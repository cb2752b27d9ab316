# venue_compliance/scoring/compliance_scorer.py
"""
Compliance Scorer
-----------------
Turns the answers of one venue inspection into four sub-scores, a weighted
global score and a venue tier.

Sub-scores (each an integer in [0, 100]):
    knowledge  = round(0.4 × K1 + 0.4 × K2 + 0.2 × K3)
                 K1 = staff_knowledge × 10
                 K2 = certified / total bartenders × 100   (0 if no bartenders)
                 K3 = advocacy high 100 / medium 50 / low 0
    visibility = back bar (60 / 40 / 10 / 0) + shelf (40 / 20 / 5 / 0), max 100
    pop        = 0 without material, else 50 + 10 per distinct material (max +50)
    stock      = adequate 100 / low 50 / anything else 0

Global score:
    global = round(Σ sub_score × weight)   clamped to [0, 100]

Tiers are evaluated highest minimum first; the first one the score reaches
wins, and anything below every minimum is the lowest tier.

Unrecognized or missing answers always land in the lowest-scoring bucket.
Nothing here raises on bad inspection data.
"""
from decimal import Decimal
from typing import Dict, Optional

import structlog

from venue_compliance.models.enumerations import (
    BackBarVisibility,
    BrandAdvocacy,
    ShelfPosition,
    StockLevel,
)
from venue_compliance.models.inspection import InspectionInput, ScoreBreakdown, VenueStatus
from venue_compliance.scoring.score_config import DEFAULT_SCORE_CONFIG, ScoreConfig
from venue_compliance.scoring.utils import clamp, round_half_up, to_decimal

logger = structlog.get_logger(__name__)


class ComplianceScorer:
    """Score venue inspections against a ScoreConfig."""

    # Knowledge formula weights (K1 staff rating, K2 certified ratio, K3 advocacy)
    KNOWLEDGE_WEIGHTS = (Decimal("0.4"), Decimal("0.4"), Decimal("0.2"))

    ADVOCACY_POINTS: Dict[BrandAdvocacy, int] = {
        BrandAdvocacy.HIGH: 100,
        BrandAdvocacy.MEDIUM: 50,
        BrandAdvocacy.LOW: 0,
    }

    BACK_BAR_POINTS: Dict[BackBarVisibility, int] = {
        BackBarVisibility.PROMINENT: 60,
        BackBarVisibility.VISIBLE: 40,
        BackBarVisibility.HIDDEN: 10,
    }

    SHELF_POINTS: Dict[ShelfPosition, int] = {
        ShelfPosition.TOP: 40,
        ShelfPosition.MIDDLE: 20,
        ShelfPosition.BOTTOM: 5,
    }

    STOCK_POINTS: Dict[StockLevel, int] = {
        StockLevel.ADEQUATE: 100,
        StockLevel.LOW: 50,
    }

    POP_BASE = 50
    POP_POINTS_PER_MATERIAL = 10
    POP_MAX_BONUS = 50

    def __init__(self, config: Optional[ScoreConfig] = None):
        self.config = config or DEFAULT_SCORE_CONFIG

    # ------------------------------------------------------------------
    # Sub-scores
    # ------------------------------------------------------------------

    def compute_knowledge_score(self, data: InspectionInput) -> int:
        """
        Staff knowledge sub-score.

        Args:
            data: Inspection answers. staff_knowledge is expected in 1-10 but
                  is not checked here.

        Returns:
            Integer in [0, 100]

        Examples:
            >>> scorer = ComplianceScorer()
            >>> scorer.compute_knowledge_score(InspectionInput(
            ...     staffKnowledge=8, certifiedBartenders=2, totalBartenders=4,
            ...     brandAdvocacy="high"))
            72
        """
        k1 = to_decimal(data.staff_knowledge) * 10

        k2 = Decimal("0")
        if data.total_bartenders > 0:
            k2 = to_decimal(data.certified_bartenders) / to_decimal(data.total_bartenders) * 100

        k3 = Decimal(self.ADVOCACY_POINTS.get(data.brand_advocacy, 0))

        w1, w2, w3 = self.KNOWLEDGE_WEIGHTS
        return round_half_up(clamp(w1 * k1 + w2 * k2 + w3 * k3))

    def compute_visibility_score(self, data: InspectionInput) -> int:
        """Back-bar plus shelf placement, capped at 100."""
        score = self.BACK_BAR_POINTS.get(data.back_bar_visibility, 0)
        score += self.SHELF_POINTS.get(data.shelf_position, 0)
        return min(100, score)

    def compute_pop_score(self, data: InspectionInput) -> int:
        """Point-of-sale material: presence base plus a bonus per distinct item."""
        materials = {m.strip().lower() for m in data.pos_materials if m and m.strip()}
        if not data.tiene_material_pop and not materials:
            return 0

        bonus = min(self.POP_MAX_BONUS, len(materials) * self.POP_POINTS_PER_MATERIAL)
        return min(100, self.POP_BASE + bonus)

    def compute_stock_score(self, data: InspectionInput) -> int:
        return self.STOCK_POINTS.get(data.stock_level, 0)

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def compute_global_score(self, data: InspectionInput) -> ScoreBreakdown:
        """
        Compute every sub-score, then the weighted global score.

        Args:
            data: Inspection answers

        Returns:
            ScoreBreakdown with the four sub-scores and global_score

        Examples:
            >>> scorer = ComplianceScorer()
            >>> scorer.compute_global_score(InspectionInput(
            ...     staffKnowledge=8, certifiedBartenders=2, totalBartenders=4,
            ...     brandAdvocacy="high", backBarVisibility="prominent",
            ...     shelfPosition="top", tieneMaterialPop=True,
            ...     posMaterials=["backBarSignage", "coasters"],
            ...     stockLevel="adequate")).global_score
            88
        """
        sub_scores = {
            "visibility": self.compute_visibility_score(data),
            "pop": self.compute_pop_score(data),
            "stock": self.compute_stock_score(data),
            "knowledge": self.compute_knowledge_score(data),
        }

        weights = self.config.weights
        weighted = (
            Decimal(sub_scores["visibility"]) * to_decimal(weights.visibility)
            + Decimal(sub_scores["pop"]) * to_decimal(weights.pop)
            + Decimal(sub_scores["stock"]) * to_decimal(weights.stock)
            + Decimal(sub_scores["knowledge"]) * to_decimal(weights.knowledge)
        )
        global_score = round_half_up(clamp(weighted))

        logger.info(
            "compliance_score_calculated",
            **sub_scores,
            weighted_sum=float(weighted),
            global_score=global_score,
        )

        return ScoreBreakdown(global_score=global_score, **sub_scores)

    def classify_venue(self, global_score: int) -> VenueStatus:
        """
        Classify a global score into a venue tier.

        Args:
            global_score: Score to classify (any integer)

        Returns:
            VenueStatus of the highest tier whose minimum the score reaches

        Examples:
            >>> ComplianceScorer().classify_venue(85).status.value
            'strategic'
            >>> ComplianceScorer().classify_venue(84).status.value
            'opportunity'
        """
        tiers = self.config.ordered_tiers()

        # Lowest tier catches everything below the last minimum
        tier, threshold = tiers[-1]
        for candidate, candidate_threshold in tiers:
            if global_score >= candidate_threshold.min:
                tier, threshold = candidate, candidate_threshold
                break

        logger.debug("venue_classified", global_score=global_score, tier=tier.value)

        return VenueStatus(
            status=tier,
            label=threshold.label,
            color=threshold.color,
            min_score=threshold.min,
        )
