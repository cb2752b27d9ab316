"""
Inspection Scoring Service
venue_compliance/services/inspection_scoring_service.py

Scores a submitted inspection form and prepares what the data store keeps:
the inspection record and the venue's current-score update.
"""

from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Protocol

import structlog

from venue_compliance.models.inspection import InspectionInput
from venue_compliance.models.submission import (
    InspectionRecord,
    InspectionSubmission,
    ScoredInspection,
    VenueScoreUpdate,
)
from venue_compliance.scoring.compliance_scorer import ComplianceScorer
from venue_compliance.scoring.perfect_serve import PerfectServeCalculator

logger = structlog.get_logger(__name__)

# Signage answers meaning "no signage on the back bar"
SIGNAGE_ABSENT = {"", "missing", "not-applicable", "not_applicable", "ausente", "no aplica"}

RECOMMENDATIONS_MARKER = "[RECOMENDACIONES]"


class InspectionStore(Protocol):
    """Data store collaborator (table CRUD behind it)."""

    def create_inspection(self, record: InspectionRecord) -> Any:
        ...

    def update_venue(self, venue_id: str, update: VenueScoreUpdate) -> Any:
        ...


def _first(form: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key present and not None."""
    for key in keys:
        if form.get(key) is not None:
            return form[key]
    return None


def as_list(value: Any) -> List[str]:
    """List-valued form answer. A lone string is one item; other scalars are empty."""
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return []


def signage_present(value: Any) -> bool:
    """Back-bar signage answer counts as present. Missing answers do not."""
    if value is None:
        return False
    return str(value).strip().lower() not in SIGNAGE_ABSENT


def build_observations(notes: Optional[str], recommended_actions: Optional[str]) -> str:
    """Inspector notes, followed by a recommendations block when given."""
    text = notes or ""
    if recommended_actions:
        text = f"{text}\n\n{RECOMMENDATIONS_MARKER}\n{recommended_actions}"
    return text.strip()


class InspectionScoringService:
    """Score inspection submissions and persist the result through a store."""

    def __init__(
        self,
        scorer: Optional[ComplianceScorer] = None,
        perfect_serve: Optional[PerfectServeCalculator] = None,
    ):
        self.scorer = scorer or ComplianceScorer()
        self.perfect_serve = perfect_serve or PerfectServeCalculator()

    def _materials(self, form: Mapping[str, Any]) -> List[str]:
        return as_list(_first(form, "pos_materials", "posMaterials"))

    def build_input(self, submission: InspectionSubmission) -> InspectionInput:
        """
        Derive the scorer input from the raw form.

        Material is present when back-bar signage was recorded or at least
        one POS material was listed.
        """
        form = submission.form
        materials = self._materials(form)
        has_material = signage_present(form.get("backBarSignage")) or len(materials) > 0

        return InspectionInput(
            staff_knowledge=_first(form, "staffKnowledge", "staff_knowledge"),
            certified_bartenders=_first(form, "certifiedBartenders", "certified_bartenders"),
            total_bartenders=_first(form, "totalBartenders", "total_bartenders"),
            brand_advocacy=_first(form, "brandAdvocacy", "brand_advocacy"),
            back_bar_visibility=_first(form, "backBarVisibility", "back_bar_visibility"),
            shelf_position=_first(form, "shelfPosition", "shelf_position"),
            tiene_material_pop=has_material,
            pos_materials=materials,
            stock_level=_first(form, "stockLevel", "stock_level"),
        )

    def score_submission(
        self,
        submission: InspectionSubmission,
        now: Optional[datetime] = None,
    ) -> ScoredInspection:
        """
        Score one submission without persisting it.

        Args:
            submission: The submitted form
            now: Inspection timestamp (defaults to current UTC time)

        Returns:
            ScoredInspection with the inspection record and venue update
        """
        now = now or datetime.now(timezone.utc)
        form = submission.form

        scorer_input = self.build_input(submission)
        breakdown = self.scorer.compute_global_score(scorer_input)
        venue_status = self.scorer.classify_venue(breakdown.global_score)
        perfect_serve = self.perfect_serve.calculate(form)

        details = dict(form)
        details["scoreBreakdown"] = breakdown.model_dump()
        details["venueStatus"] = venue_status.model_dump(mode="json")
        details["perfectServe"] = perfect_serve.percentage

        record = InspectionRecord(
            venue_id=submission.venue_id,
            product_id=submission.product_id,
            inspector_id=submission.inspector_id,
            inspected_at=now,
            product_present=bool(_first(form, "brandOnMenu", "brand_present")),
            stock_level=scorer_input.stock_level.value,
            material_pop_present=scorer_input.tiene_material_pop,
            material_pop_types=scorer_input.pos_materials,
            temperature=None if form.get("temperature") in (None, "") else form["temperature"],
            observations=build_observations(form.get("notes"), form.get("recommendedActions")),
            photo_urls=as_list(form.get("photos")),
            global_score=breakdown.global_score,
            score_breakdown=breakdown,
            venue_status=venue_status,
            perfect_serve_percentage=perfect_serve.percentage,
            details=details,
        )

        venue_update = VenueScoreUpdate(
            venue_id=submission.venue_id,
            segment=venue_status.label,
            tier=venue_status.status,
            global_score=breakdown.global_score,
            last_inspection_date=now,
        )

        logger.info(
            "inspection_scored",
            venue_id=submission.venue_id,
            product_id=submission.product_id,
            global_score=breakdown.global_score,
            tier=venue_status.status.value,
        )

        return ScoredInspection(record=record, venue_update=venue_update)

    def submit(
        self,
        submission: InspectionSubmission,
        store: InspectionStore,
        now: Optional[datetime] = None,
    ) -> ScoredInspection:
        """
        Score a submission, store the inspection, then update the venue.

        Store errors propagate; the venue is not updated if the inspection
        insert fails.
        """
        scored = self.score_submission(submission, now=now)
        store.create_inspection(scored.record)
        store.update_venue(submission.venue_id, scored.venue_update)

        logger.info(
            "inspection_submitted",
            venue_id=submission.venue_id,
            global_score=scored.record.global_score,
            segment=scored.venue_update.segment,
        )
        return scored
