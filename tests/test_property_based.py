# tests/test_property_based.py
"""
Property-Based Tests - ComplianceScorer

Hypothesis tests with max_examples=500, covering:
  - bounds of every sub-score and the global score
  - visibility monotonicity
  - determinism
  - totality and ordering of venue classification
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from venue_compliance.models.enumerations import VenueTier
from venue_compliance.models.inspection import InspectionInput
from venue_compliance.scoring.compliance_scorer import ComplianceScorer
from venue_compliance.models.normalization import (
    BACK_BAR_VISIBILITY_SYNONYMS,
    BRAND_ADVOCACY_SYNONYMS,
    SHELF_POSITION_SYNONYMS,
    STOCK_LEVEL_SYNONYMS,
)
from venue_compliance.scoring.score_config import ScoreConfig, ScoreWeights

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------


def answer_st(table):
    """A known spelling (any case) or arbitrary junk text."""
    known = st.sampled_from(sorted(table)).flatmap(
        lambda v: st.sampled_from([v, v.upper(), v.title()])
    )
    return st.one_of(known, st.text(max_size=12), st.none())


@st.composite
def valid_inspection_st(draw):
    """Inspection within the documented ranges (staff knowledge 1-10, certified <= total)."""
    total = draw(st.integers(min_value=0, max_value=40))
    return InspectionInput(
        staff_knowledge=draw(st.integers(min_value=1, max_value=10)),
        certified_bartenders=draw(st.integers(min_value=0, max_value=total)),
        total_bartenders=total,
        brand_advocacy=draw(answer_st(BRAND_ADVOCACY_SYNONYMS)),
        back_bar_visibility=draw(answer_st(BACK_BAR_VISIBILITY_SYNONYMS)),
        shelf_position=draw(answer_st(SHELF_POSITION_SYNONYMS)),
        tiene_material_pop=draw(st.booleans()),
        pos_materials=draw(st.lists(st.text(min_size=1, max_size=15), max_size=10)),
        stock_level=draw(answer_st(STOCK_LEVEL_SYNONYMS)),
    )


@st.composite
def any_inspection_st(draw):
    """Inspection with unchecked numbers (what a broken form could send)."""
    return InspectionInput(
        staff_knowledge=draw(st.integers(min_value=-50, max_value=500)),
        certified_bartenders=draw(st.integers(min_value=-10, max_value=500)),
        total_bartenders=draw(st.integers(min_value=-10, max_value=500)),
        brand_advocacy=draw(answer_st(BRAND_ADVOCACY_SYNONYMS)),
        back_bar_visibility=draw(answer_st(BACK_BAR_VISIBILITY_SYNONYMS)),
        shelf_position=draw(answer_st(SHELF_POSITION_SYNONYMS)),
        tiene_material_pop=draw(st.booleans()),
        pos_materials=draw(st.lists(st.text(max_size=15), max_size=10)),
        stock_level=draw(answer_st(STOCK_LEVEL_SYNONYMS)),
    )


@st.composite
def weights_st(draw):
    """Random weights in whole percents that sum to exactly 100%."""
    cuts = sorted(draw(st.lists(st.integers(min_value=0, max_value=100), min_size=3, max_size=3)))
    parts = [cuts[0], cuts[1] - cuts[0], cuts[2] - cuts[1], 100 - cuts[2]]
    return ScoreWeights(
        visibility=parts[0] / 100,
        pop=parts[1] / 100,
        stock=parts[2] / 100,
        knowledge=parts[3] / 100,
    )


# ---------------------------------------------------------------------------
# Score bounds
# ---------------------------------------------------------------------------


class TestScoreBounds:

    @given(valid_inspection_st())
    @settings(max_examples=500)
    def test_valid_inputs_bounded(self, data):
        result = ComplianceScorer().compute_global_score(data)
        for value in (result.visibility, result.pop, result.stock, result.knowledge, result.global_score):
            assert 0 <= value <= 100

    @given(any_inspection_st())
    @settings(max_examples=500)
    def test_garbage_inputs_never_raise_and_stay_bounded(self, data):
        result = ComplianceScorer().compute_global_score(data)
        assert 0 <= result.global_score <= 100
        assert 0 <= result.knowledge <= 100

    @given(valid_inspection_st(), weights_st())
    @settings(max_examples=500)
    def test_any_unit_weights_bounded(self, data, weights):
        result = ComplianceScorer(ScoreConfig(weights=weights)).compute_global_score(data)
        assert 0 <= result.global_score <= 100

    @given(valid_inspection_st(), weights_st())
    @settings(max_examples=500)
    def test_global_between_min_and_max_sub_score(self, data, weights):
        """A convex combination cannot leave the range of its parts (±1 for rounding)."""
        result = ComplianceScorer(ScoreConfig(weights=weights)).compute_global_score(data)
        parts = result.sub_scores().values()
        assert min(parts) - 1 <= result.global_score <= max(parts) + 1


# ---------------------------------------------------------------------------
# Visibility / determinism
# ---------------------------------------------------------------------------


class TestScorerProperties:

    @given(
        answer_st(BACK_BAR_VISIBILITY_SYNONYMS),
        answer_st(SHELF_POSITION_SYNONYMS),
    )
    @settings(max_examples=500)
    def test_prominent_top_is_maximum(self, back_bar, shelf):
        scorer = ComplianceScorer()
        best = scorer.compute_visibility_score(
            InspectionInput(back_bar_visibility="prominent", shelf_position="top")
        )
        other = scorer.compute_visibility_score(
            InspectionInput(back_bar_visibility=back_bar, shelf_position=shelf)
        )
        assert best == 100
        assert other <= best

    @given(st.lists(st.text(min_size=1, max_size=10), min_size=0, max_size=20))
    @settings(max_examples=500)
    def test_more_materials_never_lower_pop(self, materials):
        scorer = ComplianceScorer()
        base = scorer.compute_pop_score(InspectionInput(tiene_material_pop=True, pos_materials=materials))
        more = scorer.compute_pop_score(
            InspectionInput(tiene_material_pop=True, pos_materials=materials + ["extra-display-unit"])
        )
        assert more >= base

    @given(valid_inspection_st())
    @settings(max_examples=500)
    def test_deterministic(self, data):
        scorer = ComplianceScorer()
        assert scorer.compute_global_score(data) == scorer.compute_global_score(data)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

_TIER_RANK = {VenueTier.RISK: 0, VenueTier.OPPORTUNITY: 1, VenueTier.STRATEGIC: 2}


class TestClassificationProperties:

    @given(st.integers(min_value=-1000, max_value=1000))
    @settings(max_examples=500)
    def test_total(self, score):
        assert ComplianceScorer().classify_venue(score).status in set(VenueTier)

    @given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
    @settings(max_examples=500)
    def test_monotone_in_score(self, a, b):
        low, high = sorted((a, b))
        scorer = ComplianceScorer()
        assert _TIER_RANK[scorer.classify_venue(low).status] <= _TIER_RANK[scorer.classify_venue(high).status]

    @pytest.mark.parametrize("score", range(0, 101))
    def test_default_cutoffs(self, score):
        status = ComplianceScorer().classify_venue(score).status
        if score >= 85:
            assert status == VenueTier.STRATEGIC
        elif score >= 60:
            assert status == VenueTier.OPPORTUNITY
        else:
            assert status == VenueTier.RISK
