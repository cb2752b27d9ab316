# tests/conftest.py

"""
Pytest Fixtures - Shared inspection data, scorers and the API client
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from venue_compliance.main import app
from venue_compliance.models.inspection import InspectionInput
from venue_compliance.models.submission import InspectionSubmission
from venue_compliance.scoring.compliance_scorer import ComplianceScorer
from venue_compliance.services.inspection_scoring_service import InspectionScoringService


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SCORER FIXTURES
# =============================================================================

@pytest.fixture
def scorer():
    """Scorer with the built-in default configuration."""
    return ComplianceScorer()


@pytest.fixture
def scoring_service(scorer):
    return InspectionScoringService(scorer)


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 14, 21, 30, tzinfo=timezone.utc)


# =============================================================================
# INSPECTION INPUT FIXTURES
# =============================================================================

@pytest.fixture
def strategic_answers():
    """Well-executed venue: expected global score 88 (strategic)."""
    return {
        "staffKnowledge": 8,
        "certifiedBartenders": 2,
        "totalBartenders": 4,
        "brandAdvocacy": "high",
        "backBarVisibility": "prominent",
        "shelfPosition": "top",
        "tieneMaterialPop": True,
        "posMaterials": ["backBarSignage", "coasters"],
        "stockLevel": "adequate",
    }


@pytest.fixture
def strategic_input(strategic_answers):
    return InspectionInput(**strategic_answers)


@pytest.fixture
def empty_input():
    """Nothing answered at all."""
    return InspectionInput()


# =============================================================================
# SUBMISSION FIXTURES
# =============================================================================

@pytest.fixture
def spanish_form():
    """Form as sent by the inspector app with Spanish answers."""
    return {
        "staffKnowledge": 8,
        "certifiedBartenders": 2,
        "totalBartenders": 4,
        "brandAdvocacy": "Alta",
        "backBarVisibility": "Destacado",
        "shelfPosition": "Superior",
        "backBarSignage": "present",
        "pos_materials": ["backBarSignage", "coasters"],
        "stockLevel": "Adecuado",
        "brandOnMenu": True,
        "temperature": 4.5,
        "notes": "Buen servicio en barra",
        "recommendedActions": "Reforzar capacitación del turno noche",
        "photos": ["https://cdn.example.com/visits/1.jpg"],
        "perfectServeAnswers": {
            "glassware": True,
            "ice": True,
            "garnish": False,
            "tonic": True,
        },
    }


@pytest.fixture
def spanish_submission(spanish_form):
    return InspectionSubmission(
        venue_id="d4f2c1aa-0000-0000-0000-000000000001",
        product_id="e5a3b2bb-0000-0000-0000-000000000002",
        inspector_id="f6b4c3cc-0000-0000-0000-000000000003",
        form=spanish_form,
    )
