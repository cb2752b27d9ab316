"""
Core Package - Venue Compliance Scoring
venue_compliance/core/__init__.py

Core infrastructure: dependencies, exceptions.
"""

from venue_compliance.core.exceptions import (
    ComplianceException,
    ScoringConfigurationException,
)

__all__ = [
    "ComplianceException",
    "ScoringConfigurationException",
]
