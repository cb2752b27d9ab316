"""
Custom Exceptions - Venue Compliance Scoring
venue_compliance/core/exceptions.py

Scoring itself never raises on bad inspection data; only configuration can fail.
"""


class ComplianceException(Exception):
    """Base exception for the compliance scoring service."""

    pass


class ScoringConfigurationException(ComplianceException):
    """Weights or tier thresholds are unusable."""

    def __init__(self, message: str = "Invalid scoring configuration", source: str = "settings"):
        self.message = message
        self.source = source
        super().__init__(f"{message} (source: {source})")
