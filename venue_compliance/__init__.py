"""Venue compliance scoring for brand trade-marketing inspections."""

__version__ = "1.0.0"
