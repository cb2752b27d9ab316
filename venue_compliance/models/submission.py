from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from typing import Any, Dict, List, Optional

from venue_compliance.models.enumerations import VenueTier
from venue_compliance.models.inspection import ScoreBreakdown, VenueStatus


class InspectionSubmission(BaseModel):
    """
    An inspection form as submitted by an inspector.
    """

    venue_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("venue_id", "venueId", "punto_venta_id"),
        description="Venue (point of sale) being inspected",
    )

    product_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("product_id", "productId", "producto_id"),
    )

    inspector_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("inspector_id", "inspectorId", "usuario_id"),
    )

    form: Dict[str, Any] = Field(
        default_factory=dict,
        description="Raw form answers, keyed as the form sends them",
    )


class InspectionRecord(BaseModel):
    """
    Inspection row handed to the data store.
    """

    venue_id: str
    product_id: str
    inspector_id: str
    inspected_at: datetime

    product_present: bool = False
    stock_level: str
    material_pop_present: bool
    material_pop_types: List[str] = Field(default_factory=list)
    temperature: Optional[float] = None
    observations: str = ""
    photo_urls: List[str] = Field(default_factory=list)

    global_score: int = Field(..., ge=0, le=100)
    score_breakdown: ScoreBreakdown
    venue_status: VenueStatus
    perfect_serve_percentage: int = Field(..., ge=0, le=100)

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Full form answers kept for the inspection history",
    )


class VenueScoreUpdate(BaseModel):
    """
    Denormalized "current score" fields written back onto the venue.
    """

    venue_id: str
    segment: str = Field(..., description="Tier label shown on the dashboard")
    tier: VenueTier
    global_score: int = Field(..., ge=0, le=100)
    last_inspection_date: datetime


class ScoredInspection(BaseModel):
    record: InspectionRecord
    venue_update: VenueScoreUpdate
