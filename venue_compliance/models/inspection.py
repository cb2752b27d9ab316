from typing import Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from venue_compliance.models.enumerations import (
    BackBarVisibility,
    BrandAdvocacy,
    ShelfPosition,
    StockLevel,
    VenueTier,
)
from venue_compliance.models.normalization import (
    normalize_back_bar_visibility,
    normalize_brand_advocacy,
    normalize_shelf_position,
    normalize_stock_level,
)


class InspectionInput(BaseModel):
    """
    Scoring-relevant answers of one inspection form.

    Accepts both snake_case and the camelCase keys sent by the form.
    Nothing here is range-checked: out-of-range numbers and unrecognized
    categories are scored, not rejected.
    """

    model_config = ConfigDict(frozen=True)

    staff_knowledge: int = Field(
        default=0,
        validation_alias=AliasChoices("staff_knowledge", "staffKnowledge"),
        description="Self-reported staff product knowledge, 1-10",
    )

    certified_bartenders: int = Field(
        default=0,
        validation_alias=AliasChoices("certified_bartenders", "certifiedBartenders"),
    )

    total_bartenders: int = Field(
        default=0,
        validation_alias=AliasChoices("total_bartenders", "totalBartenders"),
    )

    brand_advocacy: BrandAdvocacy = Field(
        default=BrandAdvocacy.UNKNOWN,
        validation_alias=AliasChoices("brand_advocacy", "brandAdvocacy"),
    )

    back_bar_visibility: BackBarVisibility = Field(
        default=BackBarVisibility.UNKNOWN,
        validation_alias=AliasChoices("back_bar_visibility", "backBarVisibility"),
    )

    shelf_position: ShelfPosition = Field(
        default=ShelfPosition.UNKNOWN,
        validation_alias=AliasChoices("shelf_position", "shelfPosition"),
    )

    tiene_material_pop: bool = Field(
        default=False,
        validation_alias=AliasChoices("tiene_material_pop", "tieneMaterialPop"),
        description="Whether any point-of-sale material is present",
    )

    pos_materials: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("pos_materials", "posMaterials"),
    )

    stock_level: StockLevel = Field(
        default=StockLevel.UNKNOWN,
        validation_alias=AliasChoices("stock_level", "stockLevel"),
    )

    @field_validator(
        "staff_knowledge", "certified_bartenders", "total_bartenders", mode="before"
    )
    @classmethod
    def missing_count_is_zero(cls, v: Any) -> Any:
        return 0 if v is None or v == "" else v

    @field_validator("tiene_material_pop", mode="before")
    @classmethod
    def missing_flag_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("pos_materials", mode="before")
    @classmethod
    def missing_materials_is_empty(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v

    @field_validator("brand_advocacy", mode="before")
    @classmethod
    def normalize_advocacy(cls, v: Any) -> BrandAdvocacy:
        return normalize_brand_advocacy(v)

    @field_validator("back_bar_visibility", mode="before")
    @classmethod
    def normalize_visibility(cls, v: Any) -> BackBarVisibility:
        return normalize_back_bar_visibility(v)

    @field_validator("shelf_position", mode="before")
    @classmethod
    def normalize_shelf(cls, v: Any) -> ShelfPosition:
        return normalize_shelf_position(v)

    @field_validator("stock_level", mode="before")
    @classmethod
    def normalize_stock(cls, v: Any) -> StockLevel:
        return normalize_stock_level(v)


class ScoreBreakdown(BaseModel):
    """Four sub-scores and their weighted combination."""

    model_config = ConfigDict(frozen=True)

    visibility: int = Field(..., ge=0, le=100)
    pop: int = Field(..., ge=0, le=100)
    stock: int = Field(..., ge=0, le=100)
    knowledge: int = Field(..., ge=0, le=100)
    global_score: int = Field(
        ...,
        ge=0,
        le=100,
        validation_alias=AliasChoices("global_score", "globalScore"),
    )

    def sub_scores(self) -> dict:
        return {
            "visibility": self.visibility,
            "pop": self.pop,
            "stock": self.stock,
            "knowledge": self.knowledge,
        }


class VenueStatus(BaseModel):
    """Tier a global score falls into, with its display metadata."""

    model_config = ConfigDict(frozen=True)

    status: VenueTier
    label: str
    color: str
    min_score: int = Field(..., description="Minimum global score of this tier")


class ScoreResponse(BaseModel):
    """Breakdown plus classification, as returned by the scoring API."""

    breakdown: ScoreBreakdown
    venue_status: VenueStatus
    global_score: int
