"""
Categorical Normalization
venue_compliance/models/normalization.py

Inspection forms arrive in English or Spanish with free casing. Each
categorical field has one lookup table mapping every accepted spelling onto
its canonical enum member. Anything not in the table becomes UNKNOWN, which
the scorer treats as the lowest-scoring category.
"""

from enum import Enum
from typing import Any, Dict, Type, TypeVar

from venue_compliance.models.enumerations import (
    BackBarVisibility,
    BrandAdvocacy,
    ShelfPosition,
    StockLevel,
)

E = TypeVar("E", bound=Enum)


BRAND_ADVOCACY_SYNONYMS: Dict[str, BrandAdvocacy] = {
    "high": BrandAdvocacy.HIGH,
    "alta": BrandAdvocacy.HIGH,
    "medium": BrandAdvocacy.MEDIUM,
    "media": BrandAdvocacy.MEDIUM,
    "low": BrandAdvocacy.LOW,
    "baja": BrandAdvocacy.LOW,
}

BACK_BAR_VISIBILITY_SYNONYMS: Dict[str, BackBarVisibility] = {
    "prominent": BackBarVisibility.PROMINENT,
    "destacado": BackBarVisibility.PROMINENT,
    "visible": BackBarVisibility.VISIBLE,
    "hidden": BackBarVisibility.HIDDEN,
    "oculto": BackBarVisibility.HIDDEN,
    "not-present": BackBarVisibility.NOT_PRESENT,
    "not_present": BackBarVisibility.NOT_PRESENT,
    "no presente": BackBarVisibility.NOT_PRESENT,
}

SHELF_POSITION_SYNONYMS: Dict[str, ShelfPosition] = {
    "top": ShelfPosition.TOP,
    "superior": ShelfPosition.TOP,
    "middle": ShelfPosition.MIDDLE,
    "medio": ShelfPosition.MIDDLE,
    "bottom": ShelfPosition.BOTTOM,
    "inferior": ShelfPosition.BOTTOM,
    "not-present": ShelfPosition.NOT_PRESENT,
    "not_present": ShelfPosition.NOT_PRESENT,
    "no presente": ShelfPosition.NOT_PRESENT,
}

STOCK_LEVEL_SYNONYMS: Dict[str, StockLevel] = {
    "adequate": StockLevel.ADEQUATE,
    "adecuado": StockLevel.ADEQUATE,
    "low": StockLevel.LOW,
    "bajo": StockLevel.LOW,
    "critical": StockLevel.CRITICAL,
    "crítico": StockLevel.CRITICAL,
    "critico": StockLevel.CRITICAL,
    "out": StockLevel.OUT_OF_STOCK,
    "out-of-stock": StockLevel.OUT_OF_STOCK,
    "out_of_stock": StockLevel.OUT_OF_STOCK,
    "sin stock": StockLevel.OUT_OF_STOCK,
}

_TABLES: Dict[type, Dict[str, Enum]] = {
    BrandAdvocacy: BRAND_ADVOCACY_SYNONYMS,
    BackBarVisibility: BACK_BAR_VISIBILITY_SYNONYMS,
    ShelfPosition: SHELF_POSITION_SYNONYMS,
    StockLevel: STOCK_LEVEL_SYNONYMS,
}


def normalize(value: Any, enum_cls: Type[E]) -> E:
    """
    Map a raw form value onto enum_cls.

    Args:
        value: Raw value from the form (str, enum member, None, ...)
        enum_cls: One of the categorical enums with a synonym table

    Returns:
        The canonical member, or enum_cls.UNKNOWN when unrecognized
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return enum_cls.UNKNOWN

    key = value.strip().lower()
    member = _TABLES[enum_cls].get(key)
    if member is None:
        # Canonical values ("out_of_stock", "unknown") are accepted as-is
        try:
            return enum_cls(key)
        except ValueError:
            return enum_cls.UNKNOWN
    return member


def normalize_brand_advocacy(value: Any) -> BrandAdvocacy:
    return normalize(value, BrandAdvocacy)


def normalize_back_bar_visibility(value: Any) -> BackBarVisibility:
    return normalize(value, BackBarVisibility)


def normalize_shelf_position(value: Any) -> ShelfPosition:
    return normalize(value, ShelfPosition)


def normalize_stock_level(value: Any) -> StockLevel:
    return normalize(value, StockLevel)
