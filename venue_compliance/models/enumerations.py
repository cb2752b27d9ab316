from enum import Enum


class BrandAdvocacy(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class BackBarVisibility(str, Enum):
    PROMINENT = "prominent"
    VISIBLE = "visible"
    HIDDEN = "hidden"
    NOT_PRESENT = "not_present"
    UNKNOWN = "unknown"


class ShelfPosition(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"
    NOT_PRESENT = "not_present"
    UNKNOWN = "unknown"


class StockLevel(str, Enum):
    ADEQUATE = "adequate"
    LOW = "low"
    CRITICAL = "critical"
    OUT_OF_STOCK = "out_of_stock"
    UNKNOWN = "unknown"


class VenueTier(str, Enum):
    STRATEGIC = "strategic"      # Top priority accounts
    OPPORTUNITY = "opportunity"  # Room to grow with follow-up
    RISK = "risk"                # Brand execution failing
