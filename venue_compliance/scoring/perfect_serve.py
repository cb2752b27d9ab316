"""
scoring/perfect_serve.py

Perfect Serve percentage for a venue, from the ritual checklist of its
latest inspection.

Newer forms send a dynamic mapping of question -> answered-correctly.
Older forms only carry five fixed fields, each under one of two names.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple

from venue_compliance.scoring.utils import round_half_up

# (checklist item, current key, older key)
LEGACY_CHECKLIST: Tuple[Tuple[str, str, str], ...] = (
    ("glassware", "properGlassware", "glassware"),
    ("ice", "iceQuality", "ice"),
    ("garnish", "correctGarnish", "garnish"),
    ("tonic", "premiumTonic", "tonic"),
    ("ritual", "serveRitual", "ritual"),
)


@dataclass(frozen=True)
class PerfectServeResult:
    """Output of PerfectServeCalculator.calculate()."""
    passed: int
    total: int
    percentage: int          # [0, 100]
    checklist: Dict[str, bool]


class PerfectServeCalculator:
    """Score the Perfect Serve checklist of an inspection's details."""

    def calculate(self, details: Optional[Mapping[str, Any]]) -> PerfectServeResult:
        details = details or {}
        answers = details.get("perfectServeAnswers")

        # Anything but a mapping is not a dynamic answer set
        if isinstance(answers, Mapping):
            checklist = {str(k): bool(v) for k, v in answers.items()}
        else:
            checklist = {
                item: bool(details.get(key) or details.get(old_key))
                for item, key, old_key in LEGACY_CHECKLIST
            }

        total = len(checklist)
        passed = sum(1 for ok in checklist.values() if ok)
        percentage = round_half_up(Decimal(passed) / Decimal(total) * 100) if total > 0 else 0

        return PerfectServeResult(
            passed=passed,
            total=total,
            percentage=percentage,
            checklist=checklist,
        )
