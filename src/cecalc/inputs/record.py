from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, fields, replace

from cecalc.reference.regions import DEFAULT_REGION

# Phase A: Choice lists shown by the form (display only, not used by the calculator)
COMPANY_SIZES: tuple[str, ...] = (
    "Small (<100 employees)",
    "Medium (100-1000 employees)",
    "Large (1000+ employees)",
)
INDUSTRIES: tuple[str, ...] = ("Financial Services", "Crypto/Blockchain", "Fintech", "Other")
MATURITY_LEVELS: tuple[str, ...] = ("Basic", "Intermediate", "Advanced")

# timeline value -> caption shown in the dropdown
IMPLEMENTATION_TIMELINES: dict[str, str] = {
    "6 months": "6 months - Rapid deployment",
    "1 year": "1 year - Accelerated rollout",
    "2 years": "2 years - Recommended",
    "3 years": "3 years - Gradual implementation",
}

# Slider bounds: (min, max, step)
FALSE_POSITIVE_REDUCTION_RANGE = (10, 60, 5)
TIME_SAVINGS_PER_CASE_RANGE = (5, 30, 1)

# Optional sign, then hex (0x..) or decimal digits; ASCII digits only
_INT_PREFIX = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)")

# Longest decimal digit run that can still fit in a double (1.8e308)
_MAX_DOUBLE_DIGITS = 309


@dataclass(frozen=True)
class InputRecord:
    """
    Phase B: Everything the form collects, grouped by wizard step.
    - Frozen: updates go through `with_field`, which returns a new record.
    - Only region, headcounts, salaries, alert/case volumes and the two
      improvement targets feed the calculation; the rest is carried for display.
    """

    # Company Profile
    company_size: str = "Large (1000+ employees)"
    industry: str = "Crypto/Blockchain"
    region: str = DEFAULT_REGION
    maturity: str = "Intermediate"

    # Operations Metrics
    daily_alerts: int = 500
    avg_processing_time: int = 20  # minutes
    false_positive_rate: int = 40  # %
    daily_cases: int = 150
    avg_investigation_time: int = 2  # hours
    escalation_rate: int = 25  # %

    # Staffing & Costs
    analyst_count: int = 10
    analyst_salary: int = 85000
    investigator_count: int = 8
    investigator_salary: int = 95000
    technology_costs: int = 100000
    training_costs: int = 50000

    # Improvement Targets
    false_positive_reduction: int = 30  # %
    time_savings_per_case: int = 15  # minutes
    implementation_timeline: str = "2 years"

    def with_field(self, name: str, value) -> InputRecord:
        """Copy of this record with one field changed (numeric fields are coerced)."""
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown input field: {name}")
        if name in NUMERIC_FIELDS:
            value = coerce_int(value)
        return replace(self, **{name: value})

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> InputRecord:
        """Build a record from a partial mapping; missing keys keep their defaults."""
        record = cls()
        for name, value in data.items():
            record = record.with_field(name, value)
        return record


FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(InputRecord))
NUMERIC_FIELDS: frozenset[str] = frozenset(
    f.name for f in fields(InputRecord) if f.type == "int"
)
TEXT_FIELDS: frozenset[str] = FIELD_NAMES - NUMERIC_FIELDS


def to_double(value) -> float:
    """Float value of a number; ints beyond float range become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def coerce_int(value) -> int | float:
    """
    Integer-prefix parsing with a zero fallback.
    - "42", " 42 ", "42abc" -> 42; "-7" -> -7; "3.9" -> 3; "0x1A" -> 26
    - floats truncate toward zero; NaN/inf -> 0
    - anything unparseable (None, "", "abc", non-ASCII digits) -> 0
    - digit strings too large for a double -> inf (or -inf)
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if value is None:
        return 0
    match = _INT_PREFIX.match(str(value))
    if not match:
        return 0

    sign, digits = match.groups()
    overflow = -math.inf if sign == "-" else math.inf
    if digits[:2].lower() == "0x":
        number = int(digits[2:], 16)
    else:
        digits = digits.lstrip("0") or "0"
        if len(digits) > _MAX_DOUBLE_DIGITS:
            return overflow
        number = int(digits)
    if sign == "-":
        number = -number
    if math.isinf(to_double(number)):
        return overflow
    return number
