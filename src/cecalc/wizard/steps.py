from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Step(IntEnum):
    COMPANY_PROFILE = 0
    OPERATIONS_METRICS = 1
    STAFFING_COSTS = 2
    IMPROVEMENT_TARGETS = 3


@dataclass(frozen=True)
class StepInfo:
    label: str
    description: str
    fields: tuple[str, ...]


# One table drives the step header, the description and which fields the step edits
STEP_INFO: dict[Step, StepInfo] = {
    Step.COMPANY_PROFILE: StepInfo(
        label="Company Profile",
        description="Tell us about your organization",
        fields=("company_size", "industry", "region", "maturity"),
    ),
    Step.OPERATIONS_METRICS: StepInfo(
        label="Operations Metrics",
        description="Current compliance operations metrics",
        fields=(
            "daily_alerts",
            "avg_processing_time",
            "false_positive_rate",
            "daily_cases",
            "avg_investigation_time",
            "escalation_rate",
        ),
    ),
    Step.STAFFING_COSTS: StepInfo(
        label="Staffing & Costs",
        description="Staffing and cost information",
        fields=(
            "analyst_count",
            "analyst_salary",
            "investigator_count",
            "investigator_salary",
            "technology_costs",
            "training_costs",
        ),
    ),
    Step.IMPROVEMENT_TARGETS: StepInfo(
        label="Improvement Targets",
        description="Review proven improvement benchmarks",
        fields=(
            "false_positive_reduction",
            "time_savings_per_case",
            "implementation_timeline",
        ),
    ),
}

FIRST_STEP = Step.COMPANY_PROFILE
LAST_STEP = Step.IMPROVEMENT_TARGETS
STEP_COUNT = len(Step)
