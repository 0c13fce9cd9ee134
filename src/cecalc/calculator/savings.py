from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from cecalc.config.settings import settings
from cecalc.inputs.record import InputRecord, to_double
from cecalc.reference.regions import resolve_salaries

logger = logging.getLogger(__name__)

RISK_ENGINE = "Risk Engine Optimization"
PROCESS_AUTOMATION = "Process Automation"
TOOL_CONSOLIDATION = "Tool Consolidation"
AI_WORKFLOWS = "AI-Assisted Workflows"
CONTINUOUS_LEARNING = "Continuous Learning"

INITIATIVE_NAMES: tuple[str, ...] = (
    RISK_ENGINE,
    PROCESS_AUTOMATION,
    TOOL_CONSOLIDATION,
    AI_WORKFLOWS,
    CONTINUOUS_LEARNING,
)


@dataclass(frozen=True)
class Initiative:
    name: str
    savings: float
    fte_saved: float
    timeline: str


@dataclass(frozen=True)
class TimelinePoint:
    year: str
    savings: float
    cumulative: float


@dataclass(frozen=True)
class SavingsResult:
    """
    Phase A: Output of one calculation
    - initiatives: the five contributors, always in the same order
    - totals: savings over the projection window, annualised savings, FTE, ROI, payback
    - timeline: Current / Year 1 / Year 2 / Year 3 points for the cumulative chart
    ROI and payback may be inf/NaN when current cost or total savings is zero.
    """

    initiatives: tuple[Initiative, ...]
    total_savings: float
    annual_savings: float
    total_fte_saved: float
    roi: float
    payback_months: float
    current_cost: float
    current_analyst_cost: float
    current_investigator_cost: float
    analyst_salary: float
    investigator_salary: float
    timeline: tuple[TimelinePoint, ...]

    def initiative(self, name: str) -> Initiative:
        for item in self.initiatives:
            if item.name == name:
                return item
        raise KeyError(name)


def _fte_from_daily_hours(daily_hours: float) -> float:
    # Annual hours saved over annual hours per FTE
    days = settings.WORKING_DAYS_PER_YEAR
    return (daily_hours * days) / (settings.HOURS_PER_DAY * days)


def _ieee_div(numerator: float, denominator: float) -> float:
    # Zero denominators give inf/NaN instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def compute(inputs: InputRecord) -> SavingsResult:
    """
    Phase B: Closed-form savings estimate for one input record.
    - Pure: no I/O, no hidden state; identical inputs give identical floats.
    - Arithmetic is kept in the same order as the published formulas so the
      results match them bit for bit.
    """
    salaries = resolve_salaries(
        inputs.region, inputs.analyst_salary, inputs.investigator_salary
    )
    analyst_salary = to_double(salaries.analyst)
    investigator_salary = to_double(salaries.investigator)

    # Double arithmetic from here on; values beyond float range become inf
    analyst_count = to_double(inputs.analyst_count)
    investigator_count = to_double(inputs.investigator_count)
    daily_alerts = to_double(inputs.daily_alerts)
    daily_cases = to_double(inputs.daily_cases)
    avg_processing_time = to_double(inputs.avg_processing_time)
    false_positive_reduction = to_double(inputs.false_positive_reduction)
    time_savings_per_case = to_double(inputs.time_savings_per_case)

    # Phase C: Current staffing cost
    current_analyst_cost = analyst_count * analyst_salary
    current_investigator_cost = investigator_count * investigator_salary
    current_cost = current_analyst_cost + current_investigator_cost

    # Phase D1: Risk engine tuning removes a share of false-positive alerts
    alert_reduction = daily_alerts * (false_positive_reduction / 100)
    hours_per_alert = avg_processing_time / 60
    fte1 = _fte_from_daily_hours(alert_reduction * hours_per_alert)
    savings1 = fte1 * analyst_salary

    # Phase D2: Automation saves user-chosen minutes on every case
    hours_per_case = time_savings_per_case / 60
    fte2 = _fte_from_daily_hours(daily_cases * hours_per_case)
    savings2 = fte2 * investigator_salary

    # Phase D3: Consolidation gives each headcount pool a flat efficiency gain.
    # FTE uses combined headcount, savings is per role; they only agree when salaries match.
    gain = settings.TOOL_EFFICIENCY_GAIN
    fte3 = (analyst_count + investigator_count) * gain
    savings3 = (analyst_count * gain * analyst_salary) + (
        investigator_count * gain * investigator_salary
    )

    # Phase D4: AI assistance saves a fixed number of minutes per case
    ai_hours_per_case = settings.AI_MINUTES_SAVED_PER_CASE / 60
    fte4 = _fte_from_daily_hours(daily_cases * ai_hours_per_case)
    savings4 = fte4 * investigator_salary

    # Phase D5: Continuous learning removes a further fixed share of alerts
    extra_alert_reduction = daily_alerts * settings.CONTINUOUS_LEARNING_GAIN
    fte5 = _fte_from_daily_hours(extra_alert_reduction * hours_per_alert)
    savings5 = fte5 * analyst_salary

    initiatives = (
        Initiative(RISK_ENGINE, savings1, fte1, "Year 1"),
        Initiative(PROCESS_AUTOMATION, savings2, fte2, "Year 1-2"),
        Initiative(TOOL_CONSOLIDATION, savings3, fte3, "Year 2"),
        Initiative(AI_WORKFLOWS, savings4, fte4, "Year 2-3"),
        Initiative(CONTINUOUS_LEARNING, savings5, fte5, "Year 3"),
    )

    # Phase E: Totals
    total_savings = 0
    total_fte = 0
    for item in initiatives:
        total_savings += item.savings
        total_fte += item.fte_saved

    roi = _ieee_div(total_savings, current_cost) * 100
    implementation_cost = current_cost * settings.IMPLEMENTATION_COST_RATE
    payback_months = float(
        np.ceil(_ieee_div(implementation_cost, _ieee_div(total_savings, 12)))
    )

    # Phase F: Timeline with partial-year attribution of the phased initiatives
    timeline = (
        TimelinePoint("Current", 0, 0),
        TimelinePoint(
            "Year 1", savings1 + savings2 * 0.5, savings1 + savings2 * 0.5
        ),
        TimelinePoint(
            "Year 2",
            savings2 * 0.5 + savings3 + savings4 * 0.5,
            savings1 + savings2 + savings3 + savings4 * 0.5,
        ),
        TimelinePoint("Year 3", savings4 * 0.5 + savings5, total_savings),
    )

    if not (math.isfinite(roi) and math.isfinite(payback_months)):
        logger.warning(
            "Non-finite result: current_cost=%s total_savings=%s roi=%s payback=%s",
            current_cost,
            total_savings,
            roi,
            payback_months,
        )
    logger.debug(
        "Computed savings: total=%.2f roi=%.2f fte=%.3f",
        total_savings,
        roi,
        total_fte,
    )

    return SavingsResult(
        initiatives=initiatives,
        total_savings=total_savings,
        annual_savings=total_savings / settings.PROJECTION_YEARS,
        total_fte_saved=total_fte,
        roi=roi,
        payback_months=payback_months,
        current_cost=current_cost,
        current_analyst_cost=current_analyst_cost,
        current_investigator_cost=current_investigator_cost,
        analyst_salary=analyst_salary,
        investigator_salary=investigator_salary,
        timeline=timeline,
    )
