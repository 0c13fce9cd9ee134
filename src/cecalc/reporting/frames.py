from __future__ import annotations

import pandas as pd

from cecalc.calculator.savings import SavingsResult


def initiatives_frame(result: SavingsResult) -> pd.DataFrame:
    """
    Phase A: One row per initiative, in calculation order.
    - Feeds the bar chart, the detail table and the CSV download.
    """
    return pd.DataFrame(
        {
            "initiative": [i.name for i in result.initiatives],
            "savings": [float(i.savings) for i in result.initiatives],
            "fte_saved": [float(i.fte_saved) for i in result.initiatives],
            "timeline": [i.timeline for i in result.initiatives],
        }
    )


def timeline_frame(result: SavingsResult) -> pd.DataFrame:
    """
    Phase B: Current / Year 1 / Year 2 / Year 3 rows.
    - `order` keeps the x-axis in time order (Altair sorts strings otherwise).
    """
    return pd.DataFrame(
        {
            "year": [p.year for p in result.timeline],
            "order": list(range(len(result.timeline))),
            "savings": [float(p.savings) for p in result.timeline],
            "cumulative": [float(p.cumulative) for p in result.timeline],
        }
    )


def summary_dict(result: SavingsResult) -> dict:
    """Flat totals for the summary cards and the JSON report."""
    return {
        "total_savings": float(result.total_savings),
        "annual_savings": float(result.annual_savings),
        "total_fte_saved": float(result.total_fte_saved),
        "roi_pct": float(result.roi),
        "payback_months": float(result.payback_months),
        "current_cost": float(result.current_cost),
        "current_analyst_cost": float(result.current_analyst_cost),
        "current_investigator_cost": float(result.current_investigator_cost),
        "analyst_salary": float(result.analyst_salary),
        "investigator_salary": float(result.investigator_salary),
    }
