from __future__ import annotations

import bootstrap

bootstrap.add_src_to_path()
# Phase A: Methodology page goal
# - Show every fixed assumption and formula behind the estimate.
# - Live example uses the default inputs so the numbers are reproducible.

import pandas as pd
import streamlit as st

from cecalc.calculator.savings import compute
from cecalc.config.settings import settings
from cecalc.inputs.record import InputRecord
from cecalc.reference.regions import REGION_SALARIES
from cecalc.reporting.formatting import format_currency, format_fte
from cecalc.reporting.frames import initiatives_frame

st.set_page_config(page_title=settings.APP_TITLE, layout="wide")


def assumptions_frame() -> pd.DataFrame:
    rows = [
        ("Working days per year", settings.WORKING_DAYS_PER_YEAR),
        ("Working hours per day", settings.HOURS_PER_DAY),
        ("Projection window (years)", settings.PROJECTION_YEARS),
        ("Tool consolidation efficiency gain", f"{settings.TOOL_EFFICIENCY_GAIN:.0%}"),
        ("AI-assisted minutes saved per case", settings.AI_MINUTES_SAVED_PER_CASE),
        ("Continuous learning extra alert reduction", f"{settings.CONTINUOUS_LEARNING_GAIN:.0%}"),
        ("Implementation cost (share of current cost)", f"{settings.IMPLEMENTATION_COST_RATE:.0%}"),
    ]
    return pd.DataFrame(rows, columns=["assumption", "value"]).astype({"value": str})


def region_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"region": name, "analyst_salary": s.analyst, "investigator_salary": s.investigator}
            for name, s in REGION_SALARIES.items()
        ]
    )


def main() -> None:
    st.title("Methodology")

    # Phase B: Fixed assumptions
    st.subheader("Fixed assumptions")
    st.dataframe(assumptions_frame(), width="stretch", hide_index=True)

    st.subheader("Regional salary defaults")
    st.dataframe(region_frame(), width="stretch", hide_index=True)
    st.caption(
        "A salary left at 0 falls back to the region's default; unknown regions use North America."
    )

    # Phase C: Formulas
    st.subheader("How each initiative is estimated")
    st.markdown(
        "- **Risk Engine Optimization:** alerts avoided = daily alerts × reduction %; "
        "hours saved = alerts avoided × processing minutes ÷ 60; FTE = hours ÷ 8; "
        "savings = FTE × analyst salary.\n"
        "- **Process Automation:** hours saved = daily cases × minutes saved ÷ 60; "
        "FTE = hours ÷ 8; savings = FTE × investigator salary.\n"
        "- **Tool Consolidation:** 10% of each headcount pool; savings = "
        "analysts × 10% × analyst salary + investigators × 10% × investigator salary.\n"
        "- **AI-Assisted Workflows:** 8 minutes saved on every case, valued at investigator salary.\n"
        "- **Continuous Learning:** a further 20% of alerts avoided, valued at analyst salary.\n"
        "- **ROI** = total savings ÷ current staffing cost; **payback** = "
        "10% of current cost ÷ monthly savings, rounded up."
    )

    # Phase D: Worked example (defaults)
    st.subheader("Worked example (default inputs)")
    result = compute(InputRecord())
    example = initiatives_frame(result)
    example["savings"] = example["savings"].map(format_currency)
    example["fte_saved"] = example["fte_saved"].map(format_fte)
    st.dataframe(example, width="stretch", hide_index=True)

    c1, c2 = st.columns(2)
    c1.metric("Current staffing cost", format_currency(result.current_cost))
    c2.metric("Total 3-year savings", format_currency(result.total_savings))

    st.caption(
        "Estimates are indicative planning figures based on the fixed assumptions above."
    )


if __name__ == "__main__":
    main()
