from __future__ import annotations

import bootstrap

bootstrap.add_src_to_path()
# Phase A: Streamlit entrypoint
# - Landing section + the four-step wizard on one page.
# - The Wizard object lives in st.session_state; widgets are seeded from it on
#   every run and write back through on_change callbacks, so values survive
#   moving between steps (Streamlit drops state for widgets that aren't drawn).
# - Extra pages (methodology) are auto-loaded from app/pages.

import streamlit as st

from cecalc.config.logging_setup import configure_logging
from cecalc.config.settings import settings
from cecalc.inputs.record import (
    COMPANY_SIZES,
    FALSE_POSITIVE_REDUCTION_RANGE,
    IMPLEMENTATION_TIMELINES,
    INDUSTRIES,
    MATURITY_LEVELS,
    TIME_SAVINGS_PER_CASE_RANGE,
)
from cecalc.reference.regions import REGIONS
from cecalc.reporting.charts import cumulative_savings_chart, initiative_savings_chart
from cecalc.reporting.formatting import (
    format_currency,
    format_fte,
    format_months,
    format_percent,
)
from cecalc.reporting.frames import initiatives_frame, timeline_frame
from cecalc.wizard.state_machine import Wizard
from cecalc.wizard.steps import STEP_COUNT, Step

st.set_page_config(page_title=settings.APP_TITLE, layout="wide")
configure_logging()

BENEFITS = [
    (
        "False Positive Reduction",
        "Advanced risk engines can reduce false positives by 30-60%, dramatically cutting "
        "analyst workload and improving focus on genuine threats.",
    ),
    (
        "Process Automation",
        "Streamlined workflows and automated case processing can save 5-30 minutes per case, "
        "freeing investigators for complex analysis.",
    ),
    (
        "AI-Powered Insights",
        "Machine learning and AI assistance can accelerate case resolution by 8+ minutes per "
        "investigation through intelligent recommendations.",
    ),
    (
        "Tool Consolidation",
        "Unified platforms eliminate context switching and duplicate data entry, delivering "
        "10%+ efficiency gains across compliance teams.",
    ),
    (
        "Continuous Learning",
        "Adaptive systems that learn from patterns can achieve additional 20%+ improvements "
        "in detection accuracy over time.",
    ),
    (
        "Proven ROI",
        "Organizations typically see 100%+ ROI within 2-6 months, with cumulative savings "
        "reaching millions over 3 years.",
    ),
]


def get_wizard() -> Wizard:
    if "wizard" not in st.session_state:
        st.session_state["wizard"] = Wizard()
    return st.session_state["wizard"]


def _key(field: str) -> str:
    return f"input_{field}"


def _sync(wizard: Wizard, field: str) -> None:
    wizard.update_field(field, st.session_state[_key(field)])


def _seed(wizard: Wizard, field: str) -> dict:
    """Put the current record value into the widget slot; return the widget kwargs."""
    st.session_state[_key(field)] = getattr(wizard.inputs, field)
    return {"key": _key(field), "on_change": _sync, "args": (wizard, field)}


def _number(wizard: Wizard, field: str, label: str, step: int = 1) -> None:
    st.number_input(label, min_value=0, step=step, **_seed(wizard, field))


# ---------- Phase B: step forms ----------
def render_company_profile(wizard: Wizard) -> None:
    c1, c2 = st.columns(2)
    with c1:
        st.selectbox("Company Size", COMPANY_SIZES, **_seed(wizard, "company_size"))
        st.selectbox("Geographic Region", REGIONS, **_seed(wizard, "region"))
    with c2:
        st.selectbox("Industry Sector", INDUSTRIES, **_seed(wizard, "industry"))
        st.selectbox("Compliance Maturity", MATURITY_LEVELS, **_seed(wizard, "maturity"))


def render_operations_metrics(wizard: Wizard) -> None:
    st.markdown("#### Alert Processing")
    c1, c2, c3 = st.columns(3)
    with c1:
        _number(wizard, "daily_alerts", "Daily Alerts")
    with c2:
        _number(wizard, "avg_processing_time", "Avg Processing Time (minutes)")
    with c3:
        _number(wizard, "false_positive_rate", "False Positive Rate (%)")

    st.markdown("#### Case Investigation")
    c4, c5, c6 = st.columns(3)
    with c4:
        _number(wizard, "daily_cases", "Daily Cases")
    with c5:
        _number(wizard, "avg_investigation_time", "Avg Investigation Time (hours)")
    with c6:
        _number(wizard, "escalation_rate", "L1→L2 Escalation Rate (%)")


def render_staffing_costs(wizard: Wizard) -> None:
    st.markdown("#### L1 Analysts (Transaction Monitoring)")
    c1, c2 = st.columns(2)
    with c1:
        _number(wizard, "analyst_count", "Number of analyst FTEs")
    with c2:
        _number(wizard, "analyst_salary", "Average analyst salary ($)", step=1000)

    st.markdown("#### L2 Investigators (Case Investigation)")
    c3, c4 = st.columns(2)
    with c3:
        _number(wizard, "investigator_count", "Number of investigator FTEs")
    with c4:
        _number(wizard, "investigator_salary", "Average investigator salary ($)", step=1000)

    st.markdown("#### Other Costs")
    c5, c6 = st.columns(2)
    with c5:
        _number(wizard, "technology_costs", "Annual Technology Costs ($)", step=1000)
    with c6:
        _number(wizard, "training_costs", "Annual Training Costs ($)", step=1000)

    st.caption("Leave a salary at 0 to use the regional average for the selected region.")


def render_improvement_targets(wizard: Wizard) -> None:
    st.info(
        "**Proven benchmarks.** These targets reflect results achieved in real-world "
        "deployments. Adjust them to match your own expectations."
    )

    lo, hi, step = FALSE_POSITIVE_REDUCTION_RANGE
    st.slider(
        "False Positive Reduction (%)",
        min_value=lo,
        max_value=hi,
        step=step,
        help="Risk engine tuning typically removes 30-60% of false-positive alerts.",
        **_seed(wizard, "false_positive_reduction"),
    )

    lo, hi, step = TIME_SAVINGS_PER_CASE_RANGE
    st.slider(
        "Time Savings per Case (minutes)",
        min_value=lo,
        max_value=hi,
        step=step,
        help="Workflow automation typically saves 5-30 minutes on each investigated case.",
        **_seed(wizard, "time_savings_per_case"),
    )

    st.selectbox(
        "Implementation Timeline",
        list(IMPLEMENTATION_TIMELINES),
        format_func=IMPLEMENTATION_TIMELINES.get,
        **_seed(wizard, "implementation_timeline"),
    )


STEP_RENDERERS = {
    Step.COMPANY_PROFILE: render_company_profile,
    Step.OPERATIONS_METRICS: render_operations_metrics,
    Step.STAFFING_COSTS: render_staffing_costs,
    Step.IMPROVEMENT_TARGETS: render_improvement_targets,
}


def render_intro() -> None:
    st.header("Estimate Your Compliance Efficiency Savings")
    st.write(
        "Discover how much your organization could save through proven compliance "
        "optimization strategies."
    )

    cols = st.columns(3)
    for i, (title, text) in enumerate(BENEFITS):
        with cols[i % 3]:
            st.markdown(f"**{title}**")
            st.caption(text)

    st.subheader("Calculate Your Potential Savings")
    st.write(
        "Answer a few questions about your current compliance operations to get a "
        "personalized savings estimate."
    )


def render_wizard(wizard: Wizard) -> None:
    idx = wizard.current_step_index

    # Phase C: Step header + progress
    st.caption(f"Step {idx + 1} of {STEP_COUNT}")
    st.progress(wizard.progress)
    st.subheader(wizard.step_label(idx))
    st.write(wizard.step_description(idx))

    STEP_RENDERERS[wizard.current_step](wizard)

    # Phase D: Navigation
    back_col, _, next_col = st.columns([1, 4, 1])
    back_col.button("Back", key="back", disabled=idx == 0, on_click=wizard.go_back)
    next_col.button(
        wizard.next_button_label, key="next", type="primary", on_click=wizard.go_next
    )


def render_results(wizard: Wizard) -> None:
    results = wizard.results

    st.title("Your Compliance Savings Analysis")
    st.write("Projected efficiency gains over 3 years")

    # Phase E: Summary cards
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total 3-Year Savings", format_currency(results.total_savings))
    c2.metric("Annual Savings", format_currency(results.annual_savings))
    c3.metric("ROI", format_percent(results.roi))
    c4.metric("Payback Period", format_months(results.payback_months))

    # Phase F: Charts
    init_df = initiatives_frame(results)
    left, right = st.columns(2)
    with left:
        st.subheader("Cumulative Savings Timeline")
        st.caption("Projected savings accumulation over 3 years")
        st.altair_chart(cumulative_savings_chart(timeline_frame(results)), width="stretch")
    with right:
        st.subheader("Savings by Initiative")
        st.caption("Breakdown of savings by optimization area")
        st.altair_chart(initiative_savings_chart(init_df), width="stretch")

    # Phase G: Detailed initiative breakdown
    st.subheader("Detailed Initiative Analysis")
    for item in results.initiatives:
        with st.container(border=True):
            st.markdown(f"**{item.name}** · `{item.timeline}`")
            d1, d2, d3 = st.columns(3)
            d1.metric("Annual Savings", format_currency(item.savings))
            d2.metric("FTE Impact", format_fte(item.fte_saved))
            d3.metric("Implementation", item.timeline)

    csv = init_df.to_csv(index=False).encode("utf-8")
    st.download_button(
        label="Download CSV",
        data=csv,
        file_name="compliance_savings_by_initiative.csv",
        mime="text/csv",
    )

    # Phase H: Start over
    b1, b2, _ = st.columns([1, 1, 4])
    b1.button("New Calculation", key="reset", type="primary", on_click=wizard.reset)
    b2.button(
        "Adjust Inputs",
        key="adjust",
        on_click=wizard.reset,
        kwargs={"keep_inputs": True},
    )


def main() -> None:
    wizard = get_wizard()

    if wizard.is_complete:
        render_results(wizard)
        return

    st.title(settings.APP_TITLE)
    render_intro()
    st.divider()
    render_wizard(wizard)


if __name__ == "__main__":
    main()
