from __future__ import annotations

# Altair builders for the results page.
# - Axis labels and tooltips use the same compact $K/$M style as the summary cards;
#   tooltips read a pre-formatted label column so the text matches format_currency exactly.
# - Charts are returned (not rendered) so the app and tests share them.

import altair as alt
import pandas as pd

from cecalc.reporting.formatting import format_currency

ACCENT = "#00E0E0"

# Vega expression mirroring format_currency for axis labels
_CURRENCY_LABEL_EXPR = (
    "datum.value >= 1000000 ? '$' + format(datum.value / 1000000, '.1f') + 'M' : "
    "datum.value >= 1000 ? '$' + format(datum.value / 1000, '.0f') + 'K' : "
    "'$' + format(datum.value, '.0f')"
)


def cumulative_savings_chart(timeline_df: pd.DataFrame, height: int = 300) -> alt.Chart:
    """
    Phase A: Cumulative savings line (Current -> Year 3)
    - x is sorted by the `order` column, not alphabetically.
    - Invisible points + nearest selection make hover snap reliably.
    """
    data = timeline_df.assign(
        savings_label=timeline_df["savings"].map(format_currency),
        cumulative_label=timeline_df["cumulative"].map(format_currency),
    )
    nearest = alt.selection_point(fields=["year"], nearest=True, on="mouseover", empty=False)

    base = alt.Chart(data).encode(
        x=alt.X(
            "year:N",
            title=None,
            sort=alt.EncodingSortField(field="order", order="ascending"),
            axis=alt.Axis(labelAngle=0),
        ),
        y=alt.Y(
            "cumulative:Q",
            title="Cumulative savings",
            axis=alt.Axis(labelExpr=_CURRENCY_LABEL_EXPR, tickCount=6),
        ),
        tooltip=[
            alt.Tooltip("year:N", title="Period"),
            alt.Tooltip("savings_label:N", title="Period savings"),
            alt.Tooltip("cumulative_label:N", title="Cumulative"),
        ],
    )

    line = base.mark_line(color=ACCENT, strokeWidth=3)
    hover_points = base.mark_point(color=ACCENT, size=80).add_params(nearest)

    return (line + hover_points).properties(height=height)


def initiative_savings_chart(initiatives_df: pd.DataFrame, height: int = 300) -> alt.Chart:
    """
    Phase B: Savings by initiative (bar per initiative, calculation order kept)
    """
    order = initiatives_df["initiative"].tolist()
    data = initiatives_df.assign(savings_label=initiatives_df["savings"].map(format_currency))

    return (
        alt.Chart(data)
        .mark_bar(color=ACCENT)
        .encode(
            x=alt.X(
                "initiative:N",
                title=None,
                sort=order,
                axis=alt.Axis(labelAngle=-45),
            ),
            y=alt.Y(
                "savings:Q",
                title="Annual savings",
                axis=alt.Axis(labelExpr=_CURRENCY_LABEL_EXPR, tickCount=6),
            ),
            tooltip=[
                alt.Tooltip("initiative:N", title="Initiative"),
                alt.Tooltip("savings_label:N", title="Savings"),
                alt.Tooltip("fte_saved:Q", title="FTE", format=".1f"),
                alt.Tooltip("timeline:N", title="Timeline"),
            ],
        )
        .properties(height=height)
    )
