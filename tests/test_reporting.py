"""Result tables and chart specs."""

import pandas as pd
import pytest

from cecalc.calculator.savings import INITIATIVE_NAMES, compute
from cecalc.reporting.charts import cumulative_savings_chart, initiative_savings_chart
from cecalc.reporting.frames import initiatives_frame, summary_dict, timeline_frame


@pytest.fixture
def result(default_inputs):
    return compute(default_inputs)


class TestFrames:
    def test_initiatives_frame(self, result):
        df = initiatives_frame(result)
        assert list(df.columns) == ["initiative", "savings", "fte_saved", "timeline"]
        assert df["initiative"].tolist() == list(INITIATIVE_NAMES)
        assert df["savings"].sum() == pytest.approx(result.total_savings)

    def test_timeline_frame(self, result):
        df = timeline_frame(result)
        assert df["year"].tolist() == ["Current", "Year 1", "Year 2", "Year 3"]
        assert df["order"].tolist() == [0, 1, 2, 3]
        assert df["cumulative"].iloc[-1] == result.total_savings
        assert df["cumulative"].is_monotonic_increasing

    def test_summary_dict(self, result):
        summary = summary_dict(result)
        assert summary["current_cost"] == 1_610_000
        assert summary["payback_months"] == 2
        assert summary["roi_pct"] == pytest.approx(107.4055, rel=1e-5)


class TestCharts:
    def test_cumulative_chart_layers(self, result):
        chart_dict = cumulative_savings_chart(timeline_frame(result)).to_dict()
        assert len(chart_dict["layer"]) == 2
        assert chart_dict["layer"][0]["mark"]["type"] == "line"
        assert chart_dict["height"] == 300

    def test_cumulative_chart_sorted_by_order(self, result):
        chart_dict = cumulative_savings_chart(timeline_frame(result)).to_dict()
        x = chart_dict["layer"][0]["encoding"]["x"]
        assert x["sort"] == {"field": "order", "order": "ascending"}

    def test_initiative_chart(self, result):
        df = initiatives_frame(result)
        chart_dict = initiative_savings_chart(df, height=250).to_dict()
        assert chart_dict["mark"]["type"] == "bar"
        assert chart_dict["encoding"]["x"]["sort"] == list(INITIATIVE_NAMES)
        assert chart_dict["encoding"]["y"]["field"] == "savings"
        assert chart_dict["height"] == 250

    def test_chart_accepts_any_frame_with_columns(self):
        df = pd.DataFrame(
            {"initiative": ["A"], "savings": [1.0], "fte_saved": [0.1], "timeline": ["Year 1"]}
        )
        assert initiative_savings_chart(df).to_dict()["encoding"]["x"]["sort"] == ["A"]

    def test_cumulative_tooltips_use_compact_currency(self, result):
        chart_dict = cumulative_savings_chart(timeline_frame(result)).to_dict()
        tooltip = chart_dict["layer"][0]["encoding"]["tooltip"]
        assert [t["field"] for t in tooltip] == ["year", "savings_label", "cumulative_label"]
        assert all("format" not in t for t in tooltip)

        rows = _chart_rows(chart_dict)
        assert [r["savings_label"] for r in rows] == ["$0", "$754K", "$502K", "$473K"]
        assert [r["cumulative_label"] for r in rows] == ["$0", "$754K", "$1.3M", "$1.7M"]

    def test_initiative_tooltips_use_compact_currency(self, result):
        chart_dict = initiative_savings_chart(initiatives_frame(result)).to_dict()
        fields = [t["field"] for t in chart_dict["encoding"]["tooltip"]]
        assert "savings_label" in fields and "savings" not in fields

        labels = [r["savings_label"] for r in _chart_rows(chart_dict)]
        assert labels == ["$531K", "$445K", "$161K", "$238K", "$354K"]

    def test_non_finite_savings_label_is_not_available(self):
        df = pd.DataFrame(
            {
                "initiative": ["A"],
                "savings": [float("inf")],
                "fte_saved": [1.0],
                "timeline": ["Year 1"],
            }
        )
        rows = _chart_rows(initiative_savings_chart(df).to_dict())
        assert rows[0]["savings_label"] == "n/a"


def _chart_rows(chart_dict: dict) -> list[dict]:
    (rows,) = chart_dict["datasets"].values()
    return rows
