from __future__ import annotations

# Phase A: Purpose
# - Run one savings calculation outside the UI and keep the numbers as JSON.
# - Inputs come from the form defaults, optionally overridden by a JSON file
#   with any subset of the form fields (e.g. {"region": "Europe", "analyst_count": 4}).

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from cecalc.calculator.savings import compute
from cecalc.config.logging_setup import configure_logging
from cecalc.config.settings import settings
from cecalc.inputs.record import InputRecord
from cecalc.reporting.formatting import format_currency, format_percent
from cecalc.reporting.frames import summary_dict

logger = logging.getLogger(__name__)


def _assert_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")


def load_inputs(path: Path | None) -> InputRecord:
    if path is None:
        return InputRecord()
    _assert_exists(path)
    return InputRecord.from_dict(json.loads(path.read_text()))


def build_report(inputs: InputRecord) -> dict:
    """
    Phase B: Report payload
    - inputs: the full record used (defaults filled in)
    - summary: totals (ROI/payback may be non-finite; json writes them as Infinity/NaN)
    - initiatives / timeline: same rows the results page shows
    """
    result = compute(inputs)
    return {
        "inputs": inputs.to_dict(),
        "summary": summary_dict(result),
        "initiatives": [asdict(i) for i in result.initiatives],
        "timeline": [asdict(p) for p in result.timeline],
    }


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute a compliance savings scenario.")
    parser.add_argument("--inputs", type=Path, default=None, help="JSON file of input overrides")
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.REPORTS_DIR / "savings_report.json",
        help="Where to write the JSON report",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)

    inputs = load_inputs(args.inputs)
    report = build_report(inputs)
    logger.info("Scenario computed for region=%s", inputs.region)

    # Phase C: Write report
    out_path = args.output
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2))

    s = report["summary"]
    print(f"✅ Wrote: {out_path}")
    print(
        f"Total 3-year savings: {format_currency(s['total_savings'])} | "
        f"ROI: {format_percent(s['roi_pct'])}"
    )


if __name__ == "__main__":
    main()
