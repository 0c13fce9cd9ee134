"""
Shared fixtures for the calculator test-suite.

- default_inputs: the record the form starts with (North America, 10 analysts, 8 investigators)
- zero_headcount_inputs: no staff, so current cost is 0 and ROI is non-finite
- idle_inputs: no staff and no volume, so every ratio is 0/0
- wizard: a fresh four-step wizard
"""

from dataclasses import replace

import pytest

from cecalc.inputs.record import InputRecord
from cecalc.wizard.state_machine import Wizard


# ============================================================
# INPUT RECORDS
# ============================================================

@pytest.fixture
def default_inputs() -> InputRecord:
    return InputRecord()


@pytest.fixture
def zero_headcount_inputs(default_inputs: InputRecord) -> InputRecord:
    return replace(default_inputs, analyst_count=0, investigator_count=0)


@pytest.fixture
def idle_inputs(zero_headcount_inputs: InputRecord) -> InputRecord:
    return replace(zero_headcount_inputs, daily_alerts=0, daily_cases=0)


# ============================================================
# WIZARD
# ============================================================

@pytest.fixture
def wizard() -> Wizard:
    return Wizard()


@pytest.fixture
def completed_wizard(wizard: Wizard) -> Wizard:
    for _ in range(4):
        wizard.go_next()
    return wizard
