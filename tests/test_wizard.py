"""Wizard state machine tests: navigation, field updates, calculation and reset."""

import pytest

from cecalc.calculator.savings import compute
from cecalc.inputs.record import InputRecord
from cecalc.wizard.state_machine import Wizard
from cecalc.wizard.steps import STEP_INFO, Step


class TestNavigation:
    def test_starts_at_first_step(self, wizard):
        assert wizard.current_step_index == 0
        assert wizard.results is None
        assert not wizard.is_complete

    def test_back_at_first_step_is_noop(self, wizard):
        wizard.go_back()
        assert wizard.current_step_index == 0

    def test_next_and_back(self, wizard):
        wizard.go_next()
        wizard.go_next()
        assert wizard.current_step == Step.STAFFING_COSTS
        wizard.go_back()
        assert wizard.current_step_index == 1

    def test_next_on_last_step_calculates(self, wizard):
        for _ in range(3):
            wizard.go_next()
        assert wizard.current_step == Step.IMPROVEMENT_TARGETS
        assert wizard.results is None

        wizard.go_next()
        assert wizard.is_complete
        assert wizard.current_step_index == 3
        assert wizard.results == compute(wizard.inputs)

    def test_terminal_state_ignores_navigation(self, completed_wizard):
        results = completed_wizard.results
        completed_wizard.go_next()
        completed_wizard.go_back()
        assert completed_wizard.results is results
        assert completed_wizard.current_step_index == 3

    def test_progress_and_button_label(self, wizard):
        assert wizard.progress == 0.25
        assert wizard.next_button_label == "Next Step"
        for _ in range(3):
            wizard.go_next()
        assert wizard.progress == 1.0
        assert wizard.next_button_label == "Calculate Savings"


class TestStepInfo:
    def test_labels(self):
        assert [Wizard.step_label(i) for i in range(4)] == [
            "Company Profile",
            "Operations Metrics",
            "Staffing & Costs",
            "Improvement Targets",
        ]

    def test_descriptions(self):
        assert Wizard.step_description(0) == "Tell us about your organization"

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            Wizard.step_label(4)

    def test_every_field_belongs_to_one_step(self):
        owned = [f for info in STEP_INFO.values() for f in info.fields]
        assert sorted(owned) == sorted(InputRecord().to_dict())


class TestFieldUpdates:
    def test_update_changes_only_named_field(self, wizard):
        before = wizard.inputs
        wizard.update_field("daily_alerts", 800)
        assert wizard.inputs.daily_alerts == 800
        assert wizard.inputs.daily_cases == before.daily_cases
        assert before.daily_alerts == 500

    def test_update_coerces_numeric_text(self, wizard):
        wizard.update_field("analyst_count", "12 people")
        wizard.update_field("investigator_count", "n/a")
        assert wizard.inputs.analyst_count == 12
        assert wizard.inputs.investigator_count == 0

    def test_updates_survive_navigation(self, wizard):
        wizard.update_field("region", "Europe")
        wizard.go_next()
        wizard.go_back()
        assert wizard.inputs.region == "Europe"

    def test_update_ignored_after_results(self, completed_wizard):
        completed_wizard.update_field("daily_alerts", 1)
        assert completed_wizard.inputs.daily_alerts == 500

    def test_unknown_field(self, wizard):
        with pytest.raises(KeyError):
            wizard.update_field("nope", 1)

    def test_results_use_updated_inputs(self, wizard):
        wizard.update_field("analyst_count", 0)
        wizard.update_field("investigator_count", 0)
        for _ in range(4):
            wizard.go_next()
        assert wizard.results.current_cost == 0


class TestReset:
    def test_reset_restores_defaults(self, wizard):
        wizard.update_field("daily_cases", 10)
        for _ in range(4):
            wizard.go_next()
        wizard.reset()
        assert wizard.current_step_index == 0
        assert wizard.results is None
        assert wizard.inputs == InputRecord()

    def test_reset_keeping_inputs(self, wizard):
        wizard.update_field("daily_cases", 10)
        for _ in range(4):
            wizard.go_next()
        wizard.reset(keep_inputs=True)
        assert wizard.current_step_index == 0
        assert not wizard.is_complete
        assert wizard.inputs.daily_cases == 10

    def test_next_works_again_after_reset(self, completed_wizard):
        completed_wizard.reset()
        completed_wizard.go_next()
        assert completed_wizard.current_step_index == 1

    def test_reset_to_custom_initial_record(self):
        start = InputRecord(region="Europe")
        wizard = Wizard(start)
        wizard.update_field("region", "Asia Pacific")
        wizard.reset()
        assert wizard.inputs == start
