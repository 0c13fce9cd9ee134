from __future__ import annotations

import logging

from cecalc.calculator.savings import SavingsResult, compute
from cecalc.inputs.record import InputRecord
from cecalc.wizard.steps import FIRST_STEP, LAST_STEP, STEP_COUNT, STEP_INFO, Step

logger = logging.getLogger(__name__)


class Wizard:
    """
    Four-step input collector with a terminal "results shown" state.

    - `go_next` on the last step runs the calculation once and enters the
      terminal state; further `go_next`/`go_back` calls do nothing until `reset`.
    - Field updates replace one field of a frozen InputRecord and are ignored
      once results are shown.
    """

    def __init__(self, inputs: InputRecord | None = None) -> None:
        self._initial = inputs or InputRecord()
        self._inputs = self._initial
        self._step = FIRST_STEP
        self._results: SavingsResult | None = None

    # ---------- read side ----------
    @property
    def current_step_index(self) -> int:
        return int(self._step)

    @property
    def current_step(self) -> Step:
        return self._step

    @property
    def inputs(self) -> InputRecord:
        return self._inputs

    @property
    def results(self) -> SavingsResult | None:
        return self._results

    @property
    def is_complete(self) -> bool:
        return self._results is not None

    @property
    def progress(self) -> float:
        """Fraction for the progress bar: step 1 of 4 -> 0.25."""
        return (self.current_step_index + 1) / STEP_COUNT

    @property
    def next_button_label(self) -> str:
        return "Calculate Savings" if self._step == LAST_STEP else "Next Step"

    @staticmethod
    def step_label(index: int) -> str:
        return STEP_INFO[Step(index)].label

    @staticmethod
    def step_description(index: int) -> str:
        return STEP_INFO[Step(index)].description

    # ---------- transitions ----------
    def update_field(self, name: str, value) -> None:
        if self.is_complete:
            logger.info("Ignoring update to %s while results are shown", name)
            return
        self._inputs = self._inputs.with_field(name, value)

    def go_next(self) -> None:
        if self.is_complete:
            return
        if self._step < LAST_STEP:
            self._step = Step(self._step + 1)
            logger.debug("Advanced to step %s", self._step.name)
            return
        self._results = compute(self._inputs)
        logger.debug("Calculated results; total_savings=%s", self._results.total_savings)

    def go_back(self) -> None:
        if self.is_complete or self._step == FIRST_STEP:
            return
        self._step = Step(self._step - 1)
        logger.debug("Went back to step %s", self._step.name)

    def reset(self, keep_inputs: bool = False) -> None:
        """Back to step 0 with no results; inputs return to their initial values unless kept."""
        self._step = FIRST_STEP
        self._results = None
        if not keep_inputs:
            self._inputs = self._initial
        logger.debug("Wizard reset (keep_inputs=%s)", keep_inputs)
