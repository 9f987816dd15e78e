# -*- coding: utf-8 -*-
"""
Step Navigator - the wizard state machine.

Handles:
- Step progression (advance/retreat/goto), clamped to the step range
- Recording step data
- The one-way transition to "submitted"
- Resetting to a fresh context

It does not validate data; callers decide whether a step may be left.
"""

from typing import Any, Callable, Dict, List

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Owns a WizardContext and every transition applied to it.

    Signals:
        step_changed(old, new): 1-based step numbers
        step_data_recorded(step_id)
        submitted(reference_number)
        state_reset()
    """

    step_changed = pyqtSignal(int, int)
    step_data_recorded = pyqtSignal(str)
    submitted = pyqtSignal(str)
    state_reset = pyqtSignal()

    def __init__(self, context_factory: Callable[[], WizardContext], parent=None):
        """
        Args:
            context_factory: builds a fresh context; called now and on every reset
        """
        super().__init__(parent)
        self._context_factory = context_factory
        self.context: WizardContext = context_factory()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def current_step(self) -> int:
        return self.context.current_step

    @property
    def total_steps(self) -> int:
        return self.context.total_steps

    @property
    def step_ids(self) -> List[str]:
        return list(self.context.step_ids)

    @property
    def is_submitted(self) -> bool:
        return self.context.is_submitted

    def can_advance(self) -> bool:
        return not self.is_submitted and self.current_step < self.total_steps

    def can_retreat(self) -> bool:
        return not self.is_submitted and self.current_step > 1

    def is_last_step(self) -> bool:
        return self.current_step == self.total_steps

    def step_id_for(self, number: int) -> str:
        """Step identifier for a 1-based number; out of range gives the first step."""
        if isinstance(number, int) and 1 <= number <= self.total_steps:
            return self.context.step_ids[number - 1]
        return self.context.step_ids[0]

    def active_step_id(self) -> str:
        return self.step_id_for(self.current_step)

    def step_data(self, step_id: str) -> Dict[str, Any]:
        return self.context.get_step_data(step_id)

    def progress_percentage(self) -> int:
        """Whole-number percentage of the current step over the total."""
        return round(self.current_step / self.total_steps * 100)

    # =========================================================================
    # Transitions
    # =========================================================================

    def advance(self) -> bool:
        """Move one step forward. Returns False when nothing changed."""
        if self.is_submitted:
            logger.debug("advance ignored: quotation already submitted")
            return False
        if self.current_step >= self.total_steps:
            logger.debug(f"advance clamped at last step ({self.total_steps})")
            return False
        return self._move_to(self.current_step + 1)

    def retreat(self) -> bool:
        """Move one step back. Returns False when nothing changed."""
        if self.is_submitted:
            logger.debug("retreat ignored: quotation already submitted")
            return False
        if self.current_step <= 1:
            logger.debug("retreat clamped at first step")
            return False
        return self._move_to(self.current_step - 1)

    def goto_step(self, number: int) -> bool:
        """Jump to a step. Out-of-range numbers are rejected, not clamped."""
        if self.is_submitted:
            logger.debug(f"goto_step({number}) ignored: quotation already submitted")
            return False
        if not isinstance(number, int) or not 1 <= number <= self.total_steps:
            logger.debug(f"goto_step rejected out-of-range step {number!r}")
            return False
        if number == self.current_step:
            return True
        return self._move_to(number)

    def record_step_data(self, step_id: str, data: Dict[str, Any]) -> bool:
        """Merge data into a step's slice. Never moves the cursor."""
        if self.is_submitted:
            logger.debug(f"record_step_data({step_id}) ignored: quotation already submitted")
            return False
        if step_id not in self.context.step_ids:
            logger.warning(f"record_step_data: unknown step '{step_id}'")
            return False

        self.context.merge_step_data(step_id, dict(data or {}))
        self.step_data_recorded.emit(step_id)
        return True

    def submit(self) -> bool:
        """One-way transition to submitted. Only reset() undoes it."""
        if self.is_submitted:
            logger.debug("submit ignored: quotation already submitted")
            return False

        self.context.mark_submitted()
        logger.info(f"Wizard {self.context.wizard_id} submitted as {self.context.reference_number}")
        self.submitted.emit(self.context.reference_number)
        return True

    def reset(self):
        """Discard the current context and start over at step 1."""
        old_step = self.current_step
        old_id = self.context.wizard_id
        self.context = self._context_factory()
        logger.info(f"Wizard {old_id} discarded, new wizard {self.context.wizard_id}")

        self.state_reset.emit()
        if old_step != self.current_step:
            self.step_changed.emit(old_step, self.current_step)

    def _move_to(self, number: int) -> bool:
        old_step = self.current_step
        self.context.current_step = number
        logger.info(f"Wizard step {old_step} -> {number} ({self.active_step_id()})")
        self.step_changed.emit(old_step, number)
        return True
