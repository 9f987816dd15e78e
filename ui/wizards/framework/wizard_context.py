# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard state and data.

Holds:
- The 1-based step cursor
- Data recorded per step
- The one-way submitted flag and its reference number

A context is never reused: starting over means building a new one.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from abc import ABC, abstractmethod
import copy
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses implement _generate_reference_number() for their
    reference format.
    """

    def __init__(self, step_ids: List[str]):
        if not step_ids:
            raise ValueError("a wizard needs at least one step")

        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.step_ids: List[str] = list(step_ids)
        self.current_step: int = 1

        self.step_data: Dict[str, Dict[str, Any]] = {}

        self.is_submitted: bool = False
        self.submitted_at: Optional[datetime] = None
        self.reference_number: Optional[str] = None

    @property
    def total_steps(self) -> int:
        return len(self.step_ids)

    @abstractmethod
    def _generate_reference_number(self) -> str:
        """Build the reference assigned at submission."""

    def merge_step_data(self, step_id: str, data: Dict[str, Any]):
        """Merge data into one step's slice, creating it if needed."""
        self.step_data.setdefault(step_id, {}).update(data)
        self.updated_at = datetime.now()

    def get_step_data(self, step_id: str) -> Dict[str, Any]:
        """Copy of one step's data, so callers cannot mutate the context."""
        return copy.deepcopy(self.step_data.get(step_id, {}))

    def mark_submitted(self):
        self.is_submitted = True
        self.submitted_at = datetime.now()
        self.reference_number = self._generate_reference_number()
        self.updated_at = self.submitted_at

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot of the context.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
            "current_step": self.current_step,
            "total_steps": self.total_steps,
            "is_submitted": self.is_submitted,
            "step_data": copy.deepcopy(self.step_data),
        }
