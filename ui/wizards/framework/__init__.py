# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step wizard building blocks.

Provides base classes for creating wizards with a clamped step cursor,
per-step data, a one-way submit and reset to a fresh state.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep, StepValidationResult
from .error_boundary import ErrorBoundary
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'StepValidationResult',
    'ErrorBoundary',
    'WizardContext',
    'StepNavigator'
]
