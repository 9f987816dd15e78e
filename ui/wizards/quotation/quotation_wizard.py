# -*- coding: utf-8 -*-
"""
Quotation Wizard - seven-step worktop quotation intake.

Steps: scope of work, material options, worktop layout, design options,
timeline, project type, contact information. Submitting swaps the steps
for the quote summary and sends the quotation to the backend on a worker
thread; a failed send only raises a warning quoting the reference.
"""

from typing import Any, Callable, Dict, List, Optional, Set

from PyQt5.QtCore import QThread, pyqtSignal
from PyQt5.QtWidgets import QWidget

from controllers.base_controller import OperationResult
from models.quotation import QUOTATION_STEPS
from models.user import Session
from services.exceptions import ApiException, NetworkException
from services.quotation_service import QuotationService
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep, BaseWizard
from ui.wizards.quotation.quotation_context import QuotationContext
from ui.wizards.quotation.steps import FormStep
from ui.wizards.quotation.summary_view import QuoteSummaryView
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """Background worker that sends one submitted quotation."""

    result_ready = pyqtSignal(str, object)  # reference number, OperationResult

    def __init__(self, service: QuotationService, data: Dict[str, Any],
                 reference_number: str, token: Optional[str], parent=None):
        super().__init__(parent)
        self.service = service
        self.data = data
        self.reference_number = reference_number
        self.token = token

    def run(self):
        try:
            quotation_id = self.service.submit_quotation(self.data, self.reference_number, self.token)
            result = OperationResult.ok(quotation_id)
        except (ApiException, NetworkException) as e:
            logger.error(f"Quotation {self.reference_number} could not be sent: {e}")
            result = OperationResult.fail(str(e))
        except Exception as e:
            logger.error(f"Unexpected error sending {self.reference_number}: {e}", exc_info=True)
            result = OperationResult.fail(str(e))

        self.result_ready.emit(self.reference_number, result)


class QuotationWizard(BaseWizard):
    """Wizard that collects one quotation."""

    dashboard_requested = pyqtSignal()
    submission_finished = pyqtSignal(str, bool)  # reference number, delivered

    def __init__(self, quotation_service: Optional[QuotationService] = None,
                 session_provider: Optional[Callable[[], Optional[Session]]] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.quotation_service = quotation_service or QuotationService()
        self._session_provider = session_provider or (lambda: None)
        self._workers: Set[SubmissionWorker] = set()
        self.summary_view.dashboard_requested.connect(self.dashboard_requested.emit)

    def create_context(self) -> QuotationContext:
        return QuotationContext()

    def create_steps(self) -> List[BaseStep]:
        return [FormStep(step) for step in QUOTATION_STEPS]

    def create_summary_view(self) -> QuoteSummaryView:
        return QuoteSummaryView()

    def show_summary(self):
        self.summary_view.show_quotation(
            self.context.reference_number,
            self.context.to_dict()["step_data"]
        )

    def on_submit(self):
        context: QuotationContext = self.context
        session = self._session_provider()
        token = session.token if session else None

        worker = SubmissionWorker(self.quotation_service, context.flattened_data(),
                                  context.reference_number, token, parent=self)
        worker.result_ready.connect(self._on_submission_result)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        worker.finished.connect(worker.deleteLater)
        self._workers.add(worker)
        worker.start()

    def wait_for_workers(self, msecs: int = 5000):
        for worker in list(self._workers):
            worker.wait(msecs)

    def _on_submission_result(self, reference_number: str, result: OperationResult):
        if reference_number != self.context.reference_number:
            # The wizard was reset (new quotation or logout) while sending
            logger.info(f"Result for {reference_number} arrived after reset (sent={result.success})")
        elif not result.success:
            ErrorHandler.show_warning(
                self, tr("error.quotation.submit_failed", reference=reference_number)
            )
        self.submission_finished.emit(reference_number, result.success)
