# -*- coding: utf-8 -*-
"""
Quotation wizard steps.

Every step is a FormStep built from a list of FieldSpec definitions, so the
seven steps share one widget implementation and differ only in their fields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QFormLayout, QHBoxLayout, QHeaderView, QLabel, QLineEdit,
    QSpinBox, QTableWidget, QTextEdit, QVBoxLayout, QWidget
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from models.quotation import QuotationStep
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep, StepValidationResult

Options = List[Tuple[str, str]]


@dataclass(frozen=True)
class FieldSpec:
    """One input on a step form."""
    name: str
    kind: str = "text"  # text, multiline, choice, check, number, pieces
    options: Options = field(default_factory=list)
    placeholder: str = ""


SERVICE_LEVELS: Options = [
    ("fabrication", "Fabrication Only"),
    ("fabrication-delivery", "Fabrication & Delivery"),
    ("fabrication-delivery-installation", "Fabrication, Delivery & Installation"),
]

MATERIAL_SOURCES: Options = [
    ("luxone", "Luxone Own Material"),
    ("yourself", "By Yourself"),
    ("luxone-others", "Luxone Others"),
]

MATERIAL_TYPES: Options = [
    ("quartz", "Quartz"),
    ("porcelain", "Porcelain"),
]

WORKTOP_LAYOUTS: Options = [
    ("u-island", "U + Island"),
    ("u-shape", "U Shape"),
    ("l-island", "L + Island"),
    ("l-shape", "L Shape"),
    ("galley", "Galley (2 Pieces)"),
    ("1-piece", "1 Piece"),
    ("custom", "Custom"),
]

SINK_CATEGORIES: Options = [
    ("client", "Sink Provided by Client"),
    ("luxone", "Sink Provided by Luxone"),
]

SINK_TYPES: Options = [
    ("under-mounted", "Under Mounted Sink"),
    ("top-mounted", "Top Mounted Sink"),
]

TIMELINES: Options = [
    ("asap-2weeks", "ASAP to 2 Weeks"),
    ("3-6weeks", "3 to 6 Weeks"),
    ("6weeks-plus", "6 Weeks or more"),
]

PROJECT_TYPES: Options = [(value, value) for value in (
    "Kitchen - Ready for worktops now / ASAP",
    "Kitchen - Under renovation",
    "Kitchen - Planning stage",
    "Bathroom - Ready for worktops now / ASAP",
    "Bathroom - Under renovation",
    "Bathroom - Planning stage",
    "Commercial - Office space",
    "Commercial - Restaurant/Hotel",
    "Commercial - Retail",
    "Residential - New construction",
    "Residential - Renovation",
    "Other - Please specify in comments",
)]


STEP_FIELDS: Dict[QuotationStep, List[FieldSpec]] = {
    QuotationStep.SCOPE_OF_WORK: [
        FieldSpec("serviceLevel", "choice", SERVICE_LEVELS),
    ],
    QuotationStep.MATERIAL_OPTIONS: [
        FieldSpec("materialSource", "choice", MATERIAL_SOURCES),
        FieldSpec("materialType", "choice", MATERIAL_TYPES),
        FieldSpec("materialColor", placeholder="e.g. Golden River"),
    ],
    QuotationStep.WORKTOP_LAYOUT: [
        FieldSpec("worktopLayout", "choice", WORKTOP_LAYOUTS),
        FieldSpec("pieces", "pieces"),
    ],
    QuotationStep.DESIGN_OPTIONS: [
        FieldSpec("buttJointPolish", "check"),
        FieldSpec("customEdgeAddon", "check"),
        FieldSpec("hobCutOutAddon", "check"),
        FieldSpec("drainGroovesAddon", "check"),
        FieldSpec("smallHoles", "number"),
        FieldSpec("sinkCategory", "choice", SINK_CATEGORIES),
        FieldSpec("sinkType", "choice", SINK_TYPES),
    ],
    QuotationStep.TIMELINE: [
        FieldSpec("timeline", "choice", TIMELINES),
    ],
    QuotationStep.PROJECT_TYPE: [
        FieldSpec("projectType", "choice", PROJECT_TYPES),
    ],
    QuotationStep.CONTACT_INFO: [
        FieldSpec("name"),
        FieldSpec("email", placeholder="you@example.com"),
        FieldSpec("contactNumber", placeholder="0501234567"),
        FieldSpec("location"),
        FieldSpec("designerName"),
        FieldSpec("designerEmail"),
        FieldSpec("designerContact"),
        FieldSpec("additionalComments", "multiline"),
    ],
}


def field_spec(step_id: str, name: str) -> Optional[FieldSpec]:
    for spec in STEP_FIELDS.get(QuotationStep(step_id), []):
        if spec.name == name:
            return spec
    return None


def display_value(step_id: str, name: str, value: Any) -> str:
    """Human readable rendering of a stored field value."""
    spec = field_spec(step_id, name)
    if isinstance(value, bool):
        return tr("summary.yes") if value else tr("summary.no")
    if spec is not None and spec.kind == "choice":
        return dict(spec.options).get(value, str(value))
    if spec is not None and spec.kind == "pieces":
        return ", ".join(
            f"{letter}: {p.get('length', 0)} × {p.get('width', 0)} × {p.get('thickness', 0)} mm"
            for letter, p in sorted((value or {}).items())
        )
    return str(value)


class PiecesEditor(QWidget):
    """Editable table of worktop pieces keyed by letter (A, B, C...)."""

    changed = pyqtSignal()

    COLUMNS = ("length", "width", "thickness")

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget(0, len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels([tr(f"field.pieces.{c}") for c in self.COLUMNS])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setMinimumHeight(140)
        layout.addWidget(self.table)

        buttons = QHBoxLayout()
        self.btn_add = ActionButton(tr("field.pieces.add"), variant="outline")
        self.btn_add.clicked.connect(lambda: self.add_piece())
        buttons.addWidget(self.btn_add)
        self.btn_remove = ActionButton(tr("field.pieces.remove"), variant="secondary", width=140)
        self.btn_remove.clicked.connect(self.remove_last_piece)
        buttons.addWidget(self.btn_remove)
        buttons.addStretch()
        layout.addLayout(buttons)

    def add_piece(self, length: int = 0, width: int = 0, thickness: int = 20):
        row = self.table.rowCount()
        self.table.insertRow(row)
        for column, value in enumerate((length, width, thickness)):
            spin = QSpinBox()
            spin.setRange(0, 10000)
            spin.setSuffix(" mm")
            spin.setValue(int(value or 0))
            spin.valueChanged.connect(lambda _value: self.changed.emit())
            self.table.setCellWidget(row, column, spin)
        self._relabel()
        self.changed.emit()

    def remove_last_piece(self):
        if self.table.rowCount():
            self.table.removeRow(self.table.rowCount() - 1)
            self.changed.emit()

    def value(self) -> Dict[str, Dict[str, int]]:
        pieces = {}
        for row in range(self.table.rowCount()):
            pieces[_piece_letter(row)] = {
                name: self.table.cellWidget(row, column).value()
                for column, name in enumerate(self.COLUMNS)
            }
        return pieces

    def set_value(self, pieces: Optional[Dict[str, Dict[str, Any]]]):
        self.blockSignals(True)
        try:
            self.table.setRowCount(0)
            for _letter, piece in sorted((pieces or {}).items()):
                self.add_piece(piece.get("length", 0), piece.get("width", 0),
                               piece.get("thickness", 0))
        finally:
            self.blockSignals(False)

    def _relabel(self):
        self.table.setVerticalHeaderLabels(
            [_piece_letter(row) for row in range(self.table.rowCount())]
        )


def _piece_letter(row: int) -> str:
    return chr(ord("A") + row) if row < 26 else f"P{row + 1}"


class FormStep(BaseStep):
    """A wizard step rendered from FieldSpec definitions."""

    def __init__(self, step_id: QuotationStep, parent: Optional[QWidget] = None):
        super().__init__(QuotationStep(step_id).value, parent)
        self.quotation_step = QuotationStep(step_id)
        self.fields: List[FieldSpec] = STEP_FIELDS[self.quotation_step]
        self.widgets: Dict[str, QWidget] = {}

    def get_step_title(self) -> str:
        return tr(f"step.{self.step_id}.title")

    def get_step_description(self) -> str:
        return tr(f"step.{self.step_id}.subtitle")

    def setup_ui(self):
        title = QLabel(self.get_step_title())
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        self.main_layout.addWidget(title)

        subtitle = QLabel(self.get_step_description())
        subtitle.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.main_layout.addWidget(subtitle)

        form = QFormLayout()
        form.setSpacing(12)
        for spec in self.fields:
            widget = self._create_widget(spec)
            self.widgets[spec.name] = widget
            label = tr(f"field.{spec.name}")
            if StepValidator.is_required(self.quotation_step, spec.name):
                label += " *"
            form.addRow(label, widget)
        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def _create_widget(self, spec: FieldSpec) -> QWidget:
        if spec.kind == "choice":
            widget = QComboBox()
            widget.addItem(tr("field.select"), "")
            for value, label in spec.options:
                widget.addItem(label, value)
            widget.currentIndexChanged.connect(lambda _i, s=spec: self._on_field_changed(s))
        elif spec.kind == "check":
            widget = QCheckBox()
            widget.toggled.connect(lambda _c, s=spec: self._on_field_changed(s))
        elif spec.kind == "number":
            widget = QSpinBox()
            widget.setRange(0, 100)
            widget.valueChanged.connect(lambda _v, s=spec: self._on_field_changed(s))
        elif spec.kind == "multiline":
            widget = QTextEdit()
            widget.setFixedHeight(90)
            widget.textChanged.connect(lambda s=spec: self._on_field_changed(s))
        elif spec.kind == "pieces":
            widget = PiecesEditor()
            widget.changed.connect(lambda s=spec: self._on_field_changed(s))
        else:
            widget = QLineEdit()
            widget.setPlaceholderText(spec.placeholder)
            widget.textChanged.connect(lambda _t, s=spec: self._on_field_changed(s))
            widget.returnPressed.connect(self.advance_requested.emit)
        return widget

    def _on_field_changed(self, spec: FieldSpec):
        self.emit_data_changed({spec.name: self._read(spec)})

    def _read(self, spec: FieldSpec) -> Any:
        widget = self.widgets[spec.name]
        if spec.kind == "choice":
            return widget.currentData() or ""
        if spec.kind == "check":
            return widget.isChecked()
        if spec.kind == "number":
            return widget.value()
        if spec.kind == "multiline":
            return widget.toPlainText()
        if spec.kind == "pieces":
            return widget.value()
        return widget.text().strip()

    def _write(self, spec: FieldSpec, value: Any):
        widget = self.widgets[spec.name]
        if spec.kind == "choice":
            index = widget.findData(value or "")
            widget.setCurrentIndex(index if index >= 0 else 0)
        elif spec.kind == "check":
            widget.setChecked(bool(value))
        elif spec.kind == "number":
            widget.setValue(int(value or 0))
        elif spec.kind == "multiline":
            widget.setPlainText(value or "")
        elif spec.kind == "pieces":
            widget.set_value(value)
        else:
            widget.setText(value or "")

    def collect_data(self) -> Dict[str, Any]:
        self.initialize()
        return {spec.name: self._read(spec) for spec in self.fields}

    def populate_data(self, data: Dict[str, Any]):
        for spec in self.fields:
            self._write(spec, data.get(spec.name))

    def validate(self) -> StepValidationResult:
        is_valid, message = StepValidator.validate_step(self.quotation_step, self.collect_data())
        result = StepValidationResult(is_valid=True)
        if not is_valid:
            for line in message.splitlines():
                result.add_error(line)
        return result

    def set_field(self, name: str, value: Any):
        """Set a field as if the user had edited it."""
        self.initialize()
        spec = next(s for s in self.fields if s.name == name)
        self._write(spec, value)
        self._on_field_changed(spec)
