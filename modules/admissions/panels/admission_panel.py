"""Desktop form for admitting a patient and viewing the resulting bill."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict

from PySide6.QtCore import Signal
from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from models.patient import Category, InvalidCategory, PatientRecord, coerce_category
from notifications.panels.notifications_panel import NotificationsPanel
from services.admission_service import AdmissionService, format_patient_details

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FieldSpec:
    name: str
    label: str
    kind: str  # "line", "int", "text"
    placeholder: str = ""


_FIELD_SPECS = [
    _FieldSpec("patient_id", "Patient ID", "int", placeholder="Required"),
    _FieldSpec("name", "Name", "line", placeholder="Required"),
    _FieldSpec("age", "Age", "int", placeholder="Required"),
    _FieldSpec("contact_number", "Contact Number", "line"),
    _FieldSpec("symptoms", "Symptoms", "text"),
]


class AdmissionPanel(QWidget):
    """Intake form wired to an :class:`AdmissionService`."""

    patientAdmitted = Signal(object)

    def __init__(self, service: AdmissionService | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.service = service or AdmissionService()
        self.patient: PatientRecord | None = None
        self._field_widgets: Dict[str, QWidget] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        form = QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setSpacing(8)
        for spec in _FIELD_SPECS:
            widget = self._create_widget(spec)
            self._field_widgets[spec.name] = widget
            form.addRow(spec.label + ":", widget)

        self.category_combo = QComboBox()
        self.category_combo.setEditable(False)
        self.category_combo.addItems([category.value for category in Category])
        form.addRow("Service Type:", self.category_combo)
        layout.addLayout(form)

        self.admit_button = QPushButton("Admit Patient")
        self.admit_button.clicked.connect(self._on_admit)
        layout.addWidget(self.admit_button)

        self.details_label = QLabel("")
        self.details_label.setObjectName("admissionDetails")
        layout.addWidget(self.details_label)

        self.feed = NotificationsPanel(self.service.notifier, self)
        layout.addWidget(self.feed)

    # ----- UI helpers --------------------------------------------------
    def _create_widget(self, spec: _FieldSpec) -> QWidget:
        if spec.kind == "int":
            widget = QLineEdit()
            widget.setPlaceholderText(spec.placeholder)
            widget.setValidator(QIntValidator(parent=widget))
            return widget
        if spec.kind == "text":
            text = QPlainTextEdit()
            text.setPlaceholderText(spec.placeholder)
            text.setFixedHeight(80)
            return text
        widget = QLineEdit()
        widget.setPlaceholderText(spec.placeholder)
        return widget

    def set_field(self, name: str, value: str) -> None:
        widget = self._field_widgets[name]
        if isinstance(widget, QPlainTextEdit):
            widget.setPlainText(value)
        elif isinstance(widget, QLineEdit):
            widget.setText(value)

    # ----- Validation & admission --------------------------------------
    def _collect_values(self) -> PatientRecord:
        values: Dict[str, object] = {}
        for spec in _FIELD_SPECS:
            widget = self._field_widgets[spec.name]
            if isinstance(widget, QPlainTextEdit):
                text = widget.toPlainText().strip()
            else:
                text = widget.text().strip()
            if spec.kind == "int":
                if not text:
                    raise ValueError(f"{spec.label} is required")
                try:
                    values[spec.name] = int(text)
                except ValueError as exc:  # pragma: no cover - guarded by validator
                    raise ValueError(f"{spec.label} must be an integer") from exc
            else:
                values[spec.name] = text
        if not values["name"]:
            raise ValueError("Name is required")
        values["category"] = coerce_category(self.category_combo.currentText())
        return PatientRecord(**values)

    def _on_admit(self) -> None:
        try:
            patient = self._collect_values()
        except InvalidCategory as exc:
            logger.warning("Rejected admission: %s", exc)
            QMessageBox.warning(self, "Invalid service type", str(exc))
            return
        except ValueError as exc:
            QMessageBox.warning(self, "Missing information", str(exc))
            return

        result = self.service.admit(patient)
        self.patient = patient
        lines = format_patient_details(patient) + [result.messages[-1]]
        self.details_label.setText("\n".join(lines))
        self.patientAdmitted.emit(patient)


def get_admission_panel(service: AdmissionService | None = None, parent: QWidget | None = None) -> AdmissionPanel:
    return AdmissionPanel(service, parent)


__all__ = ["AdmissionPanel", "get_admission_panel"]
