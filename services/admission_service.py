"""Admission desk orchestration: admit, bill, and publish notices."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from models.patient import PatientRecord
from notifications.models.notification import EventKind
from notifications.services.notifier import Notifier
from services.billing_service import (
    BillingStrategy,
    apply_billing,
    format_amount,
    select_strategy,
)

logger = logging.getLogger(__name__)

CURRENCY_PREFIX = "Rs."


@dataclass(frozen=True)
class AdmissionResult:
    final_amount: float
    messages: tuple[str, ...]


def admission_message(patient: PatientRecord) -> str:
    return f"Patient {patient.name} admitted."


def bill_message(amount: float) -> str:
    return f"Final Bill Amount: {CURRENCY_PREFIX}{format_amount(amount)}"


def format_patient_details(patient: PatientRecord) -> list[str]:
    return [
        "--- Patient Details ---",
        f"ID       : {patient.patient_id}",
        f"Name     : {patient.name}",
        f"Age      : {patient.age}",
        f"Contact  : {patient.contact_number}",
        f"Symptoms : {patient.symptoms}",
    ]


class AdmissionService:
    """Runs one patient through admission and billing.

    :meth:`admit` is the single entry point used by callers that only need the
    result.  The individual steps stay public so the console can print the
    patient details between the admission and billing notices.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self.notifier = notifier or Notifier()

    # ----- Public API --------------------------------------------------
    def admit(self, patient: PatientRecord) -> AdmissionResult:
        # Resolve the strategy first so a bad category fails before any notice.
        strategy = select_strategy(patient.category)
        messages = [self.admit_patient(patient)]
        amount = self.apply_billing(patient, strategy)
        messages.append(self.generate_bill(patient, amount))
        return AdmissionResult(final_amount=amount, messages=tuple(messages))

    def admit_patient(self, patient: PatientRecord) -> str:
        select_strategy(patient.category)
        message = admission_message(patient)
        logger.info("Admitting patient %s (%s)", patient.patient_id, patient.category)
        self.notifier.publish(EventKind.ADMISSION, message)
        return message

    def apply_billing(self, patient: PatientRecord, strategy: BillingStrategy | None = None) -> float:
        strategy = strategy or select_strategy(patient.category)
        amount = apply_billing(patient, strategy)
        patient.final_bill = amount
        return amount

    def generate_bill(self, patient: PatientRecord, amount: float) -> str:
        message = bill_message(amount)
        logger.info("Bill generated for patient %s: %s", patient.patient_id, format_amount(amount))
        self.notifier.publish(EventKind.BILLING, message)
        return message


__all__ = [
    "AdmissionResult",
    "AdmissionService",
    "CURRENCY_PREFIX",
    "admission_message",
    "bill_message",
    "format_patient_details",
]
