"""Exercise the :mod:`services.admission_service` orchestration."""

from __future__ import annotations

import logging

import pytest

from models.patient import Category, InvalidCategory
from notifications.models.notification import EventKind, Notification
from notifications.services.notifier import Notifier
from services.admission_service import (
    AdmissionResult,
    AdmissionService,
    bill_message,
    format_patient_details,
)
from services.billing_service import BillingStrategy


@pytest.fixture()
def recorded():
    notifier = Notifier()
    events: list[Notification] = []
    for kind in EventKind:
        notifier.subscribe(kind, events.append)
    return AdmissionService(notifier), events


def test_admit_publishes_admission_then_bill(recorded, make_patient) -> None:
    service, events = recorded
    result = service.admit(make_patient(Category.GENERAL, name="Asha Rao"))

    assert result == AdmissionResult(
        final_amount=2860.0,
        messages=("Patient Asha Rao admitted.", "Final Bill Amount: Rs.2860"),
    )
    assert [(e.kind, e.message) for e in events] == [
        (EventKind.ADMISSION, "Patient Asha Rao admitted."),
        (EventKind.BILLING, "Final Bill Amount: Rs.2860"),
    ]


@pytest.mark.parametrize(
    "category, amount, text",
    [
        (Category.EMERGENCY, 6400.0, "Rs.6400"),
        (Category.INSURANCE, 1500.0, "Rs.1500"),
        (Category.ICU, 9940.0, "Rs.9940"),
    ],
)
def test_admit_bills_by_category(recorded, make_patient, category, amount, text) -> None:
    service, events = recorded
    patient = make_patient(category)
    result = service.admit(patient)
    assert result.final_amount == amount
    assert text in events[-1].message
    assert patient.final_bill == amount


def test_admit_without_category_publishes_nothing(recorded, make_patient) -> None:
    service, events = recorded
    with pytest.raises(InvalidCategory):
        service.admit(make_patient(category=None))
    assert events == []


def test_admit_with_unknown_category_publishes_nothing(recorded, make_patient) -> None:
    service, events = recorded
    with pytest.raises(InvalidCategory):
        service.admit(make_patient(category="Maternity"))
    with pytest.raises(InvalidCategory):
        service.admit_patient(make_patient(category="Maternity"))
    assert events == []


def test_steps_can_be_run_individually(recorded, make_patient) -> None:
    service, events = recorded
    patient = make_patient(Category.INSURANCE, name="Ravi")

    assert service.admit_patient(patient) == "Patient Ravi admitted."
    assert [e.kind for e in events] == [EventKind.ADMISSION]

    amount = service.apply_billing(patient)
    assert amount == 1500.0
    assert patient.final_bill == 1500.0
    assert len(events) == 1

    assert service.generate_bill(patient, amount) == "Final Bill Amount: Rs.1500"
    assert [e.kind for e in events] == [EventKind.ADMISSION, EventKind.BILLING]


def test_apply_billing_accepts_explicit_strategy(make_patient) -> None:
    service = AdmissionService()
    patient = make_patient(Category.GENERAL)
    assert service.apply_billing(patient, BillingStrategy.INSURANCE_DISCOUNT) == 1000.0


def test_service_creates_its_own_notifier() -> None:
    service = AdmissionService()
    assert isinstance(service.notifier, Notifier)


def test_observer_failure_reaches_caller(make_patient) -> None:
    notifier = Notifier()

    def _boom(note: Notification) -> None:
        raise RuntimeError("printer jammed")

    notifier.subscribe(EventKind.BILLING, _boom)
    service = AdmissionService(notifier)
    with pytest.raises(RuntimeError, match="printer jammed"):
        service.admit(make_patient())


def test_admit_logs_admission_and_bill(make_patient, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="services.admission_service"):
        AdmissionService().admit(make_patient(Category.ICU, patient_id=7))
    assert "Admitting patient 7" in caplog.text
    assert "Bill generated for patient 7: 9940" in caplog.text


def test_bill_message_keeps_fractions() -> None:
    assert bill_message(2770.0) == "Final Bill Amount: Rs.2770"
    assert bill_message(1234.5) == "Final Bill Amount: Rs.1234.5"


def test_format_patient_details(make_patient) -> None:
    patient = make_patient(
        patient_id=12,
        name="Meera",
        age=30,
        contact_number="98765",
        symptoms="Headache",
    )
    assert format_patient_details(patient) == [
        "--- Patient Details ---",
        "ID       : 12",
        "Name     : Meera",
        "Age      : 30",
        "Contact  : 98765",
        "Symptoms : Headache",
    ]
