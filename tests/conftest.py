from __future__ import annotations

import os

import pytest

from models.patient import Category, PatientRecord

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture()
def make_patient():
    def _make(category=Category.GENERAL, **overrides) -> PatientRecord:
        values = {
            "patient_id": 101,
            "name": "Asha Rao",
            "age": 42,
            "contact_number": "555-0100",
            "symptoms": "Fever and cough",
            "category": category,
        }
        values.update(overrides)
        return PatientRecord(**values)

    return _make
