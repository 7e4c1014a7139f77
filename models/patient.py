"""Domain model for patients passing through the admission desk.

A patient record is created by the intake collaborator (console or desktop
panel) from already-typed input.  The only field the billing layer ever
touches after construction is ``final_bill``, which is attached for display
once the bill has been computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class InvalidCategory(ValueError):
    """Raised when a value does not name one of the known patient categories."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid patient category: {value!r}")
        self.value = value


class Category(str, Enum):
    GENERAL = "General"
    EMERGENCY = "Emergency"
    INSURANCE = "Insurance"
    ICU = "ICU"
    DIAGNOSTIC = "Diagnostic"


# Service type menu numbering used by the intake screens.
CATEGORY_CHOICES: dict[int, Category] = {
    1: Category.GENERAL,
    2: Category.EMERGENCY,
    3: Category.INSURANCE,
    4: Category.ICU,
    5: Category.DIAGNOSTIC,
}


def coerce_category(value: Any) -> Category:
    """Return ``value`` as a :class:`Category` or raise :class:`InvalidCategory`.

    Accepts an existing member, its display label (``"ICU"``) or its member
    name (``"icu"``, case-insensitive).
    """

    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        text = value.strip()
        for member in Category:
            if text == member.value or text.upper() == member.name:
                return member
    raise InvalidCategory(value)


def category_from_choice(choice: int) -> Category:
    try:
        return CATEGORY_CHOICES[choice]
    except (KeyError, TypeError) as exc:
        raise InvalidCategory(choice) from exc


@dataclass(slots=True)
class PatientRecord:
    """In-memory representation of one admission's intake data."""

    patient_id: int
    name: str
    age: int
    contact_number: str
    symptoms: str
    category: Optional[Category] = None
    final_bill: Optional[float] = None


__all__ = [
    "CATEGORY_CHOICES",
    "Category",
    "InvalidCategory",
    "PatientRecord",
    "category_from_choice",
    "coerce_category",
]
